from dataclasses import dataclass

# Object roots whose properties render the marker when missing.
ADVISER_ROOTS = frozenset({"leadAdviser", "otherAdviser", "2ndleadAdviser", "2ndotherAdviser"})
ADVISER_NAME_TOKENS = frozenset(
    {
        "adviserNames",
        "leadAdviserName",
        "otherAdviserName",
        "2ndleadAdviserName",
        "2ndotherAdviserName",
    }
)


@dataclass(frozen=True)
class FallbackPolicy:
    """What an unresolved or empty placeholder turns into.

    Adviser names and adviser details render ``marker``; every other token,
    including unknown ones, renders the empty string.
    """

    marker: str = "[Not available]"
    marked_roots: frozenset[str] = ADVISER_ROOTS
    marked_tokens: frozenset[str] = ADVISER_NAME_TOKENS

    def fallback_for(self, token: str) -> str:
        if token in self.marked_tokens:
            return self.marker
        root, _, attr = token.partition(".")
        if attr and root in self.marked_roots:
            return self.marker
        return ""
