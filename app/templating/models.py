from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class TextNode:
    text: str


@dataclass(frozen=True)
class PlaceholderNode:
    """A ``{{token}}`` or ``{{object.property}}`` reference."""

    token: str


@dataclass(frozen=True)
class SectionNode:
    """A span of template kept only when its name is visible in the context."""

    name: str
    children: tuple["TextNode | PlaceholderNode", ...] = ()


Node = TextNode | PlaceholderNode | SectionNode


@dataclass(frozen=True)
class SectionRule:
    """Marks an optional section by the literal text that opens and closes it.

    Both sentinels belong to the section and are removed with it.
    """

    name: str
    start: str
    end: str


@dataclass(frozen=True)
class ParsedTemplate:
    nodes: tuple[Node, ...] = ()


@dataclass(frozen=True)
class SubstitutionContext:
    """Values available to a render, plus the names of visible sections.

    A dotted token such as ``nda.name`` is looked up as the flat key first,
    then as attribute/key ``name`` of ``values["nda"]``.
    """

    values: Mapping[str, object] = field(default_factory=dict)
    sections: frozenset[str] = frozenset()

    def resolve(self, token: str) -> str | None:
        if token in self.values:
            return self._as_text(self.values[token])
        if "." not in token:
            return None
        root, attr = token.split(".", 1)
        obj = self.values.get(root)
        if obj is None:
            return None
        if isinstance(obj, Mapping):
            return self._as_text(obj.get(attr))
        return self._as_text(getattr(obj, attr, None))

    @staticmethod
    def _as_text(value: object) -> str | None:
        if value is None:
            return None
        return value if isinstance(value, str) else str(value)
