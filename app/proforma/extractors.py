"""Rule-based field extractors for pro-forma text.

Each extractor reads the full normalized text and returns one field, or an
empty string when its label is absent. Pro-forma labels are laid out
inconsistently (inline, in table cells, on their own line), so a value runs
from its label up to the next label the extractor knows about instead of a
fixed-width window. This is pattern matching over free text and stays
brittle by nature.

Matching is case-insensitive throughout.
"""

import re
from collections.abc import Callable

from app.proforma.models import FieldMatch

# ----------------------------------------------------------------------
# Patterns
# ----------------------------------------------------------------------

EMAIL_RE = re.compile(r"[\w.%+\-]+@[\w\-]+(?:\.[\w\-]+)+")
_DIGITS_RE = re.compile(r"\d(?:[ \t]*\d)*")
_DIOCESE_WORD_RE = re.compile(r"\bDiocese\b", re.IGNORECASE)


def _label(pattern: str) -> re.Pattern[str]:
    """Compile a label, swallowing an optional trailing colon."""
    return re.compile(pattern + r"[ \t]*:?", re.IGNORECASE)


_NAME = _label(r"\bName\b")
_ORIGINAL = _label(r"\bOriginal\b")
_DIOCESE = _label(r"\bDiocese\b")
_SPONSORING_BISHOP = _label(r"\bSponsoring\s+Bishop\b")
_CONTACT_DDO = _label(r"\bContact\s+DDO\b")
_CONTACT_DETAILS = _label(r"\bContact\s+Details\b")
_CONTACT_NUMBER = re.compile(r"\bContact\s+Number\s*:", re.IGNORECASE)
_EMAIL_LABEL = re.compile(r"\be-?mail\s*:", re.IGNORECASE)
_PHONE_LABEL = re.compile(r"\bPhone\s*:", re.IGNORECASE)
_QUESTION_HEADING = _label(r"3\.\s*Question\s+to\s+the\s+Panel\b")
_NEXT_HEADING_4 = re.compile(r"(?<![\d.])4\.(?!\d)")
_NUMBERED_HEADING = re.compile(r"^[ \t]*\d+\.[ \t]", re.MULTILINE)

_NAME_STOPS = (
    _ORIGINAL,
    _EMAIL_LABEL,
    _PHONE_LABEL,
    EMAIL_RE,
    _DIOCESE,
    _SPONSORING_BISHOP,
    _CONTACT_DDO,
    _CONTACT_DETAILS,
    _CONTACT_NUMBER,
    _NUMBERED_HEADING,
)
_DIOCESE_STOPS = (
    _NAME,
    _EMAIL_LABEL,
    _PHONE_LABEL,
    EMAIL_RE,
    _ORIGINAL,
    _SPONSORING_BISHOP,
    _CONTACT_DDO,
    _CONTACT_DETAILS,
    _CONTACT_NUMBER,
    _NUMBERED_HEADING,
)
_BISHOP_STOPS = (_CONTACT_DDO, _NUMBERED_HEADING)
_DDO_BLOCK_STOPS = (
    _CONTACT_DETAILS,
    _CONTACT_NUMBER,
    _SPONSORING_BISHOP,
    _DIOCESE,
    _NUMBERED_HEADING,
)
_DDO_NAME_STOPS = (_EMAIL_LABEL, _PHONE_LABEL, EMAIL_RE)
_DETAILS_BLOCK_STOPS = (
    _CONTACT_DDO,
    _SPONSORING_BISHOP,
    _DIOCESE,
    _NUMBERED_HEADING,
)
_CONTACT_NUMBER_STOPS = (
    _CONTACT_DDO,
    _SPONSORING_BISHOP,
    _DIOCESE,
    _NUMBERED_HEADING,
)


# ----------------------------------------------------------------------
# Helpers
# ----------------------------------------------------------------------


def _mask_emails(text: str) -> str:
    return EMAIL_RE.sub(lambda found: " " * len(found.group()), text)


def _span_after(
    text: str,
    label: re.Pattern[str],
    stops: tuple[re.Pattern[str], ...],
) -> tuple[str, bool] | None:
    """Return the text between the first *label* and the nearest stop.

    The flag is True when a stop was found; otherwise the span runs to the
    end of the text. Returns None when the label does not occur. Labels
    inside email addresses (ddo@diocese.org) are never matched; an address
    itself can still be a stop.
    """
    masked = _mask_emails(text)
    match = label.search(masked)
    if match is None:
        return None
    rest = text[match.end():]
    masked_rest = masked[match.end():]
    end = len(rest)
    for stop in stops:
        found = stop.search(rest if stop is EMAIL_RE else masked_rest)
        if found is not None and found.start() < end:
            end = found.start()
    return rest[:end], end < len(rest)


def _collapse(value: str) -> str:
    return " ".join(value.split())


def _first_line(value: str) -> str:
    return value.lstrip().split("\n", 1)[0].strip()


def _rest_of_line(text: str, label: re.Pattern[str]) -> str:
    span = _span_after(text, label, ())
    return _first_line(span[0]) if span else ""


def _first_email(text: str, exclude: str = "") -> str:
    for found in EMAIL_RE.finditer(text):
        if found.group().lower() != exclude.lower():
            return found.group()
    return ""


def _first_digits(text: str) -> str:
    found = _DIGITS_RE.search(text)
    return re.sub(r"\s", "", found.group()) if found else ""


def _ddo_block(text: str) -> tuple[str, bool] | None:
    return _span_after(text, _CONTACT_DDO, _DDO_BLOCK_STOPS)


# ----------------------------------------------------------------------
# Matchers
# ----------------------------------------------------------------------


def match_name(text: str) -> FieldMatch:
    """Full name after ``Name``, cut at ``Original``, the next label or line end."""
    span = _span_after(text, _NAME, _NAME_STOPS)
    if span is None:
        return FieldMatch()
    return FieldMatch(_collapse(_first_line(span[0])))


def match_diocese(text: str) -> FieldMatch:
    """Value after ``Diocese`` with the word "Diocese" itself removed.

    Falls back to the last token on the label's line when no value can be
    isolated before the next label.
    """
    span = _span_after(text, _DIOCESE, _DIOCESE_STOPS)
    if span is None:
        return FieldMatch()
    value = _collapse(_DIOCESE_WORD_RE.sub(" ", _first_line(span[0])))
    if value:
        return FieldMatch(value)
    tokens = _DIOCESE_WORD_RE.sub(" ", _rest_of_line(text, _DIOCESE)).split()
    return FieldMatch(tokens[-1] if tokens else "", scoped=False)


def match_sponsoring_bishop(text: str) -> FieldMatch:
    """Text after ``Sponsoring Bishop`` up to ``Contact DDO``."""
    span = _span_after(text, _SPONSORING_BISHOP, _BISHOP_STOPS)
    if span is None:
        return FieldMatch()
    value, terminated = span
    if terminated:
        return FieldMatch(_collapse(value))
    return FieldMatch(_first_line(value), scoped=False)


def match_ddo_name(text: str) -> FieldMatch:
    """Text after ``Contact DDO`` up to ``email:``, ``Phone:`` or an address."""
    block = _ddo_block(text)
    if block is None:
        return FieldMatch()
    value = block[0]
    end = len(value)
    for stop in _DDO_NAME_STOPS:
        found = stop.search(value)
        if found is not None and found.start() < end:
            end = found.start()
    if end < len(value):
        return FieldMatch(_collapse(value[:end]))
    return FieldMatch(_first_line(value), scoped=False)


def match_ddo_email(text: str) -> FieldMatch:
    """First address inside the ``Contact DDO`` block, else anywhere after it."""
    block = _ddo_block(text)
    if block is None:
        return FieldMatch()
    value, terminated = block
    email = _first_email(value)
    if email:
        return FieldMatch(email, scoped=terminated)
    after = _span_after(text, _CONTACT_DDO, ())
    return FieldMatch(_first_email(after[0]) if after else "", scoped=False)


def match_ddo_phone(text: str) -> FieldMatch:
    """Digits after ``Phone:``, internal spaces removed."""
    label = _PHONE_LABEL.search(text)
    if label is None:
        return FieldMatch()
    found = re.match(r"\s*(\d(?:[ \t]*\d)*)", text[label.end():])
    return FieldMatch(re.sub(r"\s", "", found.group(1)) if found else "")


def match_email(text: str) -> FieldMatch:
    """Candidate address.

    Prefers the ``Contact Details`` block. Otherwise takes the first address
    in the document that is not the DDO's.
    """
    block = _span_after(text, _CONTACT_DETAILS, _DETAILS_BLOCK_STOPS)
    if block is not None:
        email = _first_email(block[0])
        if email:
            return FieldMatch(email)
    ddo_email = match_ddo_email(text).value
    return FieldMatch(_first_email(text, exclude=ddo_email), scoped=False)


def match_contact_number(text: str) -> FieldMatch:
    """First digit run after ``Contact Number:``, skipping any addresses."""
    span = _span_after(text, _CONTACT_NUMBER, _CONTACT_NUMBER_STOPS)
    if span is None:
        return FieldMatch()
    return FieldMatch(_first_digits(EMAIL_RE.sub(" ", span[0])))


def match_question_to_the_panel(text: str) -> FieldMatch:
    """Block between ``3. Question to the Panel`` and the ``4.`` heading."""
    span = _span_after(text, _QUESTION_HEADING, (_NEXT_HEADING_4,))
    if span is None or not span[1]:
        return FieldMatch()
    return FieldMatch(_collapse(span[0]))


# ----------------------------------------------------------------------
# Public extractors
# ----------------------------------------------------------------------

MATCHERS: dict[str, Callable[[str], FieldMatch]] = {
    "name": match_name,
    "email": match_email,
    "diocese": match_diocese,
    "ddoName": match_ddo_name,
    "ddoEmail": match_ddo_email,
    "ddoPhone": match_ddo_phone,
    "sponsoringBishop": match_sponsoring_bishop,
    "questionToThePanel": match_question_to_the_panel,
    "contactNumber": match_contact_number,
}


def extract_field(field_name: str, text: str) -> str:
    """Run the matcher registered for *field_name* and return its value."""
    return MATCHERS[field_name](text).value


def extract_name(text: str) -> str:
    return match_name(text).value


def extract_email(text: str) -> str:
    return match_email(text).value


def extract_diocese(text: str) -> str:
    return match_diocese(text).value


def extract_ddo_name(text: str) -> str:
    return match_ddo_name(text).value


def extract_ddo_email(text: str) -> str:
    return match_ddo_email(text).value


def extract_ddo_phone(text: str) -> str:
    return match_ddo_phone(text).value


def extract_sponsoring_bishop(text: str) -> str:
    return match_sponsoring_bishop(text).value


def extract_question_to_the_panel(text: str) -> str:
    return match_question_to_the_panel(text).value


def extract_contact_number(text: str) -> str:
    return match_contact_number(text).value
