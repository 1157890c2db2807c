from datetime import date, datetime


def first_name(full_name: str) -> str:
    """First whitespace-separated token, or empty string."""
    tokens = full_name.split()
    return tokens[0] if tokens else ""


def initials(full_name: str) -> str:
    return "".join(token[0].upper() for token in full_name.split())


def format_date(value: date | datetime | str | None, fmt: str) -> str:
    """Format a date, datetime or ISO-8601 string; empty input gives ''."""
    if not value:
        return ""
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    return value.strftime(fmt)
