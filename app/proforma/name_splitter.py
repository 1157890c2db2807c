from app.proforma.models import SplitName


def split_name(full_name: str) -> SplitName:
    """Split a full name on its last token.

    "Jane Mary Doe" -> forename "Jane Mary", surname "Doe".
    A single token is taken as the surname.
    """
    tokens = full_name.split()
    if not tokens:
        return SplitName()
    return SplitName(surname=tokens[-1], forename=" ".join(tokens[:-1]))
