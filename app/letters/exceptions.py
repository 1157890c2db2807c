class LetterError(Exception):
    """Base exception for document generation errors."""


class TemplateNotFoundError(LetterError):
    """Raised when no stored template matches the requested type/category/name."""


class TemplateSelectionError(LetterError):
    """Raised when a candidate's interviews do not map to any template layout."""
