class DocumentError(Exception):
    """Base exception for all document decoding errors."""


class UnsupportedFileType(DocumentError):
    """Raised when an upload's content type is neither PDF nor DOCX."""

    def __init__(self, content_type: str) -> None:
        super().__init__(f"Unsupported file type: '{content_type}'")
        self.content_type = content_type


class DocumentParseError(DocumentError):
    """Raised when the underlying PDF/DOCX decoder fails."""
