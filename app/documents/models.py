from dataclasses import dataclass

PDF = "application/pdf"
DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

SUPPORTED_CONTENT_TYPES = frozenset({PDF, DOCX})


def canonical_content_type(content_type: str | None) -> str:
    """Lower-case a MIME type and drop parameters such as ``; charset=...``."""
    return (content_type or "").split(";", 1)[0].strip().lower()


@dataclass(frozen=True)
class RawDocument:
    """An uploaded file held in memory for the duration of one request."""

    content: bytes
    content_type: str
    filename: str = ""

    @property
    def media_type(self) -> str:
        return canonical_content_type(self.content_type)
