"""Turns an uploaded PDF or DOCX into one plain-text string."""

import unicodedata

from app.documents.base import BaseTextReader
from app.documents.exceptions import DocumentParseError, UnsupportedFileType
from app.documents.models import SUPPORTED_CONTENT_TYPES, RawDocument
from app.logging.logger import Log


class TextNormalizer:
    """Dispatches raw bytes to the reader registered for their content type."""

    def __init__(self, readers: dict[str, BaseTextReader]) -> None:
        self._readers = readers

    def normalize(self, document: RawDocument) -> str:
        """Decode *document* and return its text.

        Raises:
            UnsupportedFileType: if the content type is neither PDF nor DOCX.
            DocumentParseError: if the file is empty or cannot be decoded.
        """
        if document.media_type not in SUPPORTED_CONTENT_TYPES:
            raise UnsupportedFileType(document.content_type)
        reader = self._readers[document.media_type]
        if not document.content:
            raise DocumentParseError("Uploaded file is empty")

        text = reader.extract(document.content)
        Log.debug(f"Decoded {len(document.content)} bytes of {document.media_type}")
        return self._clean(text)

    @staticmethod
    def _clean(text: str) -> str:
        text = unicodedata.normalize("NFC", text)
        text = text.replace("\r\n", "\n").replace("\r", "\n")
        text = text.replace("\xa0", " ")
        return text.strip()
