from app.documents.exceptions import DocumentError, DocumentParseError, UnsupportedFileType
from app.documents.factory import TextReaderFactory
from app.documents.models import RawDocument
from app.documents.normalizer import TextNormalizer

__all__ = [
    "DocumentError",
    "DocumentParseError",
    "RawDocument",
    "TextNormalizer",
    "TextReaderFactory",
    "UnsupportedFileType",
]
