from typing import ClassVar

from app.config.settings import Settings
from app.documents.base import BaseTextReader
from app.documents.docx_adapter import DocxAdapter
from app.documents.models import DOCX, PDF
from app.documents.pdfplumber_adapter import PdfPlumberAdapter
from app.documents.pymupdf_adapter import PyMuPdfAdapter


class TextReaderFactory:
    """Builds the reader for each supported content type.

    DOCX has a single reader; PDF has one per engine, chosen by
    ``Settings.pdf_engine``.
    """

    PDF_ADAPTERS: ClassVar[dict[str, type[BaseTextReader]]] = {
        adapter.engine: adapter for adapter in (PdfPlumberAdapter, PyMuPdfAdapter)
    }

    @classmethod
    def create_pdf_reader(cls, settings: Settings) -> BaseTextReader:
        adapter_cls = cls.PDF_ADAPTERS.get(settings.pdf_engine.lower())
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{settings.pdf_engine}'. "
                f"Choose from: {sorted(cls.PDF_ADAPTERS)}"
            )
        return adapter_cls()

    @classmethod
    def create_readers(cls, settings: Settings) -> dict[str, BaseTextReader]:
        """Map every supported content type to a ready reader."""
        return {
            PDF: cls.create_pdf_reader(settings),
            DOCX: DocxAdapter(),
        }
