from unittest.mock import patch

import pytest

from app.documents.docx_adapter import DocxAdapter
from app.documents.factory import TextReaderFactory
from app.documents.models import DOCX, PDF
from app.documents.pdfplumber_adapter import PdfPlumberAdapter
from app.documents.pymupdf_adapter import PyMuPdfAdapter


def _make_settings(pdf_engine: str):  # type: ignore[no-untyped-def]
    """Create a minimal Settings-like object with only pdf_engine."""
    with patch("app.config.settings.Settings") as mock_cls:
        settings = mock_cls.return_value
        settings.pdf_engine = pdf_engine
        return settings


class TestTextReaderFactory:
    def test_creates_pdfplumber_adapter(self) -> None:
        reader = TextReaderFactory.create_pdf_reader(_make_settings("pdfplumber"))
        assert isinstance(reader, PdfPlumberAdapter)

    def test_creates_pymupdf_adapter(self) -> None:
        reader = TextReaderFactory.create_pdf_reader(_make_settings("pymupdf"))
        assert isinstance(reader, PyMuPdfAdapter)

    def test_is_case_insensitive(self) -> None:
        reader = TextReaderFactory.create_pdf_reader(_make_settings("PyMuPDF"))
        assert isinstance(reader, PyMuPdfAdapter)

    def test_raises_for_unknown_engine(self) -> None:
        with pytest.raises(ValueError, match="Unknown PDF engine"):
            TextReaderFactory.create_pdf_reader(_make_settings("unknown"))

    def test_readers_cover_pdf_and_docx(self) -> None:
        readers = TextReaderFactory.create_readers(_make_settings("pdfplumber"))
        assert set(readers) == {PDF, DOCX}
        assert isinstance(readers[DOCX], DocxAdapter)

    def test_engines_registered_by_adapter_name(self) -> None:
        assert TextReaderFactory.PDF_ADAPTERS == {
            "pdfplumber": PdfPlumberAdapter,
            "pymupdf": PyMuPdfAdapter,
        }
