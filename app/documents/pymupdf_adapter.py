import pymupdf

from app.documents.base import BaseTextReader
from app.documents.exceptions import DocumentParseError


class PyMuPdfAdapter(BaseTextReader):
    """One block per PDF page, read with PyMuPDF. Encrypted files are refused."""

    engine = "pymupdf"

    def _read_blocks(self, content: bytes) -> list[str]:
        with pymupdf.open(stream=content, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
            if doc.needs_pass:
                raise DocumentParseError("pymupdf extraction failed: document is encrypted")
            return [page.get_text() for page in doc]
