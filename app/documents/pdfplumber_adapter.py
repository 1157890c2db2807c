import io

import pdfplumber

from app.documents.base import BaseTextReader


class PdfPlumberAdapter(BaseTextReader):
    """One block per PDF page, read with pdfplumber."""

    engine = "pdfplumber"

    def _read_blocks(self, content: bytes) -> list[str]:
        with pdfplumber.open(io.BytesIO(content)) as pdf:
            return [page.extract_text() or "" for page in pdf.pages]
