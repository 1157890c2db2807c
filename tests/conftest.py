import io

import docx
import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

PRO_FORMA_LINES = [
    "Candidates Panel Pro-forma",
    "1. Candidate",
    "Name Jane Mary Doe",
    "Diocese London",
    "Sponsoring Bishop The Rt Revd Sarah Mullally",
    "Contact DDO Revd Canon Peter Smith",
    "email: peter.smith@london.anglican.org",
    "Phone: 020 7932 1100",
    "Contact Details",
    "Email: jane.doe@example.com",
    "Contact Number: 07700 900123",
    "2. Background",
    "Jane has served as a licensed lay minister for ten years.",
    "3. Question to the Panel",
    "Is the candidate ready to proceed",
    "to training at this stage?",
    "4. Training Proposal",
    "Full-time residential training.",
]


def _pdf_from_lines(lines: list[str]) -> bytes:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    y = 740
    for line in lines:
        c.drawString(72, y, line)
        y -= 18
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    return _pdf_from_lines(["Hello PDF World"])


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def pro_forma_text() -> str:
    return "\n".join(PRO_FORMA_LINES)


@pytest.fixture()
def pro_forma_pdf_bytes() -> bytes:
    """A one-page pro-forma laid out one label per line."""
    return _pdf_from_lines(PRO_FORMA_LINES)


@pytest.fixture()
def pro_forma_docx_bytes() -> bytes:
    """The same pro-forma as a Word document, one paragraph per line."""
    document = docx.Document()
    for line in PRO_FORMA_LINES:
        document.add_paragraph(line)
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


@pytest.fixture()
def table_docx_bytes() -> bytes:
    """A Word pro-forma with labels and values in separate table cells."""
    document = docx.Document()
    document.add_paragraph("Candidates Panel Pro-forma")
    table = document.add_table(rows=2, cols=2)
    table.cell(0, 0).text = "Name"
    table.cell(0, 1).text = "John Smith"
    table.cell(1, 0).text = "Diocese"
    table.cell(1, 1).text = "Oxford"
    document.add_paragraph("Sponsoring Bishop")
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


@pytest.fixture()
def empty_docx_bytes() -> bytes:
    buf = io.BytesIO()
    docx.Document().save(buf)
    return buf.getvalue()
