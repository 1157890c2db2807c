import io

import docx
from docx.table import Table
from docx.text.paragraph import Paragraph

from app.documents.base import BaseTextReader


class DocxAdapter(BaseTextReader):
    """Reads the body of a Word document using python-docx.

    Paragraphs and table cells are emitted in document order, one block
    each. Formatting is discarded.
    """

    engine = "python-docx"

    def _read_blocks(self, content: bytes) -> list[str]:
        document = docx.Document(io.BytesIO(content))
        blocks: list[str] = []
        for block in document.iter_inner_content():
            if isinstance(block, Paragraph):
                blocks.append(block.text)
            elif isinstance(block, Table):
                blocks.extend(self._table_cells(block))
        return blocks

    def _table_cells(self, table: Table) -> list[str]:
        cells: list[str] = []
        for row in table.rows:
            previous: object = None
            for cell in row.cells:
                # Horizontally merged cells come back once per grid column.
                if cell._tc is previous:
                    continue
                previous = cell._tc
                cells.append(cell.text)
        return cells
