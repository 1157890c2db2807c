from abc import ABC, abstractmethod
from typing import ClassVar

from app.documents.exceptions import DocumentParseError
from app.logging.logger import Log


class BaseTextReader(ABC):
    """Contract for all document text extraction adapters.

    An adapter only splits a document into text blocks (pages, paragraphs,
    table cells). ``extract`` joins them one per line and turns any decoder
    failure into a DocumentParseError naming the engine.
    """

    engine: ClassVar[str]

    def extract(self, content: bytes) -> str:
        """Extract plain text from raw document bytes.

        Raises:
            DocumentParseError: if decoding fails for any reason.
        """
        try:
            blocks = self._read_blocks(content)
        except DocumentParseError:
            raise
        except Exception as exc:
            raise DocumentParseError(f"{self.engine} extraction failed: {exc}") from exc
        Log.debug(f"{self.engine} read {len(blocks)} text blocks")
        return "\n".join(blocks)

    @abstractmethod
    def _read_blocks(self, content: bytes) -> list[str]:
        raise NotImplementedError
