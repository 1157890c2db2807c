from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from app.documents.models import RawDocument
from app.proforma.models import ExtractedFieldSet, FieldMatch, SplitName


@dataclass(slots=True)
class ExtractionContext:
    document: RawDocument
    text: str = ""
    matches: dict[str, FieldMatch] = field(default_factory=dict)
    split_name: SplitName = field(default_factory=SplitName)
    fields: ExtractedFieldSet | None = None


class ExtractionStep(ABC):
    @abstractmethod
    def run(self, context: ExtractionContext) -> ExtractionContext:
        raise NotImplementedError
