from app.config.settings import Settings
from app.documents.factory import TextReaderFactory
from app.documents.models import RawDocument
from app.documents.normalizer import TextNormalizer
from app.logging.logger import Log
from app.proforma.extractors import MATCHERS
from app.proforma.models import ExtractionResult
from app.proforma.pipeline import ExtractionContext, ExtractionStep
from app.proforma.steps import (
    AssembleFieldSetStep,
    ExtractFieldsStep,
    NormalizeTextStep,
    SplitNameStep,
)


class ProFormaExtractor:
    """Orchestrates pro-forma extraction.

    Pipeline: normalize -> extract fields -> split name -> assemble.
    A decoding failure aborts the whole run; a field that cannot be found
    is simply left empty.
    """

    def __init__(self, steps: list[ExtractionStep]) -> None:
        self._steps = steps

    def extract(self, document: RawDocument) -> ExtractionResult:
        Log.info(
            f"Extracting pro-forma fields from '{document.filename}'",
            content_type=document.media_type,
            size=len(document.content),
        )
        context = ExtractionContext(document=document)
        for step in self._steps:
            context = step.run(context)

        if context.fields is None:
            raise ValueError("ExtractionContext.fields must be set by the final step")

        low_confidence = sorted(
            name
            for name, match in context.matches.items()
            if match.value and not match.scoped
        )
        result = ExtractionResult(
            fields=context.fields,
            text_length=len(context.text),
            low_confidence=low_confidence,
        )
        Log.info(
            f"Pro-forma extraction complete for '{document.filename}'",
            empty=result.fields.empty_fields(),
            low_confidence=low_confidence,
        )
        return result


def build_pro_forma_extractor(settings: Settings) -> ProFormaExtractor:
    """Build a ProFormaExtractor with the configured document readers."""
    normalizer = TextNormalizer(TextReaderFactory.create_readers(settings))
    return ProFormaExtractor(
        steps=[
            NormalizeTextStep(normalizer),
            ExtractFieldsStep(MATCHERS),
            SplitNameStep(),
            AssembleFieldSetStep(),
        ]
    )
