from collections.abc import Callable

from app.documents.normalizer import TextNormalizer
from app.logging.logger import Log
from app.proforma.models import ExtractedFieldSet, FieldMatch
from app.proforma.name_splitter import split_name
from app.proforma.pipeline import ExtractionContext, ExtractionStep


class NormalizeTextStep(ExtractionStep):
    def __init__(self, normalizer: TextNormalizer) -> None:
        self._normalizer = normalizer

    def run(self, context: ExtractionContext) -> ExtractionContext:
        context.text = self._normalizer.normalize(context.document)
        Log.info(
            f"Extracted {len(context.text)} chars from '{context.document.filename}'"
        )
        Log.debug(f"Extracted text:\n{context.text}")
        return context


class ExtractFieldsStep(ExtractionStep):
    """Runs every matcher against the same text; none depends on another."""

    def __init__(self, matchers: dict[str, Callable[[str], FieldMatch]]) -> None:
        self._matchers = matchers

    def run(self, context: ExtractionContext) -> ExtractionContext:
        context.matches = {
            name: matcher(context.text) for name, matcher in self._matchers.items()
        }
        return context


class SplitNameStep(ExtractionStep):
    def run(self, context: ExtractionContext) -> ExtractionContext:
        full_name = context.matches.get("name", FieldMatch()).value
        context.split_name = split_name(full_name)
        return context


class AssembleFieldSetStep(ExtractionStep):
    def run(self, context: ExtractionContext) -> ExtractionContext:
        def value(name: str) -> str:
            return context.matches.get(name, FieldMatch()).value

        context.fields = ExtractedFieldSet(
            surname=context.split_name.surname,
            forename=context.split_name.forename,
            email=value("email"),
            diocese=value("diocese"),
            ddo_name=value("ddoName"),
            ddo_email=value("ddoEmail"),
            ddo_phone=value("ddoPhone"),
            sponsoring_bishop=value("sponsoringBishop"),
            question_to_the_panel=value("questionToThePanel"),
            contact_number=value("contactNumber"),
        )
        return context
