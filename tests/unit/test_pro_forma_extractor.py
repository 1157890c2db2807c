from unittest.mock import MagicMock, patch

import pytest

from app.config.settings import Settings
from app.documents.exceptions import UnsupportedFileType
from app.documents.models import RawDocument
from app.proforma.extractor import ProFormaExtractor, build_pro_forma_extractor
from app.proforma.extractors import MATCHERS
from app.proforma.models import ExtractedFieldSet, FieldMatch
from app.proforma.pipeline import ExtractionContext, ExtractionStep
from app.proforma.steps import (
    AssembleFieldSetStep,
    ExtractFieldsStep,
    NormalizeTextStep,
    SplitNameStep,
)


class _FixedTextStep(ExtractionStep):
    def __init__(self, text: str) -> None:
        self._text = text

    def run(self, context: ExtractionContext) -> ExtractionContext:
        context.text = self._text
        return context


def _document() -> RawDocument:
    return RawDocument(content=b"%PDF", content_type="application/pdf", filename="pf.pdf")


def _extractor(text: str) -> ProFormaExtractor:
    return ProFormaExtractor(
        steps=[
            _FixedTextStep(text),
            ExtractFieldsStep(MATCHERS),
            SplitNameStep(),
            AssembleFieldSetStep(),
        ]
    )


class TestProFormaExtractor:
    def test_full_pro_forma(self, pro_forma_text: str) -> None:
        result = _extractor(pro_forma_text).extract(_document())

        assert result.fields == ExtractedFieldSet(
            surname="Doe",
            forename="Jane Mary",
            email="jane.doe@example.com",
            diocese="London",
            ddo_name="Revd Canon Peter Smith",
            ddo_email="peter.smith@london.anglican.org",
            ddo_phone="02079321100",
            sponsoring_bishop="The Rt Revd Sarah Mullally",
            question_to_the_panel=(
                "Is the candidate ready to proceed to training at this stage?"
            ),
            contact_number="07700900123",
        )
        assert result.text_length == len(pro_forma_text)
        assert result.low_confidence == []

    def test_unlabelled_text_gives_all_empty_fields(self) -> None:
        result = _extractor("lorem ipsum").extract(_document())

        assert set(result.fields.to_dict().values()) == {""}
        assert result.fields.empty_fields() == list(result.fields.to_dict())

    def test_extraction_is_idempotent(self, pro_forma_text: str) -> None:
        extractor = _extractor(pro_forma_text)
        assert extractor.extract(_document()) == extractor.extract(_document())

    def test_fallback_values_flagged_low_confidence(self) -> None:
        text = "Contact DDO Revd B email: ddo@x.org\nReach me at me@home.net"
        result = _extractor(text).extract(_document())

        assert result.fields.email == "me@home.net"
        assert result.low_confidence == ["ddoEmail", "email"]

    def test_steps_run_in_order(self) -> None:
        calls: list[str] = []

        def step(name: str) -> MagicMock:
            mock = MagicMock(spec=ExtractionStep)

            def run(context: ExtractionContext) -> ExtractionContext:
                calls.append(name)
                if name == "last":
                    context.fields = ExtractedFieldSet()
                return context

            mock.run.side_effect = run
            return mock

        ProFormaExtractor([step("first"), step("middle"), step("last")]).extract(
            _document()
        )
        assert calls == ["first", "middle", "last"]

    def test_upload_logged_once_with_size(self, pro_forma_text: str) -> None:
        with patch("app.proforma.extractor.Log") as mock_log:
            _extractor(pro_forma_text).extract(_document())

        sized = [c for c in mock_log.info.call_args_list if "size" in c.kwargs]
        assert len(sized) == 1
        assert sized[0].kwargs == {"content_type": "application/pdf", "size": 4}
        assert "pf.pdf" in sized[0].args[0]

    def test_missing_assemble_step_raises(self) -> None:
        extractor = ProFormaExtractor([_FixedTextStep("Name Jo Smith")])
        with pytest.raises(ValueError, match="fields must be set"):
            extractor.extract(_document())

    def test_normalizer_errors_propagate(self) -> None:
        normalizer = MagicMock()
        normalizer.normalize.side_effect = UnsupportedFileType("image/png")
        extractor = ProFormaExtractor([NormalizeTextStep(normalizer)])

        with pytest.raises(UnsupportedFileType):
            extractor.extract(_document())


class TestSteps:
    def test_split_name_without_name_match(self) -> None:
        context = SplitNameStep().run(ExtractionContext(document=_document()))
        assert context.split_name.surname == ""
        assert context.split_name.forename == ""

    def test_assemble_maps_camel_case_matches(self) -> None:
        context = ExtractionContext(document=_document())
        context.matches = {
            "ddoName": FieldMatch("Revd B"),
            "sponsoringBishop": FieldMatch("Bp C"),
        }
        context = AssembleFieldSetStep().run(context)

        assert context.fields is not None
        assert context.fields.ddo_name == "Revd B"
        assert context.fields.sponsoring_bishop == "Bp C"
        assert context.fields.email == ""


class TestBuildProFormaExtractor:
    def test_builds_four_step_pipeline(self) -> None:
        extractor = build_pro_forma_extractor(Settings())
        assert [type(step) for step in extractor._steps] == [
            NormalizeTextStep,
            ExtractFieldsStep,
            SplitNameStep,
            AssembleFieldSetStep,
        ]
