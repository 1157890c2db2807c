from app.letters.models import Adviser, Candidate, Interview
from app.proforma.models import ExtractedFieldSet


class TestCandidate:
    def test_from_pro_forma(self) -> None:
        fields = ExtractedFieldSet(
            surname="Doe",
            forename="Jane",
            email="jane@example.com",
            ddo_phone="0123",
            question_to_the_panel="May she train?",
        )

        candidate = Candidate.from_pro_forma("c1", fields, question_category="Vocation")

        assert candidate.id == "c1"
        assert candidate.full_name == "Jane Doe"
        assert candidate.ddo_phone == "0123"
        assert candidate.question_asked == "May she train?"
        assert candidate.question_category == "Vocation"
        assert candidate.revised_question == ""

    def test_full_name_without_forename(self) -> None:
        assert Candidate(id="c1", surname="Doe").full_name == "Doe"


class TestAdviser:
    def test_display_name_with_title(self) -> None:
        assert Adviser(id="a1", name="Ruth Brown", title="Revd").display_name == "Revd Ruth Brown"

    def test_display_name_without_title(self) -> None:
        assert Adviser(id="a1", name="Ruth Brown").display_name == "Ruth Brown"


class TestInterview:
    def test_other_adviser_is_first_non_lead(self) -> None:
        interview = Interview(
            id="i1",
            candidate_id="c1",
            adviser_names=["Ruth", "Tom", "Sam"],
            lead_adviser_name="Ruth",
        )
        assert interview.other_adviser_name == "Tom"

    def test_no_other_adviser(self) -> None:
        interview = Interview(id="i1", candidate_id="c1", adviser_names=["Ruth"], lead_adviser_name="Ruth")
        assert interview.other_adviser_name == ""
