from collections.abc import Iterable

from app.letters.exceptions import TemplateNotFoundError, TemplateSelectionError
from app.letters.models import Candidate, Interview, Template


def letter_template_name(interviews: list[Interview]) -> str:
    """Name of the candidate letter layout for this set of interviews."""
    if len(interviews) > 2:
        raise TemplateSelectionError(f"Unexpected number of interviews: {len(interviews)}")
    if len(interviews) == 2:
        return "x2 Interviews x2 Advisers"
    adviser_count = sum(len(interview.adviser_names) for interview in interviews)
    return "x1 Interview x2 Advisers" if adviser_count > 1 else "x1 Interview x1 Adviser"


def adviser_email_pattern(interview: Interview) -> str:
    return "x2 Adviser" if len(interview.adviser_names) > 1 else "x1 Adviser"


def find_letter_template(
    templates: Iterable[Template],
    candidate: Candidate,
    interviews: list[Interview],
) -> Template:
    name = letter_template_name(interviews)
    for template in templates:
        if (
            template.type == "candidate_letter"
            and template.category == candidate.question_category
            and template.name == name
        ):
            return template
    raise TemplateNotFoundError(
        f"No matching template found for category: {candidate.question_category} "
        f"and name: {name}"
    )


def find_adviser_email_template(
    templates: Iterable[Template],
    category: str,
    interview: Interview,
) -> Template:
    pattern = adviser_email_pattern(interview).lower()
    for template in templates:
        if (
            template.type == "adviser_email"
            and template.category == category
            and pattern in template.name.lower()
        ):
            return template
    raise TemplateNotFoundError(f"No template found for {category} with {pattern}")
