"""Builds the SubstitutionContext for each kind of generated document.

All derived values (today's date, the panel date, first-name-only forms) are
computed here so the template engine only ever substitutes.
"""

from collections.abc import Iterable
from datetime import date

from app.letters.derived import first_name, format_date
from app.letters.models import (
    Adviser,
    Candidate,
    Interview,
    NationalDiscernmentAdviser,
    PanelDate,
)
from app.templating.models import SectionRule, SubstitutionContext

SECOND_INTERVIEW = SectionRule(
    name="secondInterview",
    start="INTERVIEW B",
    end="Biography: {{2ndotherAdviser.biography}}",
)

# Interview slot prefixes used by letter placeholders, in interview order.
_INTERVIEW_PREFIXES = ("", "2nd")


def candidate_values(candidate: Candidate) -> dict[str, str]:
    return {
        "surname": candidate.surname,
        "forename": candidate.forename,
        "email": candidate.email,
        "questionCategory": candidate.question_category,
        "diocese": candidate.diocese,
        "sponsoringBishop": candidate.sponsoring_bishop,
        "ddoName": candidate.ddo_name,
        "ddoEmail": candidate.ddo_email,
        "revisedQuestion": candidate.revised_question,
    }


def _adviser_values(root: str, adviser: Adviser | None) -> dict[str, str]:
    if adviser is None:
        return {}
    return {
        f"{root}.title": adviser.title,
        f"{root}.email": adviser.email,
        f"{root}.mobile": adviser.mobile,
        f"{root}.biography": adviser.biography,
    }


def build_letter_context(
    candidate: Candidate,
    interviews: list[Interview],
    advisers: Iterable[Adviser],
    nda: NationalDiscernmentAdviser | None,
    panel_date: PanelDate | None,
    *,
    today: date,
    date_format: str,
) -> SubstitutionContext:
    """Context for a candidate letter covering up to two interviews."""
    by_name = {adviser.name: adviser for adviser in advisers}
    values: dict[str, object] = dict(candidate_values(candidate))
    values["date"] = format_date(today, date_format)
    values["panelDate"] = format_date(panel_date.date if panel_date else None, date_format)
    if nda is not None:
        values["nda.name"] = nda.name
        values["nda.email"] = nda.email
        values["nda.title"] = nda.title

    for prefix, interview in zip(_INTERVIEW_PREFIXES, interviews):
        lead = interview.lead_adviser_name
        other = interview.other_adviser_name
        values[f"{prefix}leadAdviserName"] = lead
        values[f"{prefix}otherAdviserName"] = other
        values.update(_adviser_values(f"{prefix}leadAdviser", by_name.get(lead)))
        values.update(_adviser_values(f"{prefix}otherAdviser", by_name.get(other)))

    sections = frozenset({SECOND_INTERVIEW.name}) if len(interviews) > 1 else frozenset()
    return SubstitutionContext(values=values, sections=sections)


def build_adviser_email_context(
    candidate: Candidate,
    interview: Interview,
    panel_date: PanelDate | None,
    *,
    date_format: str,
) -> SubstitutionContext:
    """Context for the email briefing advisers on an interview."""
    forename = first_name(candidate.forename)
    values: dict[str, object] = {
        "candidateName": " ".join(part for part in (forename, candidate.surname) if part),
        "adviserNames": ", ".join(first_name(name) for name in interview.adviser_names),
        "category": interview.category,
        "panelDate": format_date(panel_date.date if panel_date else None, date_format),
        "leadAdviserName": first_name(interview.lead_adviser_name),
        "surname": candidate.surname,
        "forename": forename,
        "email": candidate.email,
        "questionCategory": candidate.question_category,
        "paperworkReceived": candidate.paperwork_received,
        "diocese": candidate.diocese,
        "sponsoringBishop": candidate.sponsoring_bishop,
        "ddoName": candidate.ddo_name,
        "ddoEmail": candidate.ddo_email,
    }
    return SubstitutionContext(values=values)


def adviser_recipients(interview: Interview, advisers: Iterable[Adviser]) -> list[str]:
    """Known email addresses of the interview's advisers, in interview order."""
    by_name = {adviser.name: adviser for adviser in advisers}
    recipients: list[str] = []
    for name in interview.adviser_names:
        adviser = by_name.get(name)
        if adviser is not None and adviser.email:
            recipients.append(adviser.email)
    return recipients
