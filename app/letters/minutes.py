"""Composes the text of panel meeting minutes, one entry per candidate."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from app.letters.derived import initials
from app.letters.models import Adviser, Candidate, Interview, NationalDiscernmentAdviser

MINUTES_TITLE = "Cases"


@dataclass(frozen=True)
class MinutesEntry:
    heading: str
    body: str


def _join_names(names: list[str]) -> str:
    if len(names) <= 1:
        return "".join(names)
    return f"{', '.join(names[:-1])} and {names[-1]}"


def _interviewed_by(interview: Interview, advisers: Mapping[str, Adviser]) -> str:
    names = [
        advisers[name].display_name if name in advisers else name
        for name in interview.adviser_names
    ]
    return f"was interviewed by {_join_names(names)}"


def _interview_text(
    candidate: Candidate,
    interviews: list[Interview],
    advisers: Mapping[str, Adviser],
) -> str:
    if not interviews:
        return "was not interviewed"
    if len(interviews) == 1:
        return f"had one interview and {_interviewed_by(interviews[0], advisers)}"
    details = ", and ".join(_interviewed_by(interview, advisers) for interview in interviews)
    return f"had {len(interviews)} interviews. {candidate.forename} {details}"


def _minutes_entry(
    candidate: Candidate,
    interviews: list[Interview],
    advisers: Mapping[str, Adviser],
    nda: NationalDiscernmentAdviser | None,
) -> MinutesEntry:
    nda_initials = initials(nda.name) if nda is not None else ""
    decision = "was glad to agree to" if candidate.outcome == "Agreed" else "did not agree to"
    body = (
        f"The Candidates Panel was asked by the Diocese of {candidate.diocese or '[Diocese]'} "
        f"{candidate.revised_question or '[revised question]'}. "
        f"Prior to the meeting {candidate.forename} "
        f"{_interview_text(candidate, interviews, advisers)}. "
        "In the light of their reports and papers received from the Diocese, and after "
        f"careful discussion, the Panel {decision} the request."
    )
    return MinutesEntry(
        heading=f"{candidate.full_name} ({nda_initials or 'N/A'})",
        body=body,
    )


def compose_minutes(
    candidates: Iterable[Candidate],
    interviews: Iterable[Interview],
    advisers: Iterable[Adviser],
    ndas: Iterable[NationalDiscernmentAdviser],
) -> list[MinutesEntry]:
    """One minutes entry per candidate, ordered by question category then name."""
    advisers_by_name = {adviser.name: adviser for adviser in advisers}
    ndas_by_id = {nda.id: nda for nda in ndas}
    interviews_by_candidate: dict[str, list[Interview]] = {}
    for interview in interviews:
        interviews_by_candidate.setdefault(interview.candidate_id, []).append(interview)

    ordered = sorted(
        candidates,
        key=lambda c: (c.question_category.lower(), c.surname.lower(), c.forename.lower()),
    )
    return [
        _minutes_entry(
            candidate,
            interviews_by_candidate.get(candidate.id, []),
            advisers_by_name,
            ndas_by_id.get(candidate.nda_id),
        )
        for candidate in ordered
    ]


def render_minutes_text(entries: list[MinutesEntry]) -> str:
    blocks = [MINUTES_TITLE] + [f"{entry.heading}\n{entry.body}" for entry in entries]
    return "\n\n".join(blocks)
