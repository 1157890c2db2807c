"""Records the document store holds, reduced to the fields generation reads."""

from dataclasses import dataclass, field
from typing import Literal

from app.proforma.models import ExtractedFieldSet

TemplateType = Literal["adviser_email", "candidate_letter", "panel_document"]
Outcome = Literal["Agreed", "Not Agreed"]


@dataclass(frozen=True)
class Candidate:
    id: str
    surname: str = ""
    forename: str = ""
    email: str = ""
    question_category: str = ""
    paperwork_received: str = ""
    diocese: str = ""
    sponsoring_bishop: str = ""
    ddo_name: str = ""
    ddo_email: str = ""
    ddo_phone: str = ""
    contact_number: str = ""
    question_asked: str = ""
    revised_question: str = ""
    nda_id: str = ""
    panel_date_id: str = ""
    outcome: Outcome | None = None

    @classmethod
    def from_pro_forma(
        cls, candidate_id: str, fields: ExtractedFieldSet, **extra: str
    ) -> "Candidate":
        """Pre-fill a candidate record from an extracted pro-forma."""
        return cls(
            id=candidate_id,
            surname=fields.surname,
            forename=fields.forename,
            email=fields.email,
            diocese=fields.diocese,
            sponsoring_bishop=fields.sponsoring_bishop,
            ddo_name=fields.ddo_name,
            ddo_email=fields.ddo_email,
            ddo_phone=fields.ddo_phone,
            contact_number=fields.contact_number,
            question_asked=fields.question_to_the_panel,
            **extra,
        )

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.forename, self.surname) if part)


@dataclass(frozen=True)
class Adviser:
    id: str
    name: str
    title: str = ""
    email: str = ""
    mobile: str = ""
    biography: str = ""

    @property
    def display_name(self) -> str:
        return f"{self.title} {self.name}" if self.title else self.name


@dataclass(frozen=True)
class Interview:
    id: str
    candidate_id: str
    adviser_names: list[str] = field(default_factory=list)
    lead_adviser_name: str = ""
    category: str = ""
    panel_date_id: str = ""

    @property
    def other_adviser_name(self) -> str:
        """First adviser on the interview who is not the lead."""
        return next(
            (name for name in self.adviser_names if name != self.lead_adviser_name),
            "",
        )


@dataclass(frozen=True)
class NationalDiscernmentAdviser:
    id: str
    name: str
    title: str = ""
    email: str = ""


@dataclass(frozen=True)
class PanelDate:
    id: str
    date: str


@dataclass(frozen=True)
class Template:
    name: str
    content: str
    type: TemplateType
    category: str
    general_category: str = ""
