from dataclasses import dataclass, field

# Response keys, in the order the upload endpoint returns them.
FIELD_NAMES: tuple[str, ...] = (
    "surname",
    "forename",
    "email",
    "diocese",
    "ddoName",
    "ddoEmail",
    "ddoPhone",
    "sponsoringBishop",
    "questionToThePanel",
    "contactNumber",
)


@dataclass(frozen=True)
class FieldMatch:
    """One extractor's answer.

    ``scoped`` is False when the value came from a positional fallback
    rather than the label or block the extractor looks for first.
    """

    value: str = ""
    scoped: bool = True


@dataclass(frozen=True)
class SplitName:
    surname: str = ""
    forename: str = ""


@dataclass(frozen=True)
class ExtractedFieldSet:
    """Fields scraped from one pro-forma. Missing fields are empty strings."""

    surname: str = ""
    forename: str = ""
    email: str = ""
    diocese: str = ""
    ddo_name: str = ""
    ddo_email: str = ""
    ddo_phone: str = ""
    sponsoring_bishop: str = ""
    question_to_the_panel: str = ""
    contact_number: str = ""

    def to_dict(self) -> dict[str, str]:
        return {
            "surname": self.surname,
            "forename": self.forename,
            "email": self.email,
            "diocese": self.diocese,
            "ddoName": self.ddo_name,
            "ddoEmail": self.ddo_email,
            "ddoPhone": self.ddo_phone,
            "sponsoringBishop": self.sponsoring_bishop,
            "questionToThePanel": self.question_to_the_panel,
            "contactNumber": self.contact_number,
        }

    def empty_fields(self) -> list[str]:
        return [key for key, value in self.to_dict().items() if not value]


@dataclass
class ExtractionResult:
    """Output of the extraction orchestrator."""

    fields: ExtractedFieldSet
    text_length: int = 0
    low_confidence: list[str] = field(default_factory=list)
