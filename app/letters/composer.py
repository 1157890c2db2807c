"""Assembles candidate letters and adviser emails from stored templates."""

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from urllib.parse import quote

from app.config.settings import Settings
from app.letters.context import (
    SECOND_INTERVIEW,
    adviser_recipients,
    build_adviser_email_context,
    build_letter_context,
)
from app.letters.models import (
    Adviser,
    Candidate,
    Interview,
    NationalDiscernmentAdviser,
    PanelDate,
    Template,
)
from app.letters.selection import find_adviser_email_template, find_letter_template
from app.logging.logger import Log
from app.templating.engine import TemplateEngine
from app.templating.fallback import FallbackPolicy

ADVISER_EMAIL_SUBJECT = "Candidates Panel - Interviewing"

LETTER_STYLESHEET = """
body { font-family: Arial, sans-serif; line-height: 1.2; color: #000; }
h1, h2, h3, h4, h5, h6 { margin-top: 1em; margin-bottom: 0.5em; }
p { margin: 0; padding: 0; }
a { color: #0000FF; text-decoration: underline; }
ul, ol { padding-left: 1.5em; margin-bottom: 1em; }
img { max-width: 100%; height: auto; }
.ql-align-center { text-align: center; }
.ql-align-right { text-align: right; }
.ql-align-left { text-align: left; }
.ql-align-justify { text-align: justify; }
.ql-indent-1 { padding-left: 3em; }
.ql-indent-2 { padding-left: 6em; }
.ql-indent-3 { padding-left: 9em; }
.letterhead { text-align: right; }
.signature { text-align: left; }
"""

_LETTERHEAD_RE = re.compile(r"(\{\{nda\.title\}\} \{\{nda\.name\}\}.*?\{\{date\}\})", re.DOTALL)
_SIGNATURE_RE = re.compile(r"(Yours sincerely,.*?Copy: DDO \{\{ddoName\}\})", re.DOTALL)


def wrap_letter_sections(content: str) -> str:
    """Wrap the letterhead and signature spans of a raw template in styled divs."""
    content = _LETTERHEAD_RE.sub(r'<div class="letterhead">\1</div>', content, count=1)
    return _SIGNATURE_RE.sub(r'<div class="signature">\1</div>', content, count=1)


def letter_filename(candidate: Candidate, now: datetime) -> str:
    return f"{candidate.surname}_{candidate.forename}_letter_{int(now.timestamp() * 1000)}.html"


def letter_storage_path(candidate: Candidate, filename: str) -> str:
    """Blob-store path for a generated file."""
    return f"candidates/{candidate.id}/files/{filename}"


@dataclass(frozen=True)
class GeneratedLetter:
    filename: str
    storage_path: str
    html: str


@dataclass(frozen=True)
class AdviserEmail:
    subject: str
    body: str
    recipients: list[str] = field(default_factory=list)

    def mailto_link(self) -> str:
        return (
            f"mailto:{','.join(self.recipients)}"
            f"?subject={quote(self.subject)}&body={quote(self.body)}"
        )


def _engine_for(settings: Settings) -> TemplateEngine:
    return TemplateEngine(
        FallbackPolicy(marker=settings.missing_value_marker),
        sections=(SECOND_INTERVIEW,),
    )


class CandidateLetterComposer:
    """Selects a candidate_letter template, fills it and wraps it as HTML."""

    def __init__(self, settings: Settings, engine: TemplateEngine | None = None) -> None:
        self._engine = engine or _engine_for(settings)
        self._date_format = settings.date_format

    def compose(
        self,
        candidate: Candidate,
        interviews: list[Interview],
        templates: Iterable[Template],
        advisers: Iterable[Adviser],
        nda: NationalDiscernmentAdviser | None = None,
        panel_date: PanelDate | None = None,
        *,
        now: datetime | None = None,
    ) -> GeneratedLetter:
        """Generate the letter for *candidate*.

        Raises:
            TemplateSelectionError: if there are more than two interviews.
            TemplateNotFoundError: if no template matches category and layout.
        """
        now = now or datetime.now()
        template = find_letter_template(templates, candidate, interviews)
        Log.info(f"Generating letter for candidate {candidate.id} from '{template.name}'")

        context = build_letter_context(
            candidate,
            interviews,
            advisers,
            nda,
            panel_date,
            today=now.date(),
            date_format=self._date_format,
        )
        body = self._engine.render(wrap_letter_sections(template.content), context)
        html = f"<html><head><style>{LETTER_STYLESHEET}</style></head><body>{body}</body></html>"

        filename = letter_filename(candidate, now)
        return GeneratedLetter(
            filename=filename,
            storage_path=letter_storage_path(candidate, filename),
            html=html,
        )


class AdviserEmailComposer:
    """Fills the adviser_email template for one interview."""

    def __init__(self, settings: Settings, engine: TemplateEngine | None = None) -> None:
        self._engine = engine or _engine_for(settings)
        self._date_format = settings.date_format

    def compose(
        self,
        candidate: Candidate,
        interview: Interview,
        templates: Iterable[Template],
        advisers: Iterable[Adviser],
        panel_date: PanelDate | None = None,
    ) -> AdviserEmail:
        """Generate the briefing email for *interview*.

        Raises:
            TemplateNotFoundError: if no adviser_email template fits.
        """
        template = find_adviser_email_template(templates, candidate.question_category, interview)
        context = build_adviser_email_context(
            candidate, interview, panel_date, date_format=self._date_format
        )
        advisers = list(advisers)
        recipients = adviser_recipients(interview, advisers)
        if len(recipients) < len(interview.adviser_names):
            Log.warning(
                f"Interview {interview.id}: "
                f"{len(interview.adviser_names) - len(recipients)} adviser(s) without an email"
            )
        return AdviserEmail(
            subject=ADVISER_EMAIL_SUBJECT,
            body=self._engine.render(template.content, context),
            recipients=recipients,
        )
