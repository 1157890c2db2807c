from app.templating.engine import TemplateEngine, substitute
from app.templating.fallback import FallbackPolicy
from app.templating.models import ParsedTemplate, SectionRule, SubstitutionContext
from app.templating.parser import parse_template

__all__ = [
    "FallbackPolicy",
    "ParsedTemplate",
    "SectionRule",
    "SubstitutionContext",
    "TemplateEngine",
    "parse_template",
    "substitute",
]
