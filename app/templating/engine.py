from collections.abc import Iterable, Mapping

from app.logging.logger import Log
from app.templating.fallback import FallbackPolicy
from app.templating.models import (
    Node,
    ParsedTemplate,
    PlaceholderNode,
    SectionNode,
    SectionRule,
    SubstitutionContext,
    TextNode,
)
from app.templating.parser import parse_template


class TemplateEngine:
    """Literal, global, case-sensitive placeholder substitution.

    Never raises on unknown tokens: they degrade through the fallback
    policy so a missing field cannot block document generation.
    """

    def __init__(
        self,
        policy: FallbackPolicy | None = None,
        sections: Iterable[SectionRule] = (),
    ) -> None:
        self._policy = policy or FallbackPolicy()
        self._sections = tuple(sections)

    def parse(self, content: str) -> ParsedTemplate:
        return parse_template(content, self._sections)

    def render(self, template: str | ParsedTemplate, context: SubstitutionContext) -> str:
        parsed = self.parse(template) if isinstance(template, str) else template
        return "".join(self._render_node(node, context) for node in parsed.nodes)

    def _render_node(self, node: Node, context: SubstitutionContext) -> str:
        if isinstance(node, TextNode):
            return node.text
        if isinstance(node, PlaceholderNode):
            value = context.resolve(node.token)
            if value:
                return value
            Log.debug(f"Placeholder '{node.token}' unresolved, using fallback")
            return self._policy.fallback_for(node.token)
        if node.name not in context.sections:
            return ""
        return "".join(self._render_node(child, context) for child in node.children)


def substitute(template: str, values: Mapping[str, object]) -> str:
    """Render *template* against a plain mapping with the default policy."""
    return TemplateEngine().render(template, SubstitutionContext(values=values))
