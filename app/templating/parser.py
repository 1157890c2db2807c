"""Parses template text into literal, placeholder and optional-section nodes.

The grammar is deliberately tiny: ``{{token}}`` placeholders and
sentinel-delimited sections. Every braced token becomes a placeholder, padding
stripped, so malformed ones still go through the fallback policy. There are no
loops, no nesting and no escape for a literal ``{{``.
"""

import re
from collections.abc import Iterable

from app.templating.models import (
    Node,
    ParsedTemplate,
    PlaceholderNode,
    SectionNode,
    SectionRule,
    TextNode,
)

PLACEHOLDER_RE = re.compile(r"\{\{\s*([^{}]+?)\s*\}\}")


def parse_template(content: str, sections: Iterable[SectionRule] = ()) -> ParsedTemplate:
    """Build a ParsedTemplate once so it can be rendered many times."""
    rules = tuple(sections)
    nodes: list[Node] = []
    pos = 0
    while True:
        hit = _next_section(content, pos, rules)
        if hit is None:
            break
        start, end, rule = hit
        nodes.extend(_parse_inline(content[pos:start]))
        nodes.append(SectionNode(rule.name, tuple(_parse_inline(content[start:end]))))
        pos = end
    nodes.extend(_parse_inline(content[pos:]))
    return ParsedTemplate(tuple(nodes))


def _next_section(
    content: str,
    pos: int,
    rules: tuple[SectionRule, ...],
) -> tuple[int, int, SectionRule] | None:
    """Earliest complete section at or after *pos*; an unclosed opener is plain text."""
    best: tuple[int, int, SectionRule] | None = None
    for rule in rules:
        start = content.find(rule.start, pos)
        if start == -1:
            continue
        close = content.find(rule.end, start + len(rule.start))
        if close == -1:
            continue
        if best is None or start < best[0]:
            best = (start, close + len(rule.end), rule)
    return best


def _parse_inline(text: str) -> list[TextNode | PlaceholderNode]:
    nodes: list[TextNode | PlaceholderNode] = []
    pos = 0
    for match in PLACEHOLDER_RE.finditer(text):
        if match.start() > pos:
            nodes.append(TextNode(text[pos:match.start()]))
        nodes.append(PlaceholderNode(match.group(1)))
        pos = match.end()
    if pos < len(text):
        nodes.append(TextNode(text[pos:]))
    return nodes
