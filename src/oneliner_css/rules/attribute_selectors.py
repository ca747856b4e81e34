from typing import List

from .base import BaseFormattingRule, FormattingContext
from ..utils import split_indent, split_line_ending


def split_selector_fragments(content: str) -> List[str]:
    """Break a line's content before every bracketed attribute selector.

    Text after a closing ``]`` stays with its bracket group, and a ``]`` seen
    outside brackets is plain text. An unmatched ``[`` keeps the scanner
    inside brackets until the end of the line.
    """
    fragments = []
    current = []
    inside = False
    escaped = False

    def flush():
        fragment = "".join(current).strip()
        if fragment:
            fragments.append(fragment)
        current.clear()

    for ch in content:
        if escaped:
            current.append(ch)
            escaped = False
            continue
        if ch == "\\":
            current.append(ch)
            escaped = True
        elif ch == "[" and not inside:
            flush()
            current.append(ch)
            inside = True
        elif ch == "]" and inside:
            current.append(ch)
            inside = False
        else:
            current.append(ch)
    flush()
    return fragments


def split_attribute_selectors(css: str) -> str:
    """Put each attribute-selector fragment of a line on its own line, keeping the line's indent."""
    out = []
    for line in css.splitlines(keepends=True):
        body, ending = split_line_ending(line)
        if "[" not in body:
            out.append(line)
            continue

        indent, content = split_indent(body)
        fragments = split_selector_fragments(content)
        if not fragments:
            out.append(line)
            continue

        separator = ending or "\n"
        out.append(separator.join(indent + fragment for fragment in fragments) + ending)
    return "".join(out)


class AttributeSelectorSplitRule(BaseFormattingRule):
    """Splits compound attribute selectors across lines."""

    @property
    def rule_id(self) -> str: return "C003"
    @property
    def name(self) -> str: return "split-attribute-selectors"

    def apply(self, context: FormattingContext) -> None:
        context.source = split_attribute_selectors(context.source)
