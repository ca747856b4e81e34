import re

from .base import BaseFormattingRule, FormattingContext
from .blank_lines import remove_blank_lines_between_one_liners
from ..models import FormatterConfig

DEFAULT_MAX_LINE_LENGTH = 90

# indent, selector, exactly one declaration, closing brace, trailing line breaks
SINGLE_RULE_PATTERN = re.compile(
    r'^([ \t]*)(\S.*)\s+\{\s*([^{};]+;)\s*\}(?:\r?\n)+',
    re.MULTILINE,
)


def collapse(css: str, line_ending: str = "\n", max_line_length: int = DEFAULT_MAX_LINE_LENGTH) -> str:
    """Rewrite every multi-line single-declaration rule as a one-liner.

    Each collapsed rule is followed by two line endings. A candidate whose
    one-line form is longer than ``max_line_length`` (line endings excluded)
    is left exactly as written.
    """
    def replace(match: re.Match) -> str:
        indent, selector, declaration = match.group(1), match.group(2), match.group(3)
        one_liner = f"{indent}{selector} {{ {declaration} }}"
        if len(one_liner) > max_line_length:
            return match.group(0)
        return one_liner + line_ending * 2

    return SINGLE_RULE_PATTERN.sub(replace, css)


def collapse_single_rules(css: str, line_ending: str = "\n", max_line_length: int = DEFAULT_MAX_LINE_LENGTH) -> str:
    """Collapse single-declaration rules, then drop the spacer lines between adjacent one-liners."""
    return remove_blank_lines_between_one_liners(collapse(css, line_ending, max_line_length))


class RuleCollapseRule(BaseFormattingRule):
    """Puts short single-declaration rules on one line."""

    def __init__(self, config: FormatterConfig):
        self.config = config

    @property
    def rule_id(self) -> str: return "C001"
    @property
    def name(self) -> str: return "collapse-single-rules"

    def apply(self, context: FormattingContext) -> None:
        context.source = collapse_single_rules(
            context.source,
            line_ending=context.line_ending,
            max_line_length=self.config.max_line_length,
        )
