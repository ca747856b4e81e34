import re

from .base import BaseFormattingRule, FormattingContext

# selector { declaration; } kept on a single line
ONE_LINER = r'\S.*?[ \t]*\{[ \t]*[^{};\r\n]+;[ \t]*\}'

BLANK_LINES_AFTER_ONE_LINER = re.compile(
    rf'^(\s+{ONE_LINER}[ \t]*\r?\n)'
    r'(?:[ \t]*\r?\n)+'
    rf'(?=[ \t]*(?:{ONE_LINER}|\}}))',
    re.MULTILINE,
)


def remove_blank_lines_between_one_liners(css: str) -> str:
    """Drop blank lines between a one-liner and a following one-liner or closing brace.

    The one-liner must be indented or preceded by a blank line; a top-level
    rule at the very start of a run keeps the blank line collapsing put after
    it. Blank lines before anything else (a multi-line rule, a comment, the
    end of the text) are deliberate spacing and stay where they are.
    """
    return BLANK_LINES_AFTER_ONE_LINER.sub(r'\1', css)


class BlankLineRule(BaseFormattingRule):
    """Compacts the spacing left behind by collapsed rules."""

    @property
    def rule_id(self) -> str: return "C002"
    @property
    def name(self) -> str: return "blank-lines-between-one-liners"

    def apply(self, context: FormattingContext) -> None:
        context.source = remove_blank_lines_between_one_liners(context.source)
