import re

from .base import BaseFormattingRule, FormattingContext
from ..models import FormatterConfig, CSS_MODE, HTML_MODE

LEADING_SPACES = re.compile(r'^ +', re.MULTILINE)


def spaces_to_tabs(text: str) -> str:
    """One tab for every two leading spaces; an odd trailing space is dropped."""
    return LEADING_SPACES.sub(lambda m: "\t" * (len(m.group(0)) // 2), text)


def strip_container_indent(text: str, container: str = "head") -> str:
    """Remove the indentation of the first ``<container>`` line from the start of every line."""
    match = re.search(rf'^([ \t]*)<{re.escape(container)}>', text, re.MULTILINE)
    indent = match.group(1) if match else ""
    if not indent:
        return text
    return re.sub("^" + re.escape(indent), "", text, flags=re.MULTILINE)


def normalize_indentation(text: str, mode: str = CSS_MODE, container: str = "head") -> str:
    if mode == CSS_MODE:
        return spaces_to_tabs(text)
    if mode == HTML_MODE:
        return strip_container_indent(text, container)
    raise ValueError(f"Unknown mode: {mode!r}")


class IndentationRule(BaseFormattingRule):
    """Final indentation pass, run once over the whole document."""

    def __init__(self, config: FormatterConfig):
        self.config = config

    @property
    def rule_id(self) -> str: return "C004"
    @property
    def name(self) -> str: return "indentation"

    def apply(self, context: FormattingContext) -> None:
        context.source = normalize_indentation(
            context.source, mode=context.mode, container=self.config.container_tag
        )
