from .base import BaseFormattingRule, FormattingContext
from .collapse import RuleCollapseRule, collapse, collapse_single_rules
from .blank_lines import BlankLineRule, remove_blank_lines_between_one_liners
from .attribute_selectors import AttributeSelectorSplitRule, split_attribute_selectors
from .indentation import IndentationRule, normalize_indentation

__all__ = [
    "BaseFormattingRule",
    "FormattingContext",
    "RuleCollapseRule",
    "BlankLineRule",
    "AttributeSelectorSplitRule",
    "IndentationRule",
    "collapse",
    "collapse_single_rules",
    "remove_blank_lines_between_one_liners",
    "split_attribute_selectors",
    "normalize_indentation"
]
