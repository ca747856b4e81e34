"""Collapse short single-declaration CSS rules onto one line."""

from .engine import FormatterEngine, create_default_engine, mode_for_path
from .models import FormatterConfig, FormatResult, FormatResults
from .rules import (
    collapse_single_rules,
    normalize_indentation,
    remove_blank_lines_between_one_liners,
    split_attribute_selectors,
)
from .utils import detect_line_ending, format_style_blocks

__version__ = "0.3.0"

__all__ = [
    "FormatterEngine",
    "FormatterConfig",
    "FormatResult",
    "FormatResults",
    "create_default_engine",
    "mode_for_path",
    "collapse_single_rules",
    "remove_blank_lines_between_one_liners",
    "split_attribute_selectors",
    "normalize_indentation",
    "detect_line_ending",
    "format_style_blocks",
]
