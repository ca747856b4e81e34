import logging
import traceback
from pathlib import Path
from typing import List, Optional, Union

from .models import FormatterConfig, FormatResult, FormatResults, CSS_MODE, HTML_MODE, MODES
from .rules.base import BaseFormattingRule, FormattingContext
from .rules.attribute_selectors import AttributeSelectorSplitRule
from .rules.collapse import RuleCollapseRule
from .rules.indentation import IndentationRule
from .utils import detect_line_ending, format_style_blocks

logger = logging.getLogger(__name__)

EXTENSION_MODES = {
    ".css": CSS_MODE,
    ".html": HTML_MODE,
    ".htm": HTML_MODE,
}


def mode_for_path(path: Union[str, Path]) -> Optional[str]:
    """Formatting mode for a file, or None if the extension is not supported."""
    return EXTENSION_MODES.get(Path(path).suffix.lower())


class FormatterEngine:
    """Runs the registered CSS rules over a stylesheet or the <style> blocks of an HTML page."""
    def __init__(self, config: FormatterConfig):
        self.config = config
        self.rules: List[BaseFormattingRule] = []

    def add_rule(self, rule: BaseFormattingRule) -> None:
        """Register a new formatting rule."""
        self.rules.append(rule)

    def format_string(self, source: str, mode: str = CSS_MODE, file_path: str = "") -> FormatResult:
        """Formats a CSS or HTML string and reports whether anything changed."""
        if mode not in MODES:
            raise ValueError(f"Unknown mode: {mode!r} (expected one of {', '.join(MODES)})")

        line_ending = self.config.line_ending or detect_line_ending(source)
        current_source = source
        errors = []

        try:
            # Phase 1: CSS rewrites, scoped to <style> bodies for HTML
            if mode == HTML_MODE:
                current_source = format_style_blocks(
                    current_source, lambda css: self._run_rules(css, line_ending, file_path)
                )
            else:
                current_source = self._run_rules(current_source, line_ending, file_path)

            # Phase 2: Document-wide indentation
            if mode == HTML_MODE or self.config.convert_indentation:
                context = FormattingContext(
                    source=current_source, file_path=file_path, line_ending=line_ending, mode=mode
                )
                IndentationRule(self.config).apply(context)
                current_source = context.source

        except Exception as e:
            logger.warning("Formatting failed for %s: %s", file_path or "<string>", e)
            errors.append(f"{str(e)}\n{traceback.format_exc()}")

        return FormatResult(
            source=current_source,
            modified=current_source != source,
            errors=errors,
            file_path=file_path,
            mode=mode,
        )

    def _run_rules(self, css: str, line_ending: str, file_path: str) -> str:
        context = FormattingContext(source=css, file_path=file_path, line_ending=line_ending)
        for rule in self.rules:
            before = context.source
            rule.apply(context)
            if context.source != before:
                logger.debug("Rule %s (%s) modified %s", rule.rule_id, rule.name, file_path or "<string>")
        return context.source

    def format_files(self, files: List[Union[str, Path]], mode: Optional[str] = None, write: bool = True) -> FormatResults:
        """Batch format multiple files on disk; the mode defaults to one derived from each extension."""
        results = []; modified_count = 0; error_count = 0
        for file_path in files:
            file_path = Path(file_path)
            file_mode = mode or mode_for_path(file_path)
            try:
                if file_mode is None:
                    raise ValueError(f"Unsupported file type: {file_path.suffix or file_path.name}")
                with open(file_path, "r", encoding="utf-8", newline="") as f:
                    source = f.read()
                result = self.format_string(source, mode=file_mode, file_path=str(file_path))
                results.append(result)
                if result.errors: error_count += 1
                elif result.modified:
                    modified_count += 1
                    if write:
                        with open(file_path, "w", encoding="utf-8", newline="") as f:
                            f.write(result.source)
                        logger.debug("Wrote %s", file_path)
            except Exception as e:
                results.append(FormatResult(
                    source="", modified=False, errors=[str(e)], file_path=str(file_path), mode=file_mode or ""
                ))
                error_count += 1
        return FormatResults(results=results, total_files=len(files), modified_files=modified_count, error_files=error_count)


def create_default_engine(config: Optional[FormatterConfig] = None) -> FormatterEngine:
    """Engine with the standard pipeline: optional attribute splitting, then rule collapsing."""
    config = config or FormatterConfig()
    engine = FormatterEngine(config)
    if config.split_attribute_selectors:
        engine.add_rule(AttributeSelectorSplitRule())
    engine.add_rule(RuleCollapseRule(config))
    return engine
