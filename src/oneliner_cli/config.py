import logging
import tomllib
from pathlib import Path
from typing import Any

from oneliner_css.models import FormatterConfig

logger = logging.getLogger(__name__)

LINE_ENDING_NAMES = {"auto": None, "lf": "\n", "crlf": "\r\n"}
DEFAULT_CONFIG_FILE = Path(".oneliner-css.toml")


class FormatConfig:
    """Handles loading of the [tool.oneliner-css] table from .oneliner-css.toml or pyproject.toml"""

    def __init__(self, config_path: Path | None = None):
        self.max_line_length: int = 90
        self.line_ending: str = "auto"
        self.convert_indentation: bool = True
        self.split_attribute_selectors: bool = False
        self.container_tag: str = "head"

        if config_path and config_path.exists():
            self._load_from_file(config_path)
        elif config_path is None or config_path == DEFAULT_CONFIG_FILE:
            pyproject = Path("pyproject.toml")
            if pyproject.exists():
                self._load_from_file(pyproject)

    def _load_from_file(self, path: Path):
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            # Fallback to defaults if parsing fails
            logger.warning("Ignoring config file %s: %s", path, e)
            return

        table = data.get("tool", {}).get("oneliner-css", {})
        self.max_line_length = table.get("max-line-length", self.max_line_length)
        self.line_ending = table.get("line-ending", self.line_ending)
        self.convert_indentation = table.get("convert-indentation", self.convert_indentation)
        self.split_attribute_selectors = table.get("split-attribute-selectors", self.split_attribute_selectors)
        self.container_tag = table.get("container-tag", self.container_tag)

        if self.line_ending not in LINE_ENDING_NAMES:
            logger.warning("Unknown line-ending %r in %s, using 'auto'", self.line_ending, path)
            self.line_ending = "auto"

    def override(self, **options: Any) -> "FormatConfig":
        """Apply command-line options; None means 'not given'"""
        for key, value in options.items():
            if value is not None:
                setattr(self, key, value)
        return self

    def to_formatter_config(self) -> FormatterConfig:
        return FormatterConfig(
            max_line_length=self.max_line_length,
            line_ending=LINE_ENDING_NAMES[self.line_ending],
            convert_indentation=self.convert_indentation,
            split_attribute_selectors=self.split_attribute_selectors,
            container_tag=self.container_tag,
        )
