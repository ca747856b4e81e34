from dataclasses import dataclass, field
from typing import List, Optional

CSS_MODE = "css"
HTML_MODE = "html"
MODES = (CSS_MODE, HTML_MODE)

LINE_ENDINGS = ("\n", "\r\n")

@dataclass
class FormatterConfig:
    max_line_length: int = 90
    line_ending: Optional[str] = None  # None: detect from the source
    convert_indentation: bool = True
    split_attribute_selectors: bool = False
    container_tag: str = "head"

    def __post_init__(self):
        if self.max_line_length <= 0:
            raise ValueError(f"max_line_length must be positive, got {self.max_line_length}")
        if self.line_ending is not None and self.line_ending not in LINE_ENDINGS:
            raise ValueError(f"Unsupported line ending: {self.line_ending!r}")

@dataclass
class FormatResult:
    source: str
    modified: bool
    errors: List[str] = field(default_factory=list)
    file_path: str = ""
    mode: str = CSS_MODE

@dataclass
class FormatResults:
    results: List[FormatResult]
    total_files: int
    modified_files: int
    error_files: int
