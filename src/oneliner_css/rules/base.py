from dataclasses import dataclass
from abc import ABC, abstractmethod

from ..models import CSS_MODE

@dataclass
class FormattingContext:
    source: str
    file_path: str = ""
    line_ending: str = "\n"
    mode: str = CSS_MODE

class BaseFormattingRule(ABC):
    """A single text rewrite applied to the stylesheet held by a context."""

    @property
    @abstractmethod
    def rule_id(self) -> str:
        """Unique rule identifier (e.g. 'C001')."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable rule name (e.g. 'collapse-single-rules')."""
        pass

    @abstractmethod
    def apply(self, context: FormattingContext) -> None:
        """Apply the formatting rule to the context."""
        pass
