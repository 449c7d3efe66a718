"""Validation models: severity levels, validator scopes and the finding type."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from docinspect.models.document import Position


class Severity(str, Enum):
    """Finding severity levels."""

    ERROR = "error"      # Rule violation the author should fix
    WARNING = "warning"  # Likely problem, worth a look
    INFO = "info"        # Stylistic hint


class Scope(str, Enum):
    """Tree level a validator is invoked against."""

    DOCUMENT = "document"
    SECTION = "section"
    SENTENCE = "sentence"


class ValidationError(BaseModel):
    """A single validation finding.

    ``start``/``end`` form a half-open span in document coordinates. They are
    optional: document- and section-scope validators usually report without
    a precise span.
    """

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    message: str
    validator_name: str
    level: Severity = Severity.ERROR
    start: Optional[Position] = None
    end: Optional[Position] = None
    sentence: Optional[str] = None  # Offending sentence text, sentence scope only

    @property
    def line_number(self) -> Optional[int]:
        return self.start.line if self.start else None
