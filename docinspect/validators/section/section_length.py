"""Section Length Validator: flags sections with too many characters.

Only the section's own sentences count; nested sections are validated on
their own when the engine reaches them.
"""

from docinspect.models.document import Section
from docinspect.validators.base import SectionValidator
from docinspect.validators.models import ValidationError
from docinspect.validators.registry import register_validator

DEFAULT_MAX_CHAR_NUMBER = 1000


@register_validator("SectionLength")
class SectionLengthValidator(SectionValidator):
    """Checks the total character count of a section's sentences."""

    def __init__(self):
        super().__init__()
        self.max_char_number = DEFAULT_MAX_CHAR_NUMBER

    def init(self) -> None:
        self.max_char_number = self.get_int_attribute("max_char_number", DEFAULT_MAX_CHAR_NUMBER)

    def validate(self, section: Section) -> list[ValidationError]:
        count = section.character_count()
        if count <= self.max_char_number:
            return []

        first = next(section.iter_sentences(), None)
        return [self._error(
            f"The number of characters in section {_describe(section)} ({count}) "
            f"exceeds the maximum of {self.max_char_number}.",
            start=first.offset(0) if first is not None else None,
        )]


def _describe(section: Section) -> str:
    return f'"{section.header}"' if section.header else f"at level {section.level}"
