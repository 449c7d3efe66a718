"""Paragraph Start With Validator: every paragraph must open with a given prefix.

The prefix comes from the ``start_from`` attribute; without it the
character table's ``SPACE`` symbol is used (an indented paragraph).
"""

from docinspect.models.document import Section
from docinspect.validators.base import SectionValidator
from docinspect.validators.models import ValidationError
from docinspect.validators.registry import register_validator


@register_validator("ParagraphStartWith")
class ParagraphStartWithValidator(SectionValidator):
    """Reports each paragraph whose first sentence lacks the expected prefix."""

    def __init__(self):
        super().__init__()
        self.start_from = " "

    def init(self) -> None:
        default = self.get_symbol("SPACE", " ")
        self.start_from = self.get_config_attribute("start_from", default) or default

    def validate(self, section: Section) -> list[ValidationError]:
        errors: list[ValidationError] = []

        for paragraph in section.paragraphs:
            if not paragraph.sentences:
                continue
            first = paragraph.sentences[0]
            if first.content.startswith(self.start_from):
                continue
            errors.append(self._error_with_span(
                first,
                0,
                min(len(self.start_from), len(first.content)),
                f'Found invalid beginning of paragraph: expected "{self.start_from}".',
            ))

        return errors

    def _state_key(self) -> tuple:
        return (self.start_from, self.level)
