"""Max Paragraph Number Validator: flags sections with too many paragraphs."""

from docinspect.models.document import Section
from docinspect.validators.base import SectionValidator
from docinspect.validators.models import ValidationError
from docinspect.validators.registry import register_validator

DEFAULT_MAX_PARAGRAPH_NUMBER = 100


@register_validator("MaxParagraphNumber")
class ParagraphNumberValidator(SectionValidator):

    def __init__(self):
        super().__init__()
        self.max_paragraph_number = DEFAULT_MAX_PARAGRAPH_NUMBER

    def init(self) -> None:
        self.max_paragraph_number = self.get_int_attribute(
            "max_paragraph_number", DEFAULT_MAX_PARAGRAPH_NUMBER
        )

    def validate(self, section: Section) -> list[ValidationError]:
        count = len(section.paragraphs)
        if count <= self.max_paragraph_number:
            return []
        return [self._error(
            f"The number of paragraphs in the section ({count}) "
            f"exceeds the maximum of {self.max_paragraph_number}."
        )]
