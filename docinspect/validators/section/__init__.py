"""Section-scope validators."""

from docinspect.validators.section.section_length import SectionLengthValidator
from docinspect.validators.section.paragraph_number import ParagraphNumberValidator
from docinspect.validators.section.paragraph_start_with import ParagraphStartWithValidator

__all__ = ["SectionLengthValidator", "ParagraphNumberValidator", "ParagraphStartWithValidator"]
