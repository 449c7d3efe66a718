"""Duplicate Section Header Validator: flags headers repeated within a document."""

from docinspect.models.document import Document
from docinspect.validators.base import DocumentValidator
from docinspect.validators.models import ValidationError
from docinspect.validators.registry import register_validator


@register_validator("DuplicateSectionHeader")
class DuplicateSectionHeaderValidator(DocumentValidator):
    """Reports every section whose header repeats an earlier one.

    Headers are compared after trimming whitespace; ``ignore_case`` makes
    the comparison case-insensitive. Sections without a header are skipped.
    """

    def __init__(self):
        super().__init__()
        self.ignore_case = False

    def init(self) -> None:
        self.ignore_case = self.config.get_bool("ignore_case", False)

    def validate(self, document: Document) -> list[ValidationError]:
        errors: list[ValidationError] = []
        seen: set[str] = set()

        for section in document.iter_sections():
            if not section.header or not section.header.strip():
                continue
            key = section.header.strip()
            if self.ignore_case:
                key = key.casefold()
            if key in seen:
                errors.append(self._error(
                    f'Section header "{section.header.strip()}" duplicates an earlier section.'
                ))
            else:
                seen.add(key)

        return errors
