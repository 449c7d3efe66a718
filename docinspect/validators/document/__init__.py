"""Document-scope validators."""

from docinspect.validators.document.duplicate_section_header import DuplicateSectionHeaderValidator

__all__ = ["DuplicateSectionHeaderValidator"]
