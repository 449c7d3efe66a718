"""Document builders shared by the test modules."""

from __future__ import annotations

from typing import Iterable, Optional

from docinspect.models import Document, Paragraph, Section, Sentence


def make_paragraph(*contents: str, line: int = 1) -> Paragraph:
    """Build a paragraph with one sentence per line, starting at ``line``."""
    return Paragraph(
        sentences=tuple(
            Sentence(content=content, line_number=line + i) for i, content in enumerate(contents)
        )
    )


def make_section(
    header: Optional[str] = None,
    paragraphs: Iterable[Paragraph] = (),
    sections: Iterable[Section] = (),
    level: int = 1,
) -> Section:
    return Section(
        level=level,
        header=header,
        paragraphs=tuple(paragraphs),
        sections=tuple(sections),
    )


def make_document(*sections: Section, file_name: Optional[str] = None) -> Document:
    return Document(sections=tuple(sections), file_name=file_name)
