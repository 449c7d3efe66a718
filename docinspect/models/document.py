"""Document tree models: the parsed input the validation engine walks.

Documents are produced by an external parser and are immutable once built.
The engine and the validators only read them.
"""

from typing import Iterator, Optional

from pydantic import BaseModel, ConfigDict, Field


class Position(BaseModel):
    """A location in original-document coordinates."""

    model_config = ConfigDict(frozen=True)

    line: int
    offset: int


class Sentence(BaseModel):
    """A sentence plus the mapping from local indexes to document positions.

    ``offset_map`` holds one Position per character of ``content`` when the
    parser had to reflow text (e.g. a sentence spanning several lines). When
    it is empty, positions are derived from ``line_number`` and
    ``start_offset``.
    """

    model_config = ConfigDict(frozen=True)

    content: str
    line_number: int = 0
    start_offset: int = 0
    offset_map: tuple[Position, ...] = ()

    def offset(self, index: int) -> Optional[Position]:
        """Map a local character index to a global Position.

        ``index == len(content)`` is valid and denotes the end-exclusive
        position after the last character. Out-of-range indexes yield None.
        """
        if index < 0:
            return None

        if self.offset_map:
            if index < len(self.offset_map):
                return self.offset_map[index]
            if index == len(self.offset_map):
                last = self.offset_map[-1]
                return Position(line=last.line, offset=last.offset + 1)
            return None

        if index > len(self.content):
            return None
        return Position(line=self.line_number, offset=self.start_offset + index)


class Paragraph(BaseModel):
    """An ordered run of sentences."""

    model_config = ConfigDict(frozen=True)

    sentences: tuple[Sentence, ...] = ()


class Section(BaseModel):
    """A (possibly nested) section: header, paragraphs and child sections."""

    model_config = ConfigDict(frozen=True)

    level: int = 0
    header: Optional[str] = None
    paragraphs: tuple[Paragraph, ...] = ()
    sections: tuple["Section", ...] = ()

    def iter_sentences(self) -> Iterator[Sentence]:
        """Yield this section's own sentences (not those of child sections)."""
        for paragraph in self.paragraphs:
            yield from paragraph.sentences

    def character_count(self) -> int:
        return sum(len(sentence.content) for sentence in self.iter_sentences())


class Document(BaseModel):
    """A parsed document: an ordered sequence of top-level sections."""

    model_config = ConfigDict(frozen=True)

    sections: tuple[Section, ...] = Field(default_factory=tuple)
    file_name: Optional[str] = None

    def iter_sections(self) -> Iterator[Section]:
        """Yield every section depth-first, in document order."""
        stack = list(reversed(self.sections))
        while stack:
            section = stack.pop()
            yield section
            stack.extend(reversed(section.sections))
