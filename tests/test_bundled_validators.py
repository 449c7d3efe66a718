"""Tests for the bundled section, sentence and document validators."""

from __future__ import annotations

from docinspect.models import CharacterTable, ConfigurationNode, Position, Sentence, SharedResources
from docinspect.validators import (
    DuplicateSectionHeaderValidator,
    ParagraphNumberValidator,
    ParagraphStartWithValidator,
    SectionLengthValidator,
    SentenceLengthValidator,
)
from docinspect.validators.models import Severity

from helpers import make_document, make_paragraph, make_section


def build(cls, resources=None, **attributes):
    return cls.from_config(ConfigurationNode(name=cls.name, attributes=attributes), resources)


class TestSentenceLength:
    """Tests for SentenceLengthValidator."""

    def test_default_limit(self) -> None:
        validator = build(SentenceLengthValidator)

        assert validator.max_length == 120
        assert validator.validate(Sentence(content="x" * 120)) == []
        assert len(validator.validate(Sentence(content="x" * 121))) == 1

    def test_reports_length_and_position(self) -> None:
        validator = build(SentenceLengthValidator, max_length="5")

        errors = validator.validate(Sentence(content="too long", line_number=4, start_offset=2))

        assert len(errors) == 1
        assert "(8)" in errors[0].message
        assert errors[0].start == Position(line=4, offset=2)
        assert errors[0].level == Severity.ERROR

    def test_level_override(self) -> None:
        validator = build(SentenceLengthValidator, max_length="1", level="info")

        assert validator.validate(Sentence(content="ab"))[0].level == Severity.INFO


class TestSectionLength:
    """Tests for SectionLengthValidator."""

    def test_counts_own_sentences_only(self) -> None:
        validator = build(SectionLengthValidator, max_char_number="5")
        section = make_section(
            "Intro",
            [make_paragraph("abc", "de")],
            [make_section("Child", [make_paragraph("x" * 100)])],
        )

        assert validator.validate(section) == []

    def test_reports_overflow(self) -> None:
        validator = build(SectionLengthValidator, max_char_number="5")
        section = make_section("Intro", [make_paragraph("abc", "def", line=7)])

        errors = validator.validate(section)

        assert len(errors) == 1
        assert '"Intro"' in errors[0].message
        assert "(6)" in errors[0].message
        assert errors[0].start == Position(line=7, offset=0)

    def test_empty_section(self) -> None:
        validator = build(SectionLengthValidator, max_char_number="0")

        assert validator.validate(make_section("Empty")) == []


class TestParagraphNumber:
    """Tests for ParagraphNumberValidator (MaxParagraphNumber)."""

    def test_within_limit(self) -> None:
        validator = build(ParagraphNumberValidator, max_paragraph_number="2")
        section = make_section("S", [make_paragraph("a"), make_paragraph("b")])

        assert validator.validate(section) == []

    def test_over_limit(self) -> None:
        validator = build(ParagraphNumberValidator, max_paragraph_number="2")
        section = make_section("S", [make_paragraph("a"), make_paragraph("b"), make_paragraph("c")])

        errors = validator.validate(section)

        assert len(errors) == 1
        assert errors[0].validator_name == "MaxParagraphNumber"
        assert "(3)" in errors[0].message


class TestParagraphStartWith:
    """Tests for ParagraphStartWithValidator."""

    def test_default_prefix_is_space(self) -> None:
        validator = build(ParagraphStartWithValidator)
        section = make_section("S", [make_paragraph(" Indented."), make_paragraph("Flush.")])

        errors = validator.validate(section)

        assert len(errors) == 1
        assert errors[0].sentence == "Flush."

    def test_prefix_from_character_table(self) -> None:
        resources = SharedResources(CharacterTable({"SPACE": "　"}))
        validator = build(ParagraphStartWithValidator, resources)

        assert validator.start_from == "　"
        section = make_section("S", [make_paragraph("　Indented."), make_paragraph(" Ascii.")])
        assert len(validator.validate(section)) == 1

    def test_explicit_prefix(self) -> None:
        validator = build(ParagraphStartWithValidator, start_from="- ")
        section = make_section("S", [make_paragraph("- item"), make_paragraph("not an item")])

        errors = validator.validate(section)

        assert [e.sentence for e in errors] == ["not an item"]

    def test_only_first_sentence_is_checked(self) -> None:
        validator = build(ParagraphStartWithValidator)
        section = make_section("S", [make_paragraph(" First.", "Second.")])

        assert validator.validate(section) == []


class TestDuplicateSectionHeader:
    """Tests for DuplicateSectionHeaderValidator."""

    def test_reports_repeated_headers_including_nested(self) -> None:
        validator = build(DuplicateSectionHeaderValidator)
        document = make_document(
            make_section("Intro", sections=[make_section("Details", level=2)]),
            make_section("Usage", sections=[make_section("Details", level=2)]),
            make_section("Intro"),
        )

        errors = validator.validate(document)

        assert [e.message for e in errors] == [
            'Section header "Details" duplicates an earlier section.',
            'Section header "Intro" duplicates an earlier section.',
        ]

    def test_headerless_sections_are_ignored(self) -> None:
        validator = build(DuplicateSectionHeaderValidator)
        document = make_document(make_section(None), make_section(None), make_section("  "))

        assert validator.validate(document) == []

    def test_ignore_case(self) -> None:
        strict = build(DuplicateSectionHeaderValidator)
        relaxed = build(DuplicateSectionHeaderValidator, ignore_case="true")
        document = make_document(make_section("Setup"), make_section("SETUP"))

        assert strict.validate(document) == []
        assert len(relaxed.validate(document)) == 1

    def test_validate_is_repeatable(self) -> None:
        validator = build(DuplicateSectionHeaderValidator)
        document = make_document(make_section("A"), make_section("A"))

        assert validator.validate(document) == validator.validate(document)
