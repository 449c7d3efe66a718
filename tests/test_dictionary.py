"""Tests for the key/value dictionary loader."""

from __future__ import annotations

from pathlib import Path

import pytest

from docinspect.exceptions import ResourceLoadError
from docinspect.validators.dictionary import load_key_value_dictionary, parse_key_value_lines


class TestParseKeyValueLines:
    """Tests for parse_key_value_lines."""

    def test_parses_tab_separated_lines(self) -> None:
        result = parse_key_value_lines(["utilize\tuse\n", "in order to\tto\n"])

        assert result == {"utilize": "use", "in order to": "to"}

    def test_skips_blank_and_malformed_lines(self) -> None:
        result = parse_key_value_lines(["\n", "no delimiter\n", "a\tb\tc\n", "\tvalue\n", "ok\tfine\n"])

        assert result == {"ok": "fine"}

    def test_first_occurrence_wins(self) -> None:
        result = parse_key_value_lines(["teh\tthe\n", "teh\ttea\n"])

        assert result == {"teh": "the"}

    def test_custom_delimiter(self) -> None:
        result = parse_key_value_lines(["teh=the"], delimiter="=")

        assert result == {"teh": "the"}

    def test_preserves_file_order(self) -> None:
        result = parse_key_value_lines(["b\t1", "a\t2", "c\t3"])

        assert list(result) == ["b", "a", "c"]


class TestLoadKeyValueDictionary:
    """Tests for load_key_value_dictionary."""

    def test_loads_file(self, dictionary_file: Path) -> None:
        assert load_key_value_dictionary(dictionary_file) == {"teh": "the", "adn": "and"}

    def test_handles_crlf_line_endings(self, tmp_path: Path) -> None:
        path = tmp_path / "crlf.tsv"
        path.write_bytes(b"teh\tthe\r\nadn\tand\r\n")

        assert load_key_value_dictionary(path) == {"teh": "the", "adn": "and"}

    def test_missing_file_is_wrapped(self, tmp_path: Path) -> None:
        with pytest.raises(ResourceLoadError) as excinfo:
            load_key_value_dictionary(tmp_path / "missing.tsv", validator_name="SuggestExpression")

        assert excinfo.value.validator_name == "SuggestExpression"
        assert isinstance(excinfo.value.cause, OSError)

    def test_directory_is_wrapped(self, tmp_path: Path) -> None:
        with pytest.raises(ResourceLoadError):
            load_key_value_dictionary(tmp_path)

    def test_undecodable_file_is_wrapped(self, tmp_path: Path) -> None:
        path = tmp_path / "latin1.tsv"
        path.write_bytes("caf\xe9\tcoffee\n".encode("latin-1"))

        with pytest.raises(ResourceLoadError) as excinfo:
            load_key_value_dictionary(path)

        assert isinstance(excinfo.value.cause, UnicodeDecodeError)

    def test_explicit_encoding(self, tmp_path: Path) -> None:
        path = tmp_path / "latin1.tsv"
        path.write_bytes("caf\xe9\tcoffee\n".encode("latin-1"))

        assert load_key_value_dictionary(path, encoding="latin-1") == {"caf\xe9": "coffee"}
