"""Configuration tree and shared resources handed to validator factories."""

from types import MappingProxyType
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from docinspect.exceptions import InvalidAttributeError

_TRUE_VALUES = {"true", "yes", "on", "1"}
_FALSE_VALUES = {"false", "no", "off", "0"}


class ConfigurationNode(BaseModel):
    """A named node with string attributes and ordered children.

    The root node's children select validators: each child's ``name`` is a
    registry key and its attributes parameterize that validator.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    attributes: dict[str, str] = Field(default_factory=dict)
    children: list["ConfigurationNode"] = Field(default_factory=list)

    def get_attribute(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.attributes.get(key, default)

    def has_attribute(self, key: str) -> bool:
        return key in self.attributes

    def get_int(self, key: str, default: int) -> int:
        """Read an integer attribute; malformed values are a configuration error."""
        raw = self.attributes.get(key)
        if raw is None:
            return default
        try:
            return int(raw.strip())
        except ValueError as e:
            raise InvalidAttributeError(self.name, key, raw) from e

    def get_bool(self, key: str, default: bool) -> bool:
        raw = self.attributes.get(key)
        if raw is None:
            return default
        value = raw.strip().lower()
        if value in _TRUE_VALUES:
            return True
        if value in _FALSE_VALUES:
            return False
        raise InvalidAttributeError(self.name, key, raw)


DEFAULT_CHARACTERS: dict[str, str] = {
    "FULL_STOP": ".",
    "COMMA": ",",
    "SPACE": " ",
    "EXCLAMATION_MARK": "!",
    "QUESTION_MARK": "?",
    "COLON": ":",
    "SEMICOLON": ";",
    "LEFT_QUOTATION_MARK": "“",
    "RIGHT_QUOTATION_MARK": "”",
    "LEFT_PARENTHESIS": "(",
    "RIGHT_PARENTHESIS": ")",
}


class CharacterTable:
    """Read-only symbol table (e.g. ``FULL_STOP`` -> ``"."``).

    Locale-specific tables are built by the caller; the default covers
    ASCII punctuation.
    """

    def __init__(self, characters: Optional[Mapping[str, str]] = None):
        merged = dict(DEFAULT_CHARACTERS)
        if characters:
            merged.update(characters)
        self._characters = MappingProxyType(merged)

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self._characters.get(name, default)

    def __contains__(self, name: str) -> bool:
        return name in self._characters

    def __eq__(self, other) -> bool:
        if not isinstance(other, CharacterTable):
            return NotImplemented
        return dict(self._characters) == dict(other._characters)

    def __hash__(self) -> int:
        return hash(frozenset(self._characters.items()))

    def __repr__(self) -> str:
        return f"CharacterTable({dict(self._characters)!r})"


class SharedResources:
    """Resources shared by every validator of one configuration load.

    Never mutated after construction, so clones may share it freely.
    """

    __slots__ = ("character_table",)

    def __init__(self, character_table: Optional[CharacterTable] = None):
        self.character_table = character_table or CharacterTable()

    def __repr__(self) -> str:
        return f"SharedResources(character_table={self.character_table!r})"
