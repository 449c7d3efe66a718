"""Base validators: the contracts every pluggable rule check implements.

A validator is bound to exactly one tree scope. The three scope bases below
fix the ``validate`` target; concrete validators subclass one of them and
register under a configuration name.

Contract:
    - initialize() reads attributes and loads resources once, failing fast
      with a ConfigurationError subclass
    - validate() is pure over (target, initialized state) and returns a list
      of ValidationError (empty = no issues); it never raises for "no match"
    - clone() returns an isolated copy safe for concurrent use
    - No I/O inside validate()
"""

import copy
from abc import ABC, abstractmethod
from typing import ClassVar, Optional

import structlog

from docinspect.exceptions import InvalidAttributeError, MissingAttributeError
from docinspect.models.configuration import ConfigurationNode, SharedResources
from docinspect.models.document import Document, Position, Section, Sentence
from docinspect.validators.models import Scope, Severity, ValidationError

logger = structlog.get_logger()


class BaseValidator(ABC):
    """Abstract base for all validators."""

    name: ClassVar[str] = ""
    scope: ClassVar[Scope]

    def __init__(self):
        self._config: ConfigurationNode = ConfigurationNode(name=self.name or type(self).__name__)
        self._resources: SharedResources = SharedResources()
        self._level: Severity = Severity.ERROR

    # ── Lifecycle ──

    @classmethod
    def from_config(
        cls,
        config: ConfigurationNode,
        resources: Optional[SharedResources] = None,
    ) -> "BaseValidator":
        """Registry factory: build and initialize an instance.

        Args:
            config: The validator's configuration node
            resources: Shared resources such as the character table

        Returns:
            An initialized validator, ready for validate()
        """
        return cls().initialize(config, resources)

    def initialize(
        self,
        config: ConfigurationNode,
        resources: Optional[SharedResources] = None,
    ) -> "BaseValidator":
        """Bind configuration and shared resources, then run the init() hook.

        Args:
            config: The validator's configuration node; ``level`` is read here
            resources: Shared resources; defaults to an empty SharedResources

        Returns:
            self, to allow chaining

        Raises:
            MissingAttributeError, InvalidAttributeError, ResourceLoadError
        """
        self._config = config
        self._resources = resources or SharedResources()

        level = config.get_attribute("level")
        if level is not None:
            try:
                self._level = Severity(level.strip().lower())
            except ValueError as e:
                raise InvalidAttributeError(self.name, "level", level) from e

        self.init()
        logger.debug("validator_initialized", validator=self.name, scope=self.scope.value)
        return self

    def init(self) -> None:
        """Hook for subclasses: read attributes and load resources."""

    @abstractmethod
    def validate(self, target) -> list[ValidationError]:
        """Run the rule against one target.

        Args:
            target: The Document, Section or Sentence of this validator's scope

        Returns:
            List of ValidationError instances (empty = no issues)
        """
        ...

    def clone(self) -> "BaseValidator":
        """Return an independent copy for use by another worker.

        Post-init state is immutable and shared; subclasses holding mutable
        state isolate it in _clone_state().
        """
        duplicate = copy.copy(self)
        duplicate._clone_state()
        return duplicate

    def _clone_state(self) -> None:
        """Replace mutable attributes of a fresh shallow copy."""

    # ── Configuration helpers ──

    @property
    def config(self) -> ConfigurationNode:
        return self._config

    @property
    def level(self) -> Severity:
        return self._level

    def get_config_attribute(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._config.get_attribute(key, default)

    def require_config_attribute(self, key: str) -> str:
        """Read a mandatory, non-blank string attribute.

        Args:
            key: Attribute name on this validator's configuration node

        Returns:
            The raw attribute value

        Raises:
            MissingAttributeError: if the attribute is absent or blank
        """
        value = self._config.get_attribute(key)
        if value is None or not value.strip():
            logger.error("validator_attribute_missing", validator=self.name, attribute=key)
            raise MissingAttributeError(self.name, key)
        return value

    def get_int_attribute(self, key: str, default: int) -> int:
        """Read a non-negative integer attribute.

        Args:
            key: Attribute name on this validator's configuration node
            default: Value used when the attribute is absent

        Returns:
            The parsed integer, or ``default``

        Raises:
            InvalidAttributeError: if the value is not an integer or is negative
        """
        value = self._config.get_int(key, default)
        if value < 0:
            raise InvalidAttributeError(self.name, key, str(value))
        return value

    def get_symbol(self, symbol: str, default: Optional[str] = None) -> Optional[str]:
        """Look up a character in the shared character table."""
        return self._resources.character_table.get(symbol, default)

    # ── Equality ──

    def _state_key(self) -> tuple:
        """Configuration-derived state that defines value equality."""
        return tuple(sorted(self._config.attributes.items()))

    def __eq__(self, other) -> bool:
        if self is other:
            return True
        if type(self) is not type(other):
            return NotImplemented
        return self._state_key() == other._state_key()

    def __hash__(self) -> int:
        return hash((type(self), self._state_key()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self._config.attributes)!r})"

    # ── Finding helpers ──

    def _error(
        self,
        message: str,
        sentence: Optional[Sentence] = None,
        start: Optional[Position] = None,
        end: Optional[Position] = None,
    ) -> ValidationError:
        """Convenience method to create a ValidationError."""
        if sentence is not None and start is None:
            start = sentence.offset(0)
        return ValidationError(
            message=message,
            validator_name=self.name,
            level=self._level,
            start=start,
            end=end,
            sentence=sentence.content if sentence is not None else None,
        )

    def _error_with_span(
        self,
        sentence: Sentence,
        start_index: int,
        end_index: int,
        message: str,
    ) -> ValidationError:
        """Create a ValidationError spanning ``[start_index, end_index)`` of a sentence.

        Args:
            sentence: Sentence the finding belongs to
            start_index: Local index of the first offending character
            end_index: Local end-exclusive index
            message: Human-readable description
        """
        return self._error(
            message,
            sentence=sentence,
            start=sentence.offset(start_index),
            end=sentence.offset(end_index),
        )


class DocumentValidator(BaseValidator):
    """Validator invoked once per Document."""

    scope = Scope.DOCUMENT

    @abstractmethod
    def validate(self, document: Document) -> list[ValidationError]:
        ...


class SectionValidator(BaseValidator):
    """Validator invoked once per Section, nested sections included."""

    scope = Scope.SECTION

    @abstractmethod
    def validate(self, section: Section) -> list[ValidationError]:
        ...


class SentenceValidator(BaseValidator):
    """Validator invoked once per Sentence."""

    scope = Scope.SENTENCE

    @abstractmethod
    def validate(self, sentence: Sentence) -> list[ValidationError]:
        ...


SCOPE_BASES: dict[Scope, type[BaseValidator]] = {
    Scope.DOCUMENT: DocumentValidator,
    Scope.SECTION: SectionValidator,
    Scope.SENTENCE: SentenceValidator,
}
