"""Validator registry: maps configuration names to validator factories.

Loading a configuration tree is all-or-nothing: the first unknown name,
missing attribute or unreadable resource aborts the load, so the engine
never runs with a silently incomplete validator set.

Usage:
    @register_validator("SentenceLength")
    class SentenceLengthValidator(SentenceValidator):
        ...

    validator_set = default_registry.load(root_config, resources)
"""

from typing import Callable, Iterator, Optional

import structlog

from docinspect.exceptions import ConfigurationError, DuplicateValidatorError, UnknownValidatorError
from docinspect.models.configuration import ConfigurationNode, SharedResources
from docinspect.validators.base import (
    SCOPE_BASES,
    BaseValidator,
    DocumentValidator,
    SectionValidator,
    SentenceValidator,
)
from docinspect.validators.models import Scope, Severity

logger = structlog.get_logger()

# factory(config_node, shared_resources) -> initialized validator
ValidatorFactory = Callable[[ConfigurationNode, SharedResources], BaseValidator]


class ValidatorSet:
    """Initialized validators bucketed by scope, in configuration order."""

    def __init__(
        self,
        document: tuple[DocumentValidator, ...] = (),
        section: tuple[SectionValidator, ...] = (),
        sentence: tuple[SentenceValidator, ...] = (),
    ):
        self.document = tuple(document)
        self.section = tuple(section)
        self.sentence = tuple(sentence)

    @classmethod
    def of(cls, *validators: BaseValidator) -> "ValidatorSet":
        """Bucket already-initialized validators by scope."""
        buckets: dict[Scope, list[BaseValidator]] = {scope: [] for scope in Scope}
        for validator in validators:
            buckets[scope_of(validator)].append(validator)
        return cls(
            document=tuple(buckets[Scope.DOCUMENT]),
            section=tuple(buckets[Scope.SECTION]),
            sentence=tuple(buckets[Scope.SENTENCE]),
        )

    def clone(self) -> "ValidatorSet":
        """Clone every validator; the copy shares no mutable state with this set."""
        return ValidatorSet(
            document=tuple(v.clone() for v in self.document),
            section=tuple(v.clone() for v in self.section),
            sentence=tuple(v.clone() for v in self.sentence),
        )

    def __iter__(self) -> Iterator[BaseValidator]:
        yield from self.document
        yield from self.section
        yield from self.sentence

    def __len__(self) -> int:
        return len(self.document) + len(self.section) + len(self.sentence)

    def __repr__(self) -> str:
        return (
            f"ValidatorSet(document={list(self.document)!r}, "
            f"section={list(self.section)!r}, sentence={list(self.sentence)!r})"
        )


def scope_of(validator: BaseValidator) -> Scope:
    """Return the single scope a validator implements.

    Raises:
        ConfigurationError: if it implements none or several
    """
    scopes = [scope for scope, base in SCOPE_BASES.items() if isinstance(validator, base)]
    if len(scopes) != 1:
        name = getattr(validator, "name", "") or type(validator).__name__
        raise ConfigurationError(
            name,
            f"validator must implement exactly one scope, found {[s.value for s in scopes]}",
        )
    return scopes[0]


class ValidatorRegistry:
    """Name → factory mapping with a single fail-fast load point."""

    def __init__(self):
        self._factories: dict[str, ValidatorFactory] = {}

    def register(self, name: str, factory: ValidatorFactory, replace: bool = False) -> None:
        """Register a factory under a case-sensitive configuration name.

        Args:
            name: Configuration name, matched exactly
            factory: Callable building an initialized validator from
                (config_node, shared_resources)
            replace: Allow overriding an existing registration

        Raises:
            DuplicateValidatorError: if ``name`` is taken and replace is False
        """
        if name in self._factories and not replace:
            raise DuplicateValidatorError(name)
        self._factories[name] = factory
        logger.debug("validator_registered", validator=name)

    def unregister(self, name: str) -> None:
        """Remove a registration; unknown names are ignored."""
        self._factories.pop(name, None)

    def resolve(self, name: str) -> ValidatorFactory:
        """Look up a factory by name.

        Raises:
            UnknownValidatorError: if nothing is registered under ``name``
        """
        try:
            return self._factories[name]
        except KeyError:
            raise UnknownValidatorError(name) from None

    def names(self) -> list[str]:
        """Registered names in registration order."""
        return list(self._factories)

    def __contains__(self, name: str) -> bool:
        return name in self._factories

    def build(self, config: ConfigurationNode, resources: SharedResources) -> BaseValidator:
        """Resolve and build one validator from its configuration node.

        Args:
            config: The validator's configuration node
            resources: Shared resources passed to the factory

        Returns:
            An initialized validator bound to exactly one scope

        Raises:
            ConfigurationError: if the name is unknown, initialization fails,
                or the validator does not implement exactly one scope
        """
        factory = self.resolve(config.name)
        validator = factory(config, resources)
        scope_of(validator)
        return validator

    def load(
        self,
        root: ConfigurationNode,
        resources: Optional[SharedResources] = None,
    ) -> ValidatorSet:
        """Build a ValidatorSet from the children of a configuration root.

        Identical validators (value equality at the same level) configured
        twice are kept once.

        Args:
            root: Configuration root; each child names one validator
            resources: Shared resources handed to every factory

        Returns:
            The initialized validators bucketed by scope, in configuration order

        Raises:
            ConfigurationError: on the first child that cannot be built
        """
        resources = resources or SharedResources()

        # Resolve every name before building anything
        for child in root.children:
            self.resolve(child.name)

        buckets: dict[Scope, list[BaseValidator]] = {scope: [] for scope in Scope}
        seen: list[tuple[BaseValidator, Severity]] = []
        for child in root.children:
            validator = self.build(child, resources)
            # Equal validators reporting at different levels are distinct entries
            key = (validator, validator.level)
            if key in seen:
                logger.info("validator_duplicate_skipped", validator=child.name, level=validator.level.value)
                continue
            seen.append(key)
            buckets[scope_of(validator)].append(validator)
            logger.debug("validator_loaded", validator=child.name, scope=validator.scope.value)

        validator_set = ValidatorSet(
            document=tuple(buckets[Scope.DOCUMENT]),
            section=tuple(buckets[Scope.SECTION]),
            sentence=tuple(buckets[Scope.SENTENCE]),
        )
        logger.info(
            "validators_loaded",
            configuration=root.name,
            document=len(validator_set.document),
            section=len(validator_set.section),
            sentence=len(validator_set.sentence),
        )
        return validator_set


# Module-level singleton holding the bundled validators
default_registry = ValidatorRegistry()


def register_validator(name: str, registry: Optional[ValidatorRegistry] = None):
    """Class decorator: register ``cls.from_config`` under ``name``.

    Args:
        name: Configuration name; also assigned to ``cls.name``
        registry: Target registry; defaults to default_registry
    """

    def decorator(cls: type[BaseValidator]) -> type[BaseValidator]:
        cls.name = name
        (registry or default_registry).register(name, cls.from_config)
        return cls

    return decorator
