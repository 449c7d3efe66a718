"""Custom exceptions for docinspect."""

from typing import Optional


class DocInspectError(Exception):
    """Base exception for docinspect operations."""


class ConfigurationError(DocInspectError):
    """Fatal error while building the validator set.

    Raised at load time only. The whole load is aborted; a partially
    configured validator set is never handed to the engine.
    """

    def __init__(self, validator_name: str, message: str):
        self.validator_name = validator_name
        super().__init__(f"{validator_name}: {message}")


class UnknownValidatorError(ConfigurationError):
    """Configuration names a validator that is not registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name, f"There is no validator registered as '{name}'")


class DuplicateValidatorError(ConfigurationError):
    """A validator name is registered twice."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name, f"A validator is already registered as '{name}'")


class MissingAttributeError(ConfigurationError):
    """A mandatory configuration attribute is absent."""

    def __init__(self, validator_name: str, attribute: str):
        self.attribute = attribute
        super().__init__(validator_name, f"required attribute '{attribute}' is not specified")


class InvalidAttributeError(ConfigurationError):
    """A configuration attribute cannot be interpreted."""

    def __init__(self, validator_name: str, attribute: str, value: str):
        self.attribute = attribute
        self.value = value
        super().__init__(validator_name, f"invalid value {value!r} for attribute '{attribute}'")


class ResourceLoadError(ConfigurationError):
    """An auxiliary resource (e.g. a dictionary file) could not be loaded."""

    def __init__(self, validator_name: str, resource: str, cause: Optional[BaseException] = None):
        self.resource = resource
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(validator_name, f"failed to load resource '{resource}'{detail}")


class ValidationCancelledError(DocInspectError):
    """A validation run was cancelled between targets."""
