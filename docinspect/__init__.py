"""docinspect: a pluggable document-inspection engine.

Runs configurable rule checks over a parsed document tree (sections,
paragraphs, sentences) and returns an ordered list of findings.
"""

from docinspect.exceptions import (
    DocInspectError,
    ConfigurationError,
    UnknownValidatorError,
    MissingAttributeError,
    InvalidAttributeError,
    ResourceLoadError,
    ValidationCancelledError,
)
from docinspect.models import (
    Document,
    Section,
    Paragraph,
    Sentence,
    Position,
    ConfigurationNode,
    CharacterTable,
    SharedResources,
)
from docinspect.validators import (
    ValidationEngine,
    ValidationError,
    Severity,
    default_registry,
    register_validator,
)

__version__ = "0.1.0"

__all__ = [
    "DocInspectError",
    "ConfigurationError",
    "UnknownValidatorError",
    "MissingAttributeError",
    "InvalidAttributeError",
    "ResourceLoadError",
    "ValidationCancelledError",
    "Document",
    "Section",
    "Paragraph",
    "Sentence",
    "Position",
    "ConfigurationNode",
    "CharacterTable",
    "SharedResources",
    "ValidationEngine",
    "ValidationError",
    "Severity",
    "default_registry",
    "register_validator",
]
