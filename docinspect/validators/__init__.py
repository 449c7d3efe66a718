"""Validators: registry, scope contracts, traversal engine and bundled rules.

Usage:
    from docinspect.validators import ValidationEngine

    engine = ValidationEngine.from_configuration(root_config)
    errors = engine.run(document)

Importing this package registers the bundled validators with
``default_registry``.
"""

from docinspect.validators.models import ValidationError, Severity, Scope
from docinspect.validators.base import (
    BaseValidator,
    DocumentValidator,
    SectionValidator,
    SentenceValidator,
)
from docinspect.validators.registry import (
    ValidatorRegistry,
    ValidatorSet,
    default_registry,
    register_validator,
)
from docinspect.validators.sink import ResultSink, NullSink, CallbackSink, CollectingSink
from docinspect.validators.engine import ValidationEngine

# Bundled validators (registration happens on import)
from docinspect.validators.document import DuplicateSectionHeaderValidator
from docinspect.validators.section import (
    SectionLengthValidator,
    ParagraphNumberValidator,
    ParagraphStartWithValidator,
)
from docinspect.validators.sentence import SuggestExpressionValidator, SentenceLengthValidator

__all__ = [
    "ValidationError",
    "Severity",
    "Scope",
    "BaseValidator",
    "DocumentValidator",
    "SectionValidator",
    "SentenceValidator",
    "ValidatorRegistry",
    "ValidatorSet",
    "default_registry",
    "register_validator",
    "ResultSink",
    "NullSink",
    "CallbackSink",
    "CollectingSink",
    "ValidationEngine",
    "DuplicateSectionHeaderValidator",
    "SectionLengthValidator",
    "ParagraphNumberValidator",
    "ParagraphStartWithValidator",
    "SuggestExpressionValidator",
    "SentenceLengthValidator",
]
