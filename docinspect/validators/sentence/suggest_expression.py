"""Suggest Expression Validator: flags invalid expressions and proposes replacements.

Driven by a key/value dictionary (``dict`` attribute) mapping each invalid
expression to its suggested replacement, e.g. ``utilize<TAB>use``.
"""

from types import MappingProxyType
from typing import Mapping

import structlog

from docinspect.models.document import Sentence
from docinspect.validators.base import SentenceValidator
from docinspect.validators.dictionary import load_key_value_dictionary
from docinspect.validators.models import Severity, ValidationError
from docinspect.validators.registry import register_validator

logger = structlog.get_logger()


@register_validator("SuggestExpression")
class SuggestExpressionValidator(SentenceValidator):
    """Reports the first occurrence of every dictionary key in a sentence.

    Matching is plain substring search. Keys that overlap in the same
    sentence each produce their own finding; they are not merged.
    """

    def __init__(self):
        super().__init__()
        self._expressions: Mapping[str, str] = MappingProxyType({})

    def init(self) -> None:
        path = self.require_config_attribute("dict")
        logger.info("suggest_expression_dictionary", validator=self.name, path=path)
        self._expressions = MappingProxyType(load_key_value_dictionary(path, self.name))

    @classmethod
    def from_expressions(
        cls,
        expressions: Mapping[str, str],
        level: Severity = Severity.ERROR,
    ) -> "SuggestExpressionValidator":
        """Build a validator over an in-memory dictionary instead of a file.

        Args:
            expressions: Invalid expression → suggested replacement; empty
                keys are dropped
            level: Severity of the findings

        Returns:
            A ready validator; its dictionary is read-only like a loaded one
        """
        validator = cls()
        validator._level = level
        validator._expressions = MappingProxyType({k: v for k, v in expressions.items() if k})
        return validator

    @property
    def expressions(self) -> Mapping[str, str]:
        return self._expressions

    def validate(self, sentence: Sentence) -> list[ValidationError]:
        errors: list[ValidationError] = []
        content = sentence.content

        for expression, suggestion in self._expressions.items():
            start = content.find(expression)
            if start == -1:
                continue
            errors.append(self._error_with_span(
                sentence,
                start,
                start + len(expression),
                f'Found invalid expression "{expression}", suggest "{suggestion}".',
            ))

        return errors

    def _state_key(self) -> tuple:
        return tuple(sorted(self._expressions.items()))

    def __repr__(self) -> str:
        return f"SuggestExpressionValidator(expressions={dict(self._expressions)!r})"
