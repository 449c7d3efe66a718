"""Sentence-scope validators."""

from docinspect.validators.sentence.suggest_expression import SuggestExpressionValidator
from docinspect.validators.sentence.sentence_length import SentenceLengthValidator

__all__ = ["SuggestExpressionValidator", "SentenceLengthValidator"]
