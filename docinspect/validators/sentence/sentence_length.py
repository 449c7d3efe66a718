"""Sentence Length Validator: flags sentences longer than ``max_length`` characters."""

from docinspect.models.document import Sentence
from docinspect.validators.base import SentenceValidator
from docinspect.validators.models import ValidationError
from docinspect.validators.registry import register_validator

DEFAULT_MAX_LENGTH = 120


@register_validator("SentenceLength")
class SentenceLengthValidator(SentenceValidator):

    def __init__(self):
        super().__init__()
        self.max_length = DEFAULT_MAX_LENGTH

    def init(self) -> None:
        self.max_length = self.get_int_attribute("max_length", DEFAULT_MAX_LENGTH)

    def validate(self, sentence: Sentence) -> list[ValidationError]:
        length = len(sentence.content)
        if length <= self.max_length:
            return []
        return [self._error(
            f"The length of the sentence ({length}) exceeds the maximum of {self.max_length}.",
            sentence=sentence,
        )]

    def _state_key(self) -> tuple:
        return (self.max_length, self.level)
