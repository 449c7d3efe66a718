"""Input models: the document tree and the validator configuration tree."""

from docinspect.models.document import Document, Section, Paragraph, Sentence, Position
from docinspect.models.configuration import ConfigurationNode, CharacterTable, SharedResources

__all__ = [
    "Document",
    "Section",
    "Paragraph",
    "Sentence",
    "Position",
    "ConfigurationNode",
    "CharacterTable",
    "SharedResources",
]
