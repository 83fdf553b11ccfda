"""Tagger backends."""

from .process import CommandTagger, ProcessTagger  # noqa: F401
from .senna import SennaTagger  # noqa: F401
from .simple import SimpleTagger  # noqa: F401
from .spacy import SpacyTagger  # noqa: F401
