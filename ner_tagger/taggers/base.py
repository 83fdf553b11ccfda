from typing import List, Protocol

from ner_tagger.types import TextBlock, WordResult


class Tagger(Protocol):
    """Assigns one NER label to every word of a text block, in order."""

    def tag(self, block: TextBlock) -> List[WordResult]:
        ...
