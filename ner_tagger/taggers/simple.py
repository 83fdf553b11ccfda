from typing import List

from ner_tagger.registry import taggers
from ner_tagger.types import TextBlock, WordResult


@taggers.register("simple")
class SimpleTagger:
    """Capitalisation heuristic for quick tests (no external deps)."""

    def __init__(self, label: str = "ENT", min_len: int = 1) -> None:
        self.label = label
        self.min_len = min_len

    def tag(self, block: TextBlock) -> List[WordResult]:
        results: List[WordResult] = []
        for word in block.words:
            is_entity = word.isalnum() and word[:1].isupper() and len(word) >= self.min_len
            results.append(WordResult(word=word, analysis=[self.label if is_entity else "O"]))
        return results
