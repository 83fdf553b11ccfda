from dataclasses import dataclass, field
from typing import List, Optional

from ner_tagger.errors import MissingDataError

NER_ATTRIBUTE_NAME = "ner"


@dataclass
class Token:
    """Single word occurrence inside a hypothesis."""

    word: str
    instruction_number: int = 0
    ner: Optional[str] = None


Hypothesis = List[Token]


@dataclass
class TextBlock:
    """Span of words submitted to a tagger as one unit."""

    words: List[str] = field(default_factory=list)

    @property
    def text(self) -> str:
        return "".join(f"{word} " for word in self.words)

    def render(self) -> str:
        """Newline-terminated form written to a tagger input file."""
        return self.text + "\n"

    def __len__(self) -> int:
        return len(self.words)


@dataclass
class WordResult:
    """One row of tagger output: the word and its analysis columns."""

    word: str
    analysis: List[str] = field(default_factory=list)

    @property
    def label(self) -> str:
        return self.analysis[0]


TaggingResult = List[WordResult]


@dataclass
class PrePipelineData:
    """Shared pipeline data handed to the stage by the host."""

    tagged_hypotheses: Optional[List[Hypothesis]] = None

    def get_tagged_hypotheses(self) -> List[Hypothesis]:
        if self.tagged_hypotheses is None:
            raise MissingDataError("No tagged hypotheses set on pipeline data")
        return self.tagged_hypotheses
