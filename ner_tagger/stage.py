import collections.abc
import logging
from typing import Any, List, Optional, Sequence

# Ensure backend registration by importing modules with registry decorators.
from ner_tagger import taggers as _taggers_pkg  # noqa: F401

from .alignment import align_results
from .batching import build_text_blocks
from .config import StageConfig
from .errors import DataUnavailableError, ExternalToolError, MissingDataError, NERStageError
from .registry import taggers
from .taggers.base import Tagger
from .types import Hypothesis, PrePipelineData, Token, WordResult

logger = logging.getLogger(__name__)


def check_hypothesis(hypothesis: Any) -> None:
    """Reject hypotheses that are not sequences of token-like objects."""
    if isinstance(hypothesis, (str, bytes)) or not isinstance(hypothesis, collections.abc.Sequence):
        raise DataUnavailableError(
            f"Hypothesis must be a sequence of tokens, got {type(hypothesis).__name__}"
        )
    for position, token in enumerate(hypothesis):
        if not (hasattr(token, "word") and hasattr(token, "instruction_number")):
            raise DataUnavailableError(
                f"Item {position} of hypothesis is not a token: {type(token).__name__}"
            )


class NERTaggerStage:
    """Pipeline stage adding NER labels to the tokens of every hypothesis."""

    ID = "ner"

    def __init__(self, config: Optional[StageConfig] = None, tagger: Optional[Tagger] = None) -> None:
        self.config = config or StageConfig()
        if tagger is None:
            tagger_factory = taggers.get(self.config.tagger.name)
            tagger = tagger_factory(**self.config.tagger.params)
        self.tagger = tagger

    def get_id(self) -> str:
        return self.ID

    def parse(self, tokens: Sequence[Token]) -> List[WordResult]:
        """Tag ``tokens`` block by block and return the concatenated results."""
        if self.config.parse_per_instruction:
            logger.info("parsing NER for each instruction independently")
        else:
            logger.info("parsing NER without instructions")

        blocks = build_text_blocks(tokens, per_instruction=self.config.parse_per_instruction)
        results: List[WordResult] = []
        for index, block in enumerate(blocks):
            try:
                results.extend(self.tagger.tag(block))
            except ExternalToolError as exc:
                exc.block_index = index
                raise
        return results

    def tag_hypothesis(self, hypothesis: Hypothesis) -> Hypothesis:
        check_hypothesis(hypothesis)
        results = self.parse(hypothesis)
        align_results(hypothesis, results)
        return hypothesis

    def process(self, hypotheses: Sequence[Hypothesis]) -> List[Hypothesis]:
        """Tag every hypothesis in order; the first failure aborts the run."""
        tagged: List[Hypothesis] = []
        for index, hypothesis in enumerate(hypotheses):
            try:
                tagged.append(self.tag_hypothesis(hypothesis))
            except NERStageError as exc:
                exc.hypothesis_index = index
                logger.error(f"{type(exc).__name__} while tagging: {exc}")
                raise
        return tagged

    def exec(self, data: Any) -> List[Hypothesis]:
        if not isinstance(data, PrePipelineData):
            logger.error("Cannot process on data - PipelineData unreadable")
            raise DataUnavailableError(
                f"Cannot process on data of type {type(data).__name__}"
            )
        try:
            hypotheses = data.get_tagged_hypotheses()
        except MissingDataError as exc:
            logger.error("No tagged hypotheses provided")
            raise DataUnavailableError("No tagged hypotheses provided") from exc
        if isinstance(hypotheses, (str, bytes)) or not isinstance(hypotheses, collections.abc.Sequence):
            logger.error("Tagged hypotheses are not a sequence")
            raise DataUnavailableError(
                f"Tagged hypotheses must be a sequence, got {type(hypotheses).__name__}"
            )
        return self.process(hypotheses)


def tag_hypotheses(
    hypotheses: Sequence[Hypothesis],
    config: Optional[StageConfig] = None,
    tagger: Optional[Tagger] = None,
) -> List[Hypothesis]:
    """Functional entry point: label ``hypotheses`` in place and return them."""
    return NERTaggerStage(config, tagger=tagger).process(hypotheses)
