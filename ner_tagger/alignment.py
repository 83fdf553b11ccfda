from typing import List, Sequence

from ner_tagger.errors import AlignmentMismatchError, MalformedOutputError
from ner_tagger.types import NER_ATTRIBUTE_NAME, Token, WordResult


def align_results(hypothesis: Sequence[Token], results: Sequence[WordResult]) -> None:
    """Copy each result's NER label onto the token at the same position.

    The merge is purely positional. Tokens are left untouched when the
    lengths differ or any result lacks a label.
    """
    if len(results) != len(hypothesis):
        raise AlignmentMismatchError(expected=len(hypothesis), actual=len(results))

    labels: List[str] = []
    for index, result in enumerate(results):
        if not result.analysis:
            raise MalformedOutputError(
                f"Tagger result {index} ({result.word!r}) has no label"
            )
        labels.append(result.label)

    for token, label in zip(hypothesis, labels):
        setattr(token, NER_ATTRIBUTE_NAME, label)
