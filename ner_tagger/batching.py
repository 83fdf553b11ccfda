"""
Splitting of hypotheses into text blocks for the tagger.
"""

from typing import List, Sequence

from ner_tagger.errors import EmptyHypothesisError
from ner_tagger.types import TextBlock, Token


def build_text_blocks(tokens: Sequence[Token], per_instruction: bool = False) -> List[TextBlock]:
    """
    Group the words of a hypothesis into text blocks.

    Without per-instruction mode every word goes into a single block. With it,
    a new block starts whenever a token's instruction number is strictly
    greater than the previous token's; the last block is always emitted.

    Args:
        tokens: Ordered tokens of one hypothesis
        per_instruction: Whether to emit one block per instruction

    Returns:
        Ordered list of text blocks covering every token exactly once

    Raises:
        EmptyHypothesisError: If ``tokens`` is empty
    """
    if not tokens:
        raise EmptyHypothesisError("Cannot build text blocks for an empty hypothesis")

    if not per_instruction:
        return [TextBlock(words=[t.word for t in tokens])]

    blocks: List[TextBlock] = []
    current: List[str] = []
    instruction_number = tokens[0].instruction_number
    for token in tokens:
        if token.instruction_number > instruction_number:
            blocks.append(TextBlock(words=current))
            current = []
        current.append(token.word)
        instruction_number = token.instruction_number
    blocks.append(TextBlock(words=current))
    return blocks
