import logging
from typing import List, Optional

import spacy
from spacy.language import Language
from spacy.tokens import Doc, Token

from ner_tagger.registry import taggers
from ner_tagger.types import TextBlock, WordResult

logger = logging.getLogger(__name__)


def iob_label(token: Token) -> str:
    """IOB label of a spaCy token, e.g. ``B-PER`` or ``O``."""
    if token.ent_iob_ in ("", "O") or not token.ent_type_:
        return "O"
    return f"{token.ent_iob_}-{token.ent_type_}"


@taggers.register("spacy")
class SpacyTagger:
    """In-process tagger running a spaCy pipeline over pre-tokenised words."""

    def __init__(self, model: str = "en_core_web_sm", nlp: Optional[Language] = None) -> None:
        if nlp is None:
            logger.info(f"Loading spaCy model: {model}")
            nlp = spacy.load(model)
        self.nlp = nlp

    def tag(self, block: TextBlock) -> List[WordResult]:
        # Keep the block's own tokenisation so output stays aligned word for word.
        doc = self.nlp(Doc(self.nlp.vocab, words=list(block.words)))
        return [WordResult(word=token.text, analysis=[iob_label(token)]) for token in doc]
