"""NER tagging stage delegating to pluggable tagger backends."""

__all__ = [
    "StageConfig",
    "NERTaggerStage",
    "tag_hypotheses",
]

__version__ = "0.1.0"

from .config import StageConfig  # noqa: E402
from .stage import NERTaggerStage, tag_hypotheses  # noqa: E402
