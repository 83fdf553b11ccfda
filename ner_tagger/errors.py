"""
Exceptions raised by the NER tagging stage.

- DataUnavailableError : pipeline data missing or of the wrong shape
- EmptyHypothesisError : a hypothesis without tokens was handed in
- ExternalToolError    : the tagger backend failed (I/O, process, output)
- AlignmentMismatchError : tagger output and hypothesis differ in length

All of them derive from NERStageError and may carry the index of the
hypothesis (and block) that triggered them.
"""

from typing import Optional


class NERStageError(RuntimeError):
    """Base class for every failure of the NER stage."""

    def __init__(
        self,
        message: str,
        hypothesis_index: Optional[int] = None,
        block_index: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.hypothesis_index = hypothesis_index
        self.block_index = block_index

    def __str__(self) -> str:
        where = []
        if self.hypothesis_index is not None:
            where.append(f"hypothesis {self.hypothesis_index}")
        if self.block_index is not None:
            where.append(f"block {self.block_index}")
        if where:
            return f"{self.message} ({', '.join(where)})"
        return self.message


class DataUnavailableError(NERStageError):
    """Upstream pipeline data is missing or unreadable."""


class MissingDataError(DataUnavailableError):
    """Requested entry is not present on the pipeline data."""


class EmptyHypothesisError(NERStageError, ValueError):
    """A hypothesis contains no tokens."""


class ExternalToolError(NERStageError):
    """The tagger backend could not produce a result."""


class TaggerIOError(ExternalToolError):
    """Writing the tagger input file failed."""


class TaggerProcessError(ExternalToolError):
    """The tagger process could not be started or exited with an error."""

    def __init__(
        self,
        message: str,
        returncode: Optional[int] = None,
        stderr: str = "",
        **kwargs,
    ) -> None:
        super().__init__(message, **kwargs)
        self.returncode = returncode
        self.stderr = stderr


class TaggerInterruptedError(ExternalToolError):
    """The tagger process was killed or timed out."""


class MalformedOutputError(ExternalToolError):
    """The tagger output could not be decoded or parsed."""


class AlignmentMismatchError(NERStageError, ValueError):
    """Tagger result and hypothesis differ in length."""

    def __init__(self, expected: int, actual: int, **kwargs) -> None:
        super().__init__(
            f"Tagger result and hypothesis differ in length: "
            f"expected {expected} labels, got {actual}",
            **kwargs,
        )
        self.expected = expected
        self.actual = actual
