"""
Process-based tagger backends.

The block is written to a temporary text file, the external tool is run
with that file (on stdin, or as an argument), and its column output is
parsed back into one WordResult per line.
"""

import logging
import os
import shlex
import subprocess
import tempfile
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Union

from ner_tagger.errors import (
    MalformedOutputError,
    TaggerInterruptedError,
    TaggerIOError,
    TaggerProcessError,
)
from ner_tagger.registry import taggers
from ner_tagger.types import TextBlock, WordResult

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 120.0
INPUT_PLACEHOLDER = "{input}"


def write_temp_input(text: str, encoding: str = "utf-8", directory: Optional[str] = None) -> str:
    """Write ``text`` to a fresh, uniquely named temp file and return its path."""
    try:
        fd, path = tempfile.mkstemp(prefix="input", suffix=".txt", dir=directory)
    except OSError as exc:
        raise TaggerIOError(f"Could not create tagger input file: {exc}") from exc

    try:
        with os.fdopen(fd, "w", encoding=encoding) as f:
            f.write(text)
    except OSError as exc:
        remove_temp_input(path)
        raise TaggerIOError(f"Could not write tagger input file {path}: {exc}") from exc
    return path


def remove_temp_input(path: str) -> None:
    """Best-effort removal of a tagger input file."""
    try:
        os.remove(path)
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning(f"Could not remove tagger input file {path}: {e}")


def parse_column_output(output: str) -> List[WordResult]:
    """
    Parse CoNLL-style tagger output.

    Every non-blank line holds the word followed by one or more analysis
    columns, separated by whitespace. Blank lines separate sentences and
    are skipped.

    Raises:
        MalformedOutputError: If a line has no analysis column
    """
    results: List[WordResult] = []
    for line_no, line in enumerate(output.splitlines(), start=1):
        columns = line.split()
        if not columns:
            continue
        if len(columns) < 2:
            raise MalformedOutputError(
                f"Malformed tagger output on line {line_no}: {line.strip()!r}"
            )
        results.append(WordResult(word=columns[0], analysis=columns[1:]))
    return results


class ProcessTagger(ABC):
    """Base class for taggers that run an external program per block.

    Subclasses implement ``build_command``; ``feeds_stdin`` and
    ``parse_output`` may be overridden.
    """

    def __init__(
        self,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        cwd: Optional[str] = None,
        encoding: str = "utf-8",
        temp_dir: Optional[str] = None,
    ) -> None:
        self.timeout = timeout
        self.cwd = cwd
        self.encoding = encoding
        self.temp_dir = temp_dir

    @abstractmethod
    def build_command(self, input_path: str) -> List[str]:
        """Argument vector running the tool on ``input_path``."""

    def feeds_stdin(self) -> bool:
        """Whether the input file is passed on stdin rather than as an argument."""
        return True

    def parse_output(self, output: str) -> List[WordResult]:
        return parse_column_output(output)

    def tag(self, block: TextBlock) -> List[WordResult]:
        input_path = write_temp_input(block.render(), self.encoding, self.temp_dir)
        try:
            output = self.run(input_path)
        finally:
            remove_temp_input(input_path)
        results = self.parse_output(output)
        logger.debug(f"Tagged block of {len(block)} words, got {len(results)} results")
        return results

    def run(self, input_path: str) -> str:
        """Run the tool on ``input_path`` and return its decoded stdout."""
        command = self.build_command(input_path)
        logger.debug(f"Running tagger: {' '.join(command)}")

        if self.feeds_stdin():
            try:
                stdin = open(input_path, "rb")
            except OSError as exc:
                raise TaggerIOError(f"Could not read tagger input file {input_path}: {exc}") from exc
        else:
            stdin = subprocess.DEVNULL

        try:
            completed = subprocess.run(
                command,
                stdin=stdin,
                capture_output=True,
                cwd=self.cwd,
                timeout=self.timeout,
                check=False,
            )
        except FileNotFoundError as exc:
            raise TaggerProcessError(f"Tagger executable not found: {command[0]}") from exc
        except PermissionError as exc:
            raise TaggerProcessError(f"Tagger executable not runnable: {command[0]}") from exc
        except subprocess.TimeoutExpired as exc:
            raise TaggerInterruptedError(
                f"Tagger did not finish within {self.timeout} seconds: {command[0]}"
            ) from exc
        except OSError as exc:
            raise TaggerProcessError(f"Could not start tagger {command[0]}: {exc}") from exc
        finally:
            if stdin is not subprocess.DEVNULL:
                stdin.close()

        stderr = completed.stderr.decode(self.encoding, errors="replace")
        if completed.returncode < 0:
            raise TaggerInterruptedError(
                f"Tagger {command[0]} was terminated by signal {-completed.returncode}"
            )
        if completed.returncode != 0:
            raise TaggerProcessError(
                f"Tagger {command[0]} exited with status {completed.returncode}: {stderr.strip()}",
                returncode=completed.returncode,
                stderr=stderr,
            )

        try:
            return completed.stdout.decode(self.encoding)
        except UnicodeDecodeError as exc:
            raise MalformedOutputError(f"Tagger output is not valid {self.encoding}") from exc


@taggers.register("command")
class CommandTagger(ProcessTagger):
    """
    Runs an arbitrary command producing word/label columns.

    The input file is fed on stdin unless an argument contains the
    ``{input}`` placeholder, which is then replaced by the file path.
    """

    def __init__(self, command: Union[str, Sequence[str]], **kwargs) -> None:
        super().__init__(**kwargs)
        if isinstance(command, str):
            command = shlex.split(command)
        if not command:
            raise ValueError("CommandTagger needs a non-empty command")
        self.command = list(command)

    def feeds_stdin(self) -> bool:
        return not any(INPUT_PLACEHOLDER in arg for arg in self.command)

    def build_command(self, input_path: str) -> List[str]:
        return [arg.replace(INPUT_PLACEHOLDER, input_path) for arg in self.command]
