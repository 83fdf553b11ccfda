import logging
import os
import platform
from typing import List, Optional, Sequence

from ner_tagger.errors import TaggerProcessError
from ner_tagger.registry import taggers
from ner_tagger.taggers.process import DEFAULT_TIMEOUT, ProcessTagger

logger = logging.getLogger(__name__)

SENNA_PATH_ENV = "SENNA_PATH"
# User tokenisation keeps SENNA's output aligned with our words; NER only.
SENNA_OPTIONS = ["-usrtokens", "-ner"]


def default_executable(system: Optional[str] = None, machine: Optional[str] = None) -> str:
    """Name of the SENNA binary shipped for the given platform."""
    system = system or platform.system()
    machine = machine or platform.machine()
    if system == "Linux":
        return "senna-linux64" if machine.endswith("64") else "senna-linux32"
    if system == "Darwin":
        return "senna-osx"
    if system == "Windows":
        return "senna-win32.exe"
    raise TaggerProcessError(f"No SENNA executable known for platform {system}/{machine}")


@taggers.register("senna")
class SennaTagger(ProcessTagger):
    """Runs the SENNA command-line tagger on a block of user tokens."""

    def __init__(
        self,
        path: Optional[str] = None,
        executable: Optional[str] = None,
        options: Sequence[str] = tuple(SENNA_OPTIONS),
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        **kwargs,
    ) -> None:
        path = path or os.environ.get(SENNA_PATH_ENV)
        if not path:
            raise TaggerProcessError(
                f"SENNA installation directory not configured; "
                f"pass 'path' or set {SENNA_PATH_ENV}"
            )
        self.path = os.path.abspath(path)
        self.executable = os.path.join(self.path, executable or default_executable())
        self.options = list(options)
        kwargs.setdefault("cwd", self.path)
        super().__init__(timeout=timeout, **kwargs)
        logger.info(f"Using SENNA at {self.executable} with options {self.options}")

    def build_command(self, input_path: str) -> List[str]:
        # SENNA expects a trailing separator on its data directory.
        return [self.executable, "-path", os.path.join(self.path, "")] + self.options
