"""Shared fixtures for NER tagger tests."""

import os
import sys
import tempfile
from typing import Callable, Iterator, List, Optional

import pytest

from ner_tagger.types import Hypothesis, TextBlock, Token, WordResult


# ---------------------------------------------------------------------------
# Sample data fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def instruction_tokens() -> Hypothesis:
    """Two instructions: 'Open the door' and 'Close it'."""
    return [
        Token(word="Open", instruction_number=0),
        Token(word="the", instruction_number=0),
        Token(word="door", instruction_number=0),
        Token(word="Close", instruction_number=1),
        Token(word="it", instruction_number=1),
    ]


@pytest.fixture
def named_tokens() -> Hypothesis:
    """Hypothesis containing a person and a location."""
    return [
        Token(word="Armar", instruction_number=0),
        Token(word="go", instruction_number=0),
        Token(word="to", instruction_number=0),
        Token(word="Karlsruhe", instruction_number=0),
    ]


def outside_results(words: List[str]) -> List[WordResult]:
    return [WordResult(word=w, analysis=["O"]) for w in words]


# ---------------------------------------------------------------------------
# Mock taggers
# ---------------------------------------------------------------------------


class MockTagger:
    """Tagger returning 'O' for every word, or scripted results per call."""

    def __init__(self, scripted: Optional[List[List[WordResult]]] = None):
        self._scripted = list(scripted) if scripted is not None else None
        self.blocks: List[TextBlock] = []

    def tag(self, block: TextBlock) -> List[WordResult]:
        self.blocks.append(block)
        if self._scripted is not None:
            return self._scripted.pop(0)
        return outside_results(block.words)


class FailingTagger:
    """Tagger raising the given exception on the n-th call (0-based)."""

    def __init__(self, exc: Exception, fail_on: int = 0):
        self.exc = exc
        self.fail_on = fail_on
        self.calls = 0

    def tag(self, block: TextBlock) -> List[WordResult]:
        call = self.calls
        self.calls += 1
        if call == self.fail_on:
            raise self.exc
        return outside_results(block.words)


@pytest.fixture
def mock_tagger() -> MockTagger:
    return MockTagger()


@pytest.fixture
def make_mock_tagger() -> Callable[..., MockTagger]:
    return MockTagger


@pytest.fixture
def make_failing_tagger() -> Callable[..., FailingTagger]:
    return FailingTagger


# ---------------------------------------------------------------------------
# Fake external tool
# ---------------------------------------------------------------------------

FAKE_TAGGER_SOURCE = r'''
import sys

args = sys.argv[1:]
mode = "ok"
input_path = None
for arg in args:
    if arg.startswith("--mode="):
        mode = arg.split("=", 1)[1]
    elif arg.startswith("--input="):
        input_path = arg.split("=", 1)[1]

if input_path is not None:
    with open(input_path, encoding="utf-8") as f:
        text = f.read()
else:
    text = sys.stdin.read()

if mode == "fail":
    sys.stderr.write("model files missing\n")
    sys.exit(3)

words = text.split()
if mode == "drop":
    words = words[:-1]
for word in words:
    if mode == "garbage":
        print(word)
        continue
    label = "S-ENT" if word[:1].isupper() else "O"
    print("%s\t%s" % (word, label))
print()
'''


@pytest.fixture
def fake_tagger_script() -> Iterator[str]:
    """Python script mimicking a column-output NER tool."""
    with tempfile.NamedTemporaryFile(mode="w", suffix=".py", delete=False) as f:
        f.write(FAKE_TAGGER_SOURCE)
        path = f.name
    yield path
    os.unlink(path)


@pytest.fixture
def fake_tagger_command(fake_tagger_script: str) -> List[str]:
    return [sys.executable, fake_tagger_script]


@pytest.fixture
def temp_dir() -> Iterator[str]:
    """Empty temporary directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir
