"""
Shared test fixtures and configuration.
"""

import os
from pathlib import Path
from typing import BinaryIO

import pytest

from regen.adapters.base import Processor, SourceError
from regen.core.text.filetext import FileText

# A fixed base time well inside the range every filesystem can store.
BASE_NS = 1_700_000_000 * 1_000_000_000


def set_mtime(path: Path, seconds_after_base: int) -> None:
    """Pin ``path``'s mtime to ``BASE_NS + seconds_after_base`` seconds."""
    ns = BASE_NS + seconds_after_base * 1_000_000_000
    os.utime(path, ns=(ns, ns))


class RecordingProcessor(Processor):
    """Upper-cases its input and remembers what it processed."""

    def __init__(self) -> None:
        self.seen: list[Path] = []

    @property
    def name(self) -> str:
        return "recording"

    def process(self, input: FileText, output: BinaryIO) -> None:
        self.seen.append(input.path)
        output.write(input.content.upper())


class RejectingProcessor(Processor):
    """Raises a SourceError for any input containing ``marker``."""

    def __init__(self, marker: bytes = b"bad", message: str = "bad token") -> None:
        self.marker = marker
        self.message = message
        self.seen: list[Path] = []

    @property
    def name(self) -> str:
        return "rejecting"

    def process(self, input: FileText, output: BinaryIO) -> None:
        self.seen.append(input.path)
        index = input.content.find(self.marker)
        if index != -1:
            output.write(b"partial")
            raise SourceError(input, self.message, (index, index + len(self.marker)))
        output.write(input.content)


@pytest.fixture
def recording() -> RecordingProcessor:
    return RecordingProcessor()


@pytest.fixture
def rejecting() -> RejectingProcessor:
    return RejectingProcessor()


@pytest.fixture
def tree(tmp_path: Path):
    """Return a helper that writes files relative to ``tmp_path``."""

    def make(files: dict[str, str]) -> Path:
        for rel, content in files.items():
            path = tmp_path / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content)
        return tmp_path

    return make


@pytest.fixture
def is_root() -> bool:
    return hasattr(os, "geteuid") and os.geteuid() == 0


@pytest.fixture
def touch():
    """Return ``set_mtime`` for pinning file timestamps."""
    return set_mtime
