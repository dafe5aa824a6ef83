"""
Span and file-pair models — the positions and paths a run works with.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

# Extension given to generated siblings unless configured otherwise.
DEFAULT_OUTPUT_EXTENSION = "rs"


@dataclass(frozen=True)
class Span:
    """A ``[start, end)`` range of byte offsets into a source file."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < 0:
            raise ValueError(f"Span offsets must be non-negative: {self}")
        if self.start > self.end:
            raise ValueError(f"Span start must not exceed end: {self}")


@dataclass(frozen=True)
class SourcePair:
    """A discovered source file and the generated file derived from it.

    The output path is never named independently: it is always the
    source path with its extension swapped for ``output_extension``.
    """

    source: Path
    output_extension: str = DEFAULT_OUTPUT_EXTENSION

    @property
    def output(self) -> Path:
        return output_path_for(self.source, self.output_extension)


def output_path_for(source: Path, output_extension: str = DEFAULT_OUTPUT_EXTENSION) -> Path:
    """Derive the generated file path for ``source``."""
    return source.with_suffix(f".{output_extension}")
