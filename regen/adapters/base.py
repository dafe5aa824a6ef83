"""
Processor base — the contract between the driver and a transformation.

The driver only talks to processors through this protocol.  It hands a
processor the loaded input and an open, writable binary sink; the
processor either fills the sink and returns, or raises.

To create a new processor:
    1. Subclass Processor
    2. Implement name and process
    3. Register it in the ProcessorRegistry, or point ``--processor``
       at it as ``package.module:attribute``
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import BinaryIO

from regen.core.models.span import Span
from regen.core.text.filetext import FileText


class SourceError(Exception):
    """A failure attributable to the content of an input file.

    Carries the offending file, a human-readable message and the byte
    span that caused it.  Never retried: the run stops at the first one.
    """

    def __init__(self, file: FileText, message: str, span: Span | tuple[int, int]):
        if not isinstance(span, Span):
            span = Span(*span)
        super().__init__(message)
        self.file = file
        self.message = message
        self.span = span

    def __str__(self) -> str:
        return f"{self.file.path}: {self.message}"


class ProcessorError(Exception):
    """Raised when a processor cannot be found or loaded."""


class Processor(ABC):
    """Abstract base class for all processors."""

    @property
    @abstractmethod
    def name(self) -> str:
        """The processor identifier (e.g., 'copy')."""

    @abstractmethod
    def process(self, input: FileText, output: BinaryIO) -> None:
        """Transform ``input`` and write the complete result to ``output``.

        Raises:
            SourceError: The input content is invalid.
            OSError: Reading or writing failed.
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
