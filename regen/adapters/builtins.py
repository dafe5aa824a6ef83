"""
Built-in processors — usable without any plugin module.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import BinaryIO

from regen.adapters.base import Processor
from regen.core.text.filetext import FileText

logger = logging.getLogger(__name__)


class CopyProcessor(Processor):
    """Writes the input bytes unchanged."""

    @property
    def name(self) -> str:
        return "copy"

    def process(self, input: FileText, output: BinaryIO) -> None:
        output.write(input.content)


class StripProcessor(Processor):
    """Removes trailing whitespace from every line."""

    @property
    def name(self) -> str:
        return "strip"

    def process(self, input: FileText, output: BinaryIO) -> None:
        lines = input.content.split(b"\n")
        output.write(b"\n".join(line.rstrip() for line in lines))


class FunctionProcessor(Processor):
    """Adapts a plain ``(FileText, BinaryIO) -> None`` callable."""

    def __init__(self, func: Callable[[FileText, BinaryIO], None], name: str | None = None):
        self._func = func
        self._name = name or getattr(func, "__name__", "function")

    @property
    def name(self) -> str:
        return self._name

    def process(self, input: FileText, output: BinaryIO) -> None:
        self._func(input, output)
