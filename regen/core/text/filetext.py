"""
FileText — raw source content with byte-offset → line/column mapping.

Processors receive a ``FileText`` and report failures as byte-offset
spans into it.  The diagnostic reporter turns those offsets back into
human positions and an excerpt with the spanned text underlined.

Offsets are byte offsets into the file as stored on disk.  Lines and
columns returned by ``line_col`` are zero-based; the column is also a
byte count.  The excerpt converts byte columns to character columns so
the marker lines up with decoded text.
"""

from __future__ import annotations

import bisect
import logging
import sys
from pathlib import Path
from typing import TextIO

from regen.core.models.span import Span

logger = logging.getLogger(__name__)


class FileText:
    """The content of one source file, indexed by line."""

    def __init__(self, path: Path | str, content: bytes):
        self._path = Path(path)
        self._content = content
        # Byte offset at which each line starts.  Line 0 always starts at 0.
        self._line_starts = [0]
        start = content.find(b"\n")
        while start != -1:
            self._line_starts.append(start + 1)
            start = content.find(b"\n", start + 1)

    @classmethod
    def from_path(cls, path: Path | str) -> FileText:
        """Read ``path`` in binary mode.  ``OSError`` propagates."""
        path = Path(path)
        content = path.read_bytes()
        logger.debug("Loaded %s (%d bytes)", path, len(content))
        return cls(path, content)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def content(self) -> bytes:
        return self._content

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def line_col(self, offset: int) -> tuple[int, int]:
        """Map a byte offset to a zero-based ``(line, column)`` pair.

        An offset that points at a newline belongs to the line the
        newline terminates.  Offsets past the end of the content are
        clamped to the end.
        """
        if offset < 0:
            raise ValueError(f"Offset must be non-negative: {offset}")
        offset = min(offset, len(self._content))
        line = bisect.bisect_right(self._line_starts, offset) - 1
        return line, offset - self._line_starts[line]

    def line_bytes(self, line: int) -> bytes:
        """Raw bytes of ``line`` without its line terminator."""
        start = self._line_starts[line]
        if line + 1 < len(self._line_starts):
            end = self._line_starts[line + 1] - 1
        else:
            end = len(self._content)
        return self._content[start:end].rstrip(b"\r")

    def line_text(self, line: int) -> str:
        return _decode(self.line_bytes(line))

    def highlight(self, span: Span, out: TextIO | None = None) -> None:
        """Write an excerpt of ``span`` to ``out`` (default: stdout).

        A span within one line prints that line with ``~`` under the
        spanned columns (a single ``^`` for an empty or one-column span)::

              let x = 1 +;
                        ~~

        A span across several lines is boxed: a ``~`` rule over the
        start, each line prefixed with ``|``, and a rule under the end::

              ~~~~~~~+
            | first  |
            | second |
            | last
            +~~~
        """
        out = out or sys.stdout
        start_line, start_col = self.line_col(span.start)
        end_line, end_col = self.line_col(span.end)

        if start_line == end_line:
            text = self.line_bytes(start_line)
            first = _width(text[:start_col])
            last = _width(text[:end_col])
            out.write(f"  {_decode(text)}\n")
            if last - first <= 1:
                out.write(f"  {' ' * first}^\n")
            else:
                out.write(f"  {' ' * first}{'~' * (last - first)}\n")
            return

        lines = [self.line_text(i) for i in range(start_line, end_line + 1)]
        width = max(len(line) for line in lines)
        first = _width(self.line_bytes(start_line)[:start_col])
        last = _width(self.line_bytes(end_line)[:end_col])

        out.write(f"  {' ' * first}{'~' * (width - first)}+\n")
        for line in lines[:-1]:
            out.write(f"| {line:<{width}} |\n")
        out.write(f"| {lines[-1]}\n")
        out.write(f"+{'~' * max(last, 1)}\n")

    def __repr__(self) -> str:
        return f"<FileText path={str(self._path)!r} bytes={len(self._content)}>"


def _decode(raw: bytes) -> str:
    return raw.decode("utf-8", errors="replace")


def _width(raw: bytes) -> int:
    """Number of characters ``raw`` decodes to."""
    return len(_decode(raw))
