"""
Diagnostic reporter — render a run's failure and pick the exit status.

Source errors print a compiler-style location line followed by an
excerpt of the offending span::

    grammar.ext:1:5: 1:7 error: bad token
      let x = 1;
          ~~~

Start positions are printed 1-based.  The end column is the zero-based
exclusive end, which reads as the 1-based column of the last spanned
character.

The reporter never terminates the process; callers pass the returned
status to ``sys.exit``.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from regen.core.models.outcome import ProcessResult
from regen.core.models.span import Span
from regen.core.text.filetext import FileText

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def format_location(file_text: FileText, span: Span, message: str) -> str:
    """Build the ``path:line:col: line:col error: message`` header."""
    start_line, start_col = file_text.line_col(span.start)
    end_line, end_col = file_text.line_col(span.end)
    return (
        f"{file_text.path}:{start_line + 1}:{start_col + 1}: "
        f"{end_line + 1}:{end_col} error: {message}"
    )


def report(result: ProcessResult, out: TextIO | None = None) -> int:
    """Write the diagnostic for ``result`` to ``out`` and return the exit status.

    Successful results write nothing.  Environmental failures exit
    non-zero like source errors do: a pass that could not finish is
    not a clean pass.
    """
    out = out or sys.stdout

    if result.source_error is not None:
        err = result.source_error
        out.write(format_location(err.file, err.span, err.message) + "\n")
        err.file.highlight(err.span, out)
        out.flush()
        return EXIT_FAILURE

    if result.io_error is not None:
        out.write(f"{result.io_error}\n")
        out.flush()
        return EXIT_FAILURE

    return EXIT_OK
