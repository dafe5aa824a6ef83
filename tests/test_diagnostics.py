"""
Tests for the diagnostic reporter — location line, excerpt and exit status.
"""

import io
from pathlib import Path

from regen.adapters.base import SourceError
from regen.core.models.outcome import ProcessResult
from regen.core.models.span import Span
from regen.core.services.diagnostics import EXIT_FAILURE, EXIT_OK, format_location, report
from regen.core.text.filetext import FileText


def _source_failure(path: str, content: bytes, span: tuple[int, int]) -> ProcessResult:
    ft = FileText(path, content)
    return ProcessResult(root=Path(".")).fail_source(SourceError(ft, "bad token", span))


class TestFormatLocation:
    def test_single_line(self):
        ft = FileText("f.ext", b"abc bad xyz")
        assert format_location(ft, Span(4, 7), "bad token") == "f.ext:1:5: 1:7 error: bad token"

    def test_multi_line(self):
        ft = FileText("f.ext", b"one\ntwo\nthree")
        assert format_location(ft, Span(2, 10), "oops") == "f.ext:1:3: 3:2 error: oops"


class TestReport:
    def test_success_is_silent(self):
        out = io.StringIO()
        assert report(ProcessResult(root=Path(".")), out) == EXIT_OK
        assert out.getvalue() == ""

    def test_source_error(self):
        out = io.StringIO()
        result = _source_failure("f.ext", b"abc bad xyz", (4, 7))
        assert report(result, out) == EXIT_FAILURE
        lines = out.getvalue().splitlines()
        assert lines[0] == "f.ext:1:5: 1:7 error: bad token"
        assert lines[1] == "  abc bad xyz"
        assert lines[2] == "      ~~~"

    def test_source_error_on_later_line(self):
        out = io.StringIO()
        result = _source_failure("g.ext", b"ok\nstill ok\nx bad", (14, 17))
        report(result, out)
        lines = out.getvalue().splitlines()
        assert lines[0] == "g.ext:3:3: 3:5 error: bad token"
        assert lines[1] == "  x bad"

    def test_io_error(self):
        out = io.StringIO()
        error = FileNotFoundError(2, "No such file or directory", "/missing")
        result = ProcessResult(root=Path(".")).fail_io(error)
        assert report(result, out) == EXIT_FAILURE
        assert out.getvalue() == f"{error}\n"
        assert out.getvalue().count("\n") == 1

    def test_defaults_to_stdout(self, capsys):
        result = _source_failure("f.ext", b"abc bad xyz", (4, 7))
        report(result)
        captured = capsys.readouterr()
        assert captured.out.startswith("f.ext:1:5: 1:7 error: bad token\n")
        assert captured.err == ""
