"""
Tests for FileText — offset mapping and excerpt rendering.
"""

import io
from pathlib import Path

import pytest

from regen.core.models.span import Span
from regen.core.text.filetext import FileText


@pytest.fixture
def text() -> FileText:
    return FileText("grammar.ext", b"first line\nsecond\n\nlast")


class TestLoad:
    def test_from_path(self, tmp_path: Path):
        path = tmp_path / "a.ext"
        path.write_bytes(b"abc\ndef")
        ft = FileText.from_path(path)
        assert ft.path == path
        assert ft.content == b"abc\ndef"
        assert ft.line_count == 2

    def test_from_missing_path_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            FileText.from_path(tmp_path / "missing.ext")


class TestLineCol:
    def test_start_of_file(self, text: FileText):
        assert text.line_col(0) == (0, 0)

    def test_within_first_line(self, text: FileText):
        assert text.line_col(6) == (0, 6)

    def test_newline_belongs_to_its_line(self, text: FileText):
        assert text.line_col(10) == (0, 10)

    def test_start_of_second_line(self, text: FileText):
        assert text.line_col(11) == (1, 0)

    def test_empty_line(self, text: FileText):
        assert text.line_col(18) == (2, 0)

    def test_last_line(self, text: FileText):
        assert text.line_col(21) == (3, 2)

    def test_end_of_content(self, text: FileText):
        assert text.line_col(23) == (3, 4)

    def test_past_end_is_clamped(self, text: FileText):
        assert text.line_col(500) == (3, 4)

    def test_negative_offset_rejected(self, text: FileText):
        with pytest.raises(ValueError):
            text.line_col(-1)

    def test_columns_are_bytes(self):
        ft = FileText("u.ext", "é = x".encode())
        # "é" is two bytes in UTF-8
        assert ft.line_col(3) == (0, 3)


class TestLineText:
    def test_strips_terminators(self):
        ft = FileText("crlf.ext", b"one\r\ntwo")
        assert ft.line_text(0) == "one"
        assert ft.line_text(1) == "two"


class TestHighlight:
    def test_single_line_span(self, text: FileText):
        out = io.StringIO()
        text.highlight(Span(6, 10), out)
        assert out.getvalue() == "  first line\n        ~~~~\n"

    def test_single_column_span_uses_caret(self, text: FileText):
        out = io.StringIO()
        text.highlight(Span(11, 12), out)
        assert out.getvalue() == "  second\n  ^\n"

    def test_empty_span_uses_caret(self, text: FileText):
        out = io.StringIO()
        text.highlight(Span(14, 14), out)
        assert out.getvalue() == "  second\n     ^\n"

    def test_multi_line_span(self, text: FileText):
        out = io.StringIO()
        text.highlight(Span(6, 14), out)
        assert out.getvalue() == (
            "        ~~~~+\n"
            "| first line |\n"
            "| second\n"
            "+~~~\n"
        )

    def test_marker_counts_characters_not_bytes(self):
        ft = FileText("u.ext", "é = bad".encode())
        out = io.StringIO()
        ft.highlight(Span(5, 8), out)
        assert out.getvalue() == "  é = bad\n      ~~~\n"
