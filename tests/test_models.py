"""
Tests for domain models — spans, derived output paths and run results.
"""

import json
from pathlib import Path

import pytest

from regen.adapters.base import SourceError
from regen.core.models import (
    DEFAULT_OUTPUT_EXTENSION,
    ProcessResult,
    RebuildDecision,
    SourcePair,
    Span,
    output_path_for,
)
from regen.core.text.filetext import FileText


class TestSpan:
    def test_valid(self):
        span = Span(4, 7)
        assert (span.start, span.end) == (4, 7)

    def test_empty_span_allowed(self):
        span = Span(3, 3)
        assert span.start == span.end == 3

    def test_start_after_end_rejected(self):
        with pytest.raises(ValueError):
            Span(7, 4)

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            Span(-1, 2)

    def test_frozen(self):
        span = Span(1, 2)
        with pytest.raises(AttributeError):
            span.start = 0


class TestOutputPath:
    def test_default_extension(self):
        assert DEFAULT_OUTPUT_EXTENSION == "rs"
        assert output_path_for(Path("g/parser.lalrpop")) == Path("g/parser.rs")

    def test_custom_extension(self):
        assert output_path_for(Path("t/page.tpl"), "py") == Path("t/page.py")

    def test_only_last_suffix_replaced(self):
        assert output_path_for(Path("a.b.ext")) == Path("a.b.rs")

    def test_source_pair(self):
        pair = SourcePair(Path("x/y.ext"), "out")
        assert pair.output == Path("x/y.out")


class TestRebuildDecision:
    def test_needs_rebuild(self):
        assert RebuildDecision.REBUILD.needs_rebuild
        assert not RebuildDecision.SKIP.needs_rebuild


class TestProcessResult:
    def test_defaults(self):
        result = ProcessResult(root=Path("/r"))
        assert result.ok
        assert not result.failed
        assert result.rebuilt == []

    def test_source_failure(self):
        ft = FileText("f.ext", b"abc bad")
        result = ProcessResult(root=Path("/r")).fail_source(SourceError(ft, "bad token", (4, 7)))
        assert result.failed
        assert result.status == "source_error"
        data = result.to_dict()
        assert data["error"] == {
            "kind": "source",
            "path": "f.ext",
            "message": "bad token",
            "span": [4, 7],
        }

    def test_io_failure(self):
        error = PermissionError(13, "Permission denied", "/r/a.rs")
        result = ProcessResult(root=Path("/r")).fail_io(error)
        assert result.status == "io_error"
        data = result.to_dict()
        assert data["error"]["kind"] == "io"
        assert data["error"]["path"] == "/r/a.rs"

    def test_to_dict_is_json_serializable(self):
        result = ProcessResult(root=Path("/r"), scanned=2, skipped=1, rebuilt=[Path("/r/a.rs")])
        data = json.loads(json.dumps(result.to_dict()))
        assert data["rebuilt"] == ["/r/a.rs"]
        assert data["error"] is None


class TestSourceError:
    def test_span_tuple_converted(self):
        err = SourceError(FileText("f.ext", b"abc"), "msg", (0, 1))
        assert err.span == Span(0, 1)
        assert str(err) == "f.ext: msg"
