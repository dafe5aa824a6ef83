"""
Run outcome — what one regeneration pass produced.

A pass ends in exactly one of three states:

    ok            every stale output was regenerated
    source_error  a processor rejected an input (``source_error`` set)
    io_error      the filesystem failed somewhere (``io_error`` set)

The pass stops at the first failure, so there is never more than one
error per result.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Literal

if TYPE_CHECKING:
    from regen.adapters.base import SourceError


@dataclass
class ProcessResult:
    """Result of one pass over a root directory."""

    root: Path
    status: Literal["ok", "source_error", "io_error"] = "ok"
    scanned: int = 0
    skipped: int = 0
    rebuilt: list[Path] = field(default_factory=list)
    dry_run: bool = False
    source_error: SourceError | None = None
    io_error: OSError | None = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    @property
    def failed(self) -> bool:
        return not self.ok

    def fail_source(self, error: SourceError) -> ProcessResult:
        self.status = "source_error"
        self.source_error = error
        return self

    def fail_io(self, error: OSError) -> ProcessResult:
        self.status = "io_error"
        self.io_error = error
        return self

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "root": str(self.root),
            "status": self.status,
            "dry_run": self.dry_run,
            "scanned": self.scanned,
            "skipped": self.skipped,
            "rebuilt": [str(p) for p in self.rebuilt],
            "error": None,
        }
        if self.source_error is not None:
            err = self.source_error
            data["error"] = {
                "kind": "source",
                "path": str(err.file.path),
                "message": err.message,
                "span": [err.span.start, err.span.end],
            }
        elif self.io_error is not None:
            data["error"] = {
                "kind": "io",
                "path": getattr(self.io_error, "filename", None),
                "message": str(self.io_error),
            }
        return data
