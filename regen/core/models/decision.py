"""
Rebuild decision model.
"""

from __future__ import annotations

from enum import StrEnum


class RebuildDecision(StrEnum):
    """Whether a source's generated output has to be regenerated."""

    SKIP = "skip"
    REBUILD = "rebuild"

    @property
    def needs_rebuild(self) -> bool:
        return self is RebuildDecision.REBUILD
