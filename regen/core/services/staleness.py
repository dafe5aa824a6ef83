"""
Staleness check — does a generated file need regenerating?

Equal modification times count as stale.  Filesystem timestamp
resolution is coarse enough that "same mtime" may still hide an edit,
and an extra rebuild is harmless where a missed one is not.
"""

from __future__ import annotations

import logging
from pathlib import Path

from regen.core.models.decision import RebuildDecision

logger = logging.getLogger(__name__)


def needs_rebuild(source: Path, output: Path) -> bool:
    """True when ``output`` is missing or not strictly newer than ``source``.

    Raises:
        OSError: Metadata of either file could not be read (other than
            the output being absent).
    """
    try:
        output_mtime = output.stat().st_mtime_ns
    except FileNotFoundError:
        return True
    return source.stat().st_mtime_ns >= output_mtime


def decide(source: Path, output: Path, force: bool = False) -> RebuildDecision:
    """Compute the rebuild decision for one source/output pair."""
    if force:
        decision = RebuildDecision.REBUILD
    elif needs_rebuild(source, output):
        decision = RebuildDecision.REBUILD
    else:
        decision = RebuildDecision.SKIP
    logger.debug("%s → %s (force=%s)", source, decision.value, force)
    return decision
