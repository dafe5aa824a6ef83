"""
Safe rewrite — replace a generated file and lock it read-only.

Sequence for one stale output:

    1. delete the old output if present
    2. load the source through FileText
    3. create the output and let the processor write into it
    4. clear the write bits

The lock is only applied once the processor returned and the file was
closed, so a failed write leaves an unlocked file that step 1 of the
next run clears away.
"""

from __future__ import annotations

import logging
import stat
from pathlib import Path

from regen.adapters.base import Processor
from regen.core.text.filetext import FileText

logger = logging.getLogger(__name__)

_WRITE_BITS = stat.S_IWUSR | stat.S_IWGRP | stat.S_IWOTH


def delete_if_present(path: Path) -> None:
    """Remove ``path``; a missing or undeletable file is a no-op.

    Unix reports a missing file as not-found; Windows reports a missing
    file that was read-only as permission-denied.  Both mean there is
    nothing to clean up.  Any other error propagates.
    """
    try:
        path.unlink()
    except (FileNotFoundError, PermissionError) as e:
        logger.debug("Nothing to remove at %s (%s)", path, e.__class__.__name__)
    else:
        logger.debug("Removed %s", path)


def make_read_only(path: Path) -> None:
    mode = path.stat().st_mode
    path.chmod(stat.S_IMODE(mode) & ~_WRITE_BITS)


def rewrite(source: Path, output: Path, processor: Processor) -> None:
    """Regenerate ``output`` from ``source`` with ``processor``.

    Raises:
        OSError: Loading, creating, writing or locking failed.
        SourceError: The processor rejected the source content.
    """
    delete_if_present(output)

    input_file = FileText.from_path(source)
    with open(output, "wb") as sink:
        processor.process(input_file, sink)

    make_read_only(output)
    logger.info("Regenerated %s from %s [%s]", output, source, processor.name)
