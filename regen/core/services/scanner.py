"""
Source scanner — recursive discovery of input files by extension.

Entries are classified by their own type: symlinks are neither
followed into nor reported, so a symlink cycle cannot loop the scan.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def find_sources(root: Path | str, extension: str) -> list[Path]:
    """Return every regular file under ``root`` whose extension is ``extension``.

    The match is exact and case-sensitive against the final suffix
    (``grammar.lalrpop`` matches ``lalrpop``, ``grammar.LALRPOP`` does
    not).  Directories are never returned.  Order is unspecified.

    Raises:
        OSError: A directory could not be listed or an entry could not
            be classified.  Scanning stops at the first failure.
    """
    suffix = f".{extension}"
    found: list[Path] = []
    _scan(Path(root), suffix, found)
    logger.debug("Found %d *%s file(s) under %s", len(found), suffix, root)
    return found


def _scan(directory: Path, suffix: str, found: list[Path]) -> None:
    with os.scandir(directory) as entries:
        for entry in entries:
            path = Path(entry.path)
            if entry.is_dir(follow_symlinks=False):
                _scan(path, suffix, found)
            elif entry.is_file(follow_symlinks=False) and path.suffix == suffix:
                found.append(path)
