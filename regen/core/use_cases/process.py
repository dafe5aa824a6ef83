"""
Process use case — one regeneration pass over a directory tree.

    scan → decide → rewrite, per file, stopping at the first failure.

Failures are returned as part of the ``ProcessResult`` rather than
raised, so callers decide whether to terminate.  ``process_or_exit``
is that decision for build scripts that just want "regenerate or die".
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from regen.adapters.base import Processor, SourceError
from regen.core.models.outcome import ProcessResult
from regen.core.models.span import DEFAULT_OUTPUT_EXTENSION, SourcePair
from regen.core.services.diagnostics import report
from regen.core.services.rewriter import rewrite
from regen.core.services.scanner import find_sources
from regen.core.services.staleness import decide

logger = logging.getLogger(__name__)


def process_dir(
    root: Path | str,
    extension: str,
    processor: Processor,
    force: bool = False,
    output_extension: str = DEFAULT_OUTPUT_EXTENSION,
    dry_run: bool = False,
) -> ProcessResult:
    """Regenerate every stale output under ``root``.

    Args:
        root: Directory to scan recursively.
        extension: Input file extension, without the dot.
        processor: Transformation applied to each stale input.
        force: Rebuild every output regardless of timestamps.
        output_extension: Extension of the generated siblings.
        dry_run: Decide only; report the would-be rebuilds without
            touching any file.

    Returns:
        ProcessResult with ``status`` "ok", "source_error" or "io_error".

    Raises:
        ValueError: ``extension`` equals ``output_extension``, which
            would make every source its own output.
    """
    if extension == output_extension:
        raise ValueError(
            f"Input and output extension are both '{extension}'; "
            "outputs would overwrite their sources."
        )
    root = Path(root)
    result = ProcessResult(root=root, dry_run=dry_run)

    try:
        sources = find_sources(root, extension)
    except OSError as e:
        logger.debug("Scan of %s failed: %s", root, e)
        return result.fail_io(e)

    result.scanned = len(sources)

    for source in sources:
        pair = SourcePair(source, output_extension)
        try:
            if not decide(pair.source, pair.output, force=force).needs_rebuild:
                result.skipped += 1
                continue
            if not dry_run:
                rewrite(pair.source, pair.output, processor)
        except SourceError as e:
            logger.debug("Processor %s rejected %s", processor.name, pair.source)
            return result.fail_source(e)
        except OSError as e:
            logger.debug("I/O failure on %s: %s", pair.source, e)
            return result.fail_io(e)
        result.rebuilt.append(pair.output)

    logger.info(
        "Processed %s: %d scanned, %d rebuilt, %d up to date",
        root, result.scanned, len(result.rebuilt), result.skipped,
    )
    return result


def process_root(
    extension: str,
    processor: Processor,
    force: bool = False,
    output_extension: str = DEFAULT_OUTPUT_EXTENSION,
    dry_run: bool = False,
) -> ProcessResult:
    """``process_dir`` rooted at the current working directory."""
    return process_dir(
        Path.cwd(),
        extension,
        processor,
        force=force,
        output_extension=output_extension,
        dry_run=dry_run,
    )


def process_or_exit(
    root: Path | str | None,
    extension: str,
    processor: Processor,
    force: bool = False,
    output_extension: str = DEFAULT_OUTPUT_EXTENSION,
) -> ProcessResult:
    """Run a pass, print any diagnostic and exit non-zero on failure.

    ``root`` of None means the current working directory.  Returns the
    result only when the pass succeeded.
    """
    result = process_dir(
        Path.cwd() if root is None else root,
        extension,
        processor,
        force=force,
        output_extension=output_extension,
    )
    code = report(result)
    if code:
        sys.exit(code)
    return result
