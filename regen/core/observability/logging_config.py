"""
Logging configuration for the regen CLI.

The CLI group calls ``setup_logging`` once with its global flags.  The
console level is picked in this order:

    --debug  >  --verbose  >  --quiet  >  REGEN_LOG_LEVEL  >  WARNING

REGEN_LOG_FILE adds a file handler at REGEN_LOG_FILE_LEVEL (default:
the console level).

stdout carries diagnostics only.  Console records always go to stderr,
and a log file that names stdout is ignored with a warning.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping

ENV_LEVEL = "REGEN_LOG_LEVEL"
ENV_FILE = "REGEN_LOG_FILE"
ENV_FILE_LEVEL = "REGEN_LOG_FILE_LEVEL"

# Log file targets that would interleave records with diagnostics
_STDOUT_TARGETS = frozenset({"-", "/dev/stdout", "/dev/fd/1", "/proc/self/fd/1"})

# Console formats by verbosity: bare messages by default, per-file detail
# once regeneration steps are being logged.
_FMT_QUIET = "regen: %(message)s"
_FMT_INFO = "%(asctime)s %(name)s: %(message)s"
_FMT_DEBUG = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d %(message)s"
_DATEFMT = "%H:%M:%S"

_FMT_FILE = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d %(message)s"
_DATEFMT_FILE = "%Y-%m-%d %H:%M:%S"


def resolve_level(
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
    env: Mapping[str, str] | None = None,
) -> int:
    """Console level from the CLI flags, falling back to REGEN_LOG_LEVEL."""
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO
    if quiet:
        return logging.ERROR
    env = os.environ if env is None else env
    return _parse_level(env.get(ENV_LEVEL))


def setup_logging(
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
    env: Mapping[str, str] | None = None,
) -> int:
    """Configure the root logger for a regen run.

    Args:
        debug: ``--debug`` was given.
        verbose: ``-v/--verbose`` was given.
        quiet: ``-q/--quiet`` was given.
        env: Environment to read ``REGEN_LOG_*`` from (default: os.environ).

    Returns:
        The resolved console level.
    """
    env = os.environ if env is None else env
    level = resolve_level(debug=debug, verbose=verbose, quiet=quiet, env=env)

    if level <= logging.DEBUG:
        fmt = _FMT_DEBUG
    elif level <= logging.INFO:
        fmt = _FMT_INFO
    else:
        fmt = _FMT_QUIET

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(logging.Formatter(fmt, datefmt=_DATEFMT))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)
    root.setLevel(level)

    effective = level
    log_file = env.get(ENV_FILE)
    if log_file and log_file in _STDOUT_TARGETS:
        logging.getLogger(__name__).warning(
            "Ignoring %s=%s: stdout is reserved for diagnostics", ENV_FILE, log_file
        )
    elif log_file:
        file_level = _parse_level(env.get(ENV_FILE_LEVEL), default=level)
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FMT_FILE, datefmt=_DATEFMT_FILE))
        root.addHandler(fh)
        effective = min(effective, file_level)

    root.setLevel(effective)
    logging.raiseExceptions = False
    return level


def _parse_level(name: str | None, default: int = logging.WARNING) -> int:
    if not name:
        return default
    numeric = logging.getLevelName(name.strip().upper())
    return numeric if isinstance(numeric, int) else default
