"""
regen — build-time source regeneration driver.

Public API for build scripts:

    from regen import Processor, SourceError, Span, process_dir

    process_dir("grammars", "lalrpop", MyProcessor())
"""

from __future__ import annotations

__version__ = "0.1.0"

from regen.adapters.base import Processor, SourceError
from regen.core.models.span import Span
from regen.core.text.filetext import FileText
from regen.core.use_cases.process import (
    ProcessResult,
    process_dir,
    process_or_exit,
    process_root,
)

__all__ = [
    "FileText",
    "ProcessResult",
    "Processor",
    "SourceError",
    "Span",
    "__version__",
    "process_dir",
    "process_or_exit",
    "process_root",
]
