"""Adapters — pluggable transformation processors.

Public re-exports for convenient access.
"""

from regen.adapters.base import Processor, ProcessorError, SourceError
from regen.adapters.builtins import CopyProcessor, FunctionProcessor, StripProcessor
from regen.adapters.registry import ProcessorRegistry, create_default_registry, load_processor

__all__ = [
    "CopyProcessor",
    "FunctionProcessor",
    "Processor",
    "ProcessorError",
    "ProcessorRegistry",
    "SourceError",
    "StripProcessor",
    "create_default_registry",
    "load_processor",
]
