"""
Processor registry — lookup of transformation processors by reference.

A reference is either a registered name (``copy``) or an import
reference ``package.module:attribute``.  The attribute may be a
``Processor`` instance, a ``Processor`` subclass (instantiated without
arguments) or a plain callable taking ``(FileText, BinaryIO)``.

.. warning::
    Import references execute code from the named module.  Only point
    them at trusted build code.
"""

from __future__ import annotations

import importlib
import inspect
import logging

from regen.adapters.base import Processor, ProcessorError
from regen.adapters.builtins import CopyProcessor, FunctionProcessor, StripProcessor

logger = logging.getLogger(__name__)


class ProcessorRegistry:
    """Registry of named processors with import-reference fallback."""

    def __init__(self) -> None:
        self._processors: dict[str, Processor] = {}

    def register(self, processor: Processor) -> None:
        """Register a processor instance under its name."""
        name = (processor.name or "").strip()
        if not name:
            raise ProcessorError("Processor must define a non-empty 'name'.")
        if name in self._processors:
            logger.warning("Overwriting existing processor: %s", name)
        self._processors[name] = processor
        logger.debug("Registered processor: %s", name)

    def names(self) -> list[str]:
        """Registered processor names, sorted."""
        return sorted(self._processors)

    def get(self, name: str) -> Processor:
        try:
            return self._processors[name]
        except KeyError as exc:
            raise ProcessorError(
                f"Unknown processor '{name}'. Available processors: {', '.join(self.names())}"
            ) from exc

    def resolve(self, ref: str) -> Processor:
        """Resolve a registered name or a ``module:attribute`` reference."""
        ref = ref.strip()
        if ":" not in ref:
            return self.get(ref)
        return load_processor(ref)


def load_processor(ref: str) -> Processor:
    """Import ``module:attribute`` and turn it into a ``Processor``."""
    module_name, _, attr_path = ref.partition(":")
    if not module_name or not attr_path:
        raise ProcessorError(
            f"Invalid processor reference '{ref}'. Expected 'package.module:attribute'."
        )

    try:
        module = importlib.import_module(module_name)
    except Exception as exc:
        raise ProcessorError(f"Unable to import processor module '{module_name}': {exc}") from exc

    obj: object = module
    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise ProcessorError(f"Module '{module_name}' has no attribute '{attr_path}'.") from exc

    if isinstance(obj, Processor):
        processor = obj
    elif inspect.isclass(obj) and issubclass(obj, Processor):
        processor = obj()
    elif callable(obj):
        processor = FunctionProcessor(obj, name=attr_path)
    else:
        raise ProcessorError(
            f"'{ref}' is not a Processor, a Processor subclass or a callable."
        )

    logger.debug("Loaded processor %r from %s", processor.name, ref)
    return processor


def create_default_registry() -> ProcessorRegistry:
    """Registry with the built-in processors."""
    registry = ProcessorRegistry()
    registry.register(CopyProcessor())
    registry.register(StripProcessor())
    return registry
