"""
Domain models for a regeneration run.

    from regen.core.models import Span, SourcePair, RebuildDecision
"""

from regen.core.models.config import RegenConfig
from regen.core.models.decision import RebuildDecision
from regen.core.models.outcome import ProcessResult
from regen.core.models.span import (
    DEFAULT_OUTPUT_EXTENSION,
    SourcePair,
    Span,
    output_path_for,
)

__all__ = [
    "DEFAULT_OUTPUT_EXTENSION",
    "ProcessResult",
    "RebuildDecision",
    "RegenConfig",
    "SourcePair",
    "Span",
    "output_path_for",
]
