"""Source text access — byte offsets, positions and excerpts."""

from regen.core.text.filetext import FileText

__all__ = ["FileText"]
