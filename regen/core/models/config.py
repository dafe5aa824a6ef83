"""
Config model — the settings a regeneration run needs.
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator

from regen.core.models.span import DEFAULT_OUTPUT_EXTENSION


class RegenConfig(BaseModel):
    """Settings from regen.yml, overridable from the command line.

    ``extension`` may be left empty in the file and supplied by the
    CLI; the build command refuses to run without one.
    """

    extension: str = ""
    output_extension: str = DEFAULT_OUTPUT_EXTENSION
    processor: str = "copy"
    root: str | None = None          # relative to the config file's directory
    force: bool = False

    @field_validator("extension", "output_extension")
    @classmethod
    def _strip_dot(cls, value: str) -> str:
        value = value.strip()
        if value.startswith("."):
            value = value[1:]
        if "/" in value or "\\" in value:
            raise ValueError(f"extension must not contain a path separator: {value!r}")
        return value

    @field_validator("output_extension")
    @classmethod
    def _require_output_extension(cls, value: str) -> str:
        if not value:
            raise ValueError("output_extension must not be empty")
        return value
