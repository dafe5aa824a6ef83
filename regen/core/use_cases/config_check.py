"""
Config check use case — validate regen.yml and report issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from regen.adapters.base import ProcessorError
from regen.adapters.registry import create_default_registry
from regen.core.config.loader import ConfigError, find_config_file, load_config, resolve_root
from regen.core.models.config import RegenConfig


@dataclass
class ConfigCheckResult:
    """Result of configuration validation."""

    valid: bool = False
    config: RegenConfig | None = None
    config_path: Path | None = None
    root: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "root": str(self.root) if self.root else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "config": self.config.model_dump() if self.config else None,
        }


def check_config(config_path: Path | None = None) -> ConfigCheckResult:
    """Validate regen configuration and report issues.

    Args:
        config_path: Optional explicit path to regen.yml.

    Returns:
        ConfigCheckResult with validation status and any issues.
    """
    result = ConfigCheckResult()

    if config_path is None:
        config_path = find_config_file()

    if config_path is None:
        result.errors.append("No regen.yml found.")
        return result

    result.config_path = config_path

    try:
        config = load_config(config_path)
        result.config = config
    except ConfigError as e:
        result.errors.append(str(e))
        return result

    if not config.extension:
        result.errors.append("No input extension configured ('extension').")
    elif config.extension == config.output_extension:
        result.errors.append(
            f"Input and output extension are both '{config.extension}'; "
            "outputs would overwrite their sources."
        )

    try:
        create_default_registry().resolve(config.processor)
    except ProcessorError as e:
        result.errors.append(str(e))

    root = resolve_root(config, config_path)
    result.root = root
    if not root.is_dir():
        result.warnings.append(f"Root directory does not exist: {root}")

    if config.force:
        result.warnings.append("force is enabled: every run regenerates all outputs.")

    result.valid = len(result.errors) == 0
    return result
