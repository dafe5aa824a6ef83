"""
Configuration loader — reads regen.yml into a RegenConfig.

It reads YAML, validates against the Pydantic schema and returns a
typed config.  Every setting has a default, so a missing file is not
an error for callers that pass everything on the command line.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from regen.core.models.config import RegenConfig

logger = logging.getLogger(__name__)

# Default config filename
CONFIG_FILE = "regen.yml"


class ConfigError(Exception):
    """Raised when regen configuration is invalid or unreadable."""


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for regen.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to regen.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_config(path: Path) -> RegenConfig:
    """Load and validate regen configuration.

    Raises:
        ConfigError: If the file is missing or invalid.
    """
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading regen config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # The YAML may wrap everything under a "regen" key or be flat
    if isinstance(data.get("regen"), dict):
        data = data["regen"]

    try:
        config = RegenConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid regen configuration in {path}: {e}") from e

    logger.info("Loaded regen config from %s (*.%s → *.%s)",
                path, config.extension or "?", config.output_extension)
    return config


def resolve_root(config: RegenConfig, config_path: Path | None) -> Path:
    """Directory to scan: ``config.root`` relative to the config file, else cwd."""
    base = config_path.parent.resolve() if config_path else Path.cwd()
    if config.root is None:
        return base
    root = Path(config.root)
    return root if root.is_absolute() else base / root
