"""
Configuration loader — reads railshadow.yml into a GeneratorConfig.

The file is optional. Without it the generator runs with the default
layout rooted at the current directory. When present, the directory
holding it becomes the project root.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from railshadow.core.models.config import GeneratorConfig

logger = logging.getLogger(__name__)

# Default config filename
CONFIG_FILE = "railshadow.yml"


class ConfigError(Exception):
    """Raised when the generator configuration is invalid or unreadable."""


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for railshadow.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to railshadow.yml, or None if not found.
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


def load_config(path: Path | None = None) -> GeneratorConfig:
    """Load and validate the generator configuration.

    Args:
        path: Explicit path to railshadow.yml. If None, searches upward
            and falls back to defaults rooted at the cwd.

    Returns:
        Validated, frozen GeneratorConfig.

    Raises:
        ConfigError: If an explicit file is missing, or any file is invalid.
    """
    explicit = path is not None
    if path is None:
        path = find_config_file()

    if path is None:
        logger.debug("No %s found; using default layout", CONFIG_FILE)
        return GeneratorConfig(root=Path.cwd().resolve())

    if not path.is_file():
        if explicit:
            raise ConfigError(f"Config file not found: {path}")
        return GeneratorConfig(root=Path.cwd().resolve())

    logger.debug("Loading generator config from %s", path)

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

    # The YAML may wrap everything under a "railshadow" key or be flat
    section = data.get("railshadow", data) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"Expected a mapping under 'railshadow' in {path}")
    config_data = dict(section)

    root = config_data.pop("root", None)
    base = path.parent.resolve()
    config_data["root"] = (base / root).resolve() if root else base

    try:
        config = GeneratorConfig.model_validate(config_data)
    except Exception as e:
        raise ConfigError(f"Invalid generator configuration: {e}") from e

    logger.info("Loaded generator config rooted at %s", config.root)
    return config
