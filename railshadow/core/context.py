"""
Generator context — the single source of truth for "which configuration
is this run using."

The configuration is set ONCE at startup by the CLI entry point
(``main.py → context.set_config(config)``) and only read afterwards.
Tests register their own config built on ``tmp_path``.

Design notes:
    - Module-level singleton (not a class).
    - get_config() returns None when unset. The CLI actions read it
      back here and pass it on to services as an explicit argument.
"""

from __future__ import annotations

from typing import Optional

from railshadow.core.models.config import GeneratorConfig


_config: Optional[GeneratorConfig] = None


def set_config(config: GeneratorConfig) -> None:
    """Register the generator configuration for the current process."""
    global _config
    _config = config


def get_config() -> Optional[GeneratorConfig]:
    """Return the current configuration, or None if not yet set."""
    return _config
