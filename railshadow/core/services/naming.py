"""
Naming converters — PascalCase/camelCase identifiers to Rails file names.
"""

from __future__ import annotations

import re

# A lowercase letter or digit followed by an uppercase letter
_CASE_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")


def to_snake_case(name: str) -> str:
    """``FilterChip`` → ``filter_chip``. Already-snake input is unchanged."""
    converted = _CASE_BOUNDARY.sub(r"\1_\2", name).lower()
    return converted[1:] if converted.startswith("_") else converted


def to_kebab_case(name: str) -> str:
    """``FilterChip`` → ``filter-chip``. Already-kebab input is unchanged."""
    return _CASE_BOUNDARY.sub(r"\1-\2", name).lower()

