"""
Generated file model — used by all generators.
"""

from __future__ import annotations

from pydantic import BaseModel


class GeneratedFile(BaseModel):
    """A file produced by one of the generators.

    Attributes:
        path:      Relative path from project root.
        content:   Full file content.
        overwrite: Whether to overwrite if already exists.
        reason:    Why this file was generated.
        label:     Heading shown when the file is previewed (dry-run).
    """

    path: str
    content: str
    overwrite: bool = True
    reason: str = ""
    label: str = ""
