"""
Rails generation — read sources, analyze, render, write.

Channel-independent: the CLI composes these steps and decides whether
rendered files are written or printed. Missing inputs are the only
fatal condition and raise ``GenerationError`` naming the path.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from railshadow.core.models.config import GeneratorConfig
from railshadow.core.models.description import ComponentDescription, ModelDescription
from railshadow.core.models.template import GeneratedFile
from railshadow.core.services.component_analyzer import analyze_component
from railshadow.core.services.generators import model as model_generator
from railshadow.core.services.generators import stimulus as stimulus_generator
from railshadow.core.services.generators import view_component as view_component_generator
from railshadow.core.services.model_analyzer import parse_models

logger = logging.getLogger(__name__)

COMPONENT_SUFFIX = ".tsx"


class GenerationError(Exception):
    """Raised when a required input path does not exist."""


# ═══════════════════════════════════════════════════════════════════
#  Inputs
# ═══════════════════════════════════════════════════════════════════


def check_prerequisites(config: GeneratorConfig, *, create_docs: bool = True) -> dict:
    """Report template-override availability and make sure docs/ exists.

    Returns:
        {"templates_dir": bool, "docs_created": bool}
    """
    has_templates = config.templates_dir.is_dir()
    if not has_templates:
        logger.info("Template directory %s not found; using built-in fallbacks", config.templates_dir)

    docs_created = False
    if create_docs and not config.docs_dir.is_dir():
        config.docs_dir.mkdir(parents=True, exist_ok=True)
        docs_created = True

    return {"templates_dir": has_templates, "docs_created": docs_created}


def read_source(path: Path, what: str) -> str:
    """Read a required input file.

    Bytes that are not valid UTF-8 are replaced rather than rejected.

    Raises:
        GenerationError: The file does not exist.
    """
    if not path.is_file():
        raise GenerationError(f"{what} not found at {path}")
    return path.read_text(encoding="utf-8", errors="replace")


def relative_source_path(config: GeneratorConfig, path: Path) -> str:
    """Path as recorded in generated artifacts (relative to root, posix)."""
    return Path(os.path.relpath(path, config.root)).as_posix()


def list_component_names(config: GeneratorConfig) -> list[str]:
    """Component names (file stems) in the components directory, sorted.

    Raises:
        GenerationError: The components directory does not exist.
    """
    directory = config.components_dir
    if not directory.is_dir():
        raise GenerationError(f"Components directory not found at {directory}")
    return sorted(
        p.name[: -len(COMPONENT_SUFFIX)]
        for p in directory.iterdir()
        if p.is_file() and p.name.endswith(COMPONENT_SUFFIX)
    )


def analyze_component_file(config: GeneratorConfig, component_name: str) -> ComponentDescription:
    """Read and analyze ``<components dir>/<component_name>.tsx``."""
    path = config.components_dir / f"{component_name}{COMPONENT_SUFFIX}"
    content = read_source(path, "Component")
    return analyze_component(content, relative_source_path(config, path))


def load_models(config: GeneratorConfig) -> list[ModelDescription]:
    """Parse every exported interface in the type-declarations file."""
    content = read_source(config.types_file, "Type definitions")
    return parse_models(content)


# ═══════════════════════════════════════════════════════════════════
#  Rendering
# ═══════════════════════════════════════════════════════════════════


def render_component(
    config: GeneratorConfig,
    description: ComponentDescription,
    *,
    component_name: str | None = None,
    timestamp: str | None = None,
) -> list[GeneratedFile]:
    """ViewComponent rb/erb/css followed by the Stimulus controller."""
    files = view_component_generator.generate(
        config, description, component_name=component_name, timestamp=timestamp,
    )
    files += stimulus_generator.generate(
        config, description, component_name=component_name, timestamp=timestamp,
    )
    return files


def render_models(
    config: GeneratorConfig,
    models: list[ModelDescription],
    *,
    timestamp: str | None = None,
) -> list[GeneratedFile]:
    return model_generator.generate(config, models, timestamp=timestamp)


# ═══════════════════════════════════════════════════════════════════
#  Output
# ═══════════════════════════════════════════════════════════════════


def write_generated_file(project_root: Path, file: GeneratedFile) -> Path | None:
    """Write a GeneratedFile under ``project_root``.

    Returns:
        The written path, or None when the file exists and
        ``overwrite`` is False.
    """
    target = project_root / file.path

    if target.exists() and not file.overwrite:
        logger.warning("File already exists, not overwriting: %s", file.path)
        return None

    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(file.content, encoding="utf-8")
    logger.info("Wrote generated file: %s", target)
    return target
