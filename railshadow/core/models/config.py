"""
Generator configuration — fixed paths and template file names.

Built once at startup (see ``railshadow.core.config.loader``) and
treated as read-only for the rest of the process.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class PathsConfig(BaseModel):
    """Input/output locations, relative to the project root."""

    model_config = ConfigDict(frozen=True)

    components: str = "src/components/app"
    types: str = "src/types/index.ts"
    templates: str = "scripts/templates"
    output: str = "rails_generated"
    docs: str = "docs"
    mapping_log: str = "docs/react_to_rails.md"


class TemplateNames(BaseModel):
    """Override template file names, looked up inside ``paths.templates``."""

    model_config = ConfigDict(frozen=True)

    view_component: str = "view_component.rb.template"
    view_component_erb: str = "view_component.html.erb.template"
    view_component_css: str = "view_component.css.template"
    stimulus: str = "stimulus_controller.js.template"
    model: str = "model.rb.template"

    def file_for(self, key: str) -> str:
        """Return the file name registered for a template key."""
        return getattr(self, key)


class GeneratorConfig(BaseModel):
    """Process-wide generator configuration."""

    model_config = ConfigDict(frozen=True)

    root: Path = Field(default_factory=Path.cwd)
    paths: PathsConfig = Field(default_factory=PathsConfig)
    templates: TemplateNames = Field(default_factory=TemplateNames)

    # ── Resolved locations ──────────────────────────────────────

    @property
    def components_dir(self) -> Path:
        return self.root / self.paths.components

    @property
    def types_file(self) -> Path:
        return self.root / self.paths.types

    @property
    def templates_dir(self) -> Path:
        return self.root / self.paths.templates

    @property
    def docs_dir(self) -> Path:
        return self.root / self.paths.docs

    @property
    def mapping_log(self) -> Path:
        return self.root / self.paths.mapping_log

    # ── Output tree (relative to root) ──────────────────────────

    @property
    def components_output(self) -> str:
        return f"{self.paths.output}/app/components"

    @property
    def stylesheets_output(self) -> str:
        return f"{self.paths.output}/app/assets/stylesheets"

    @property
    def stimulus_output(self) -> str:
        return f"{self.paths.output}/app/javascript/controllers"

    @property
    def models_output(self) -> str:
        return f"{self.paths.output}/app/models"
