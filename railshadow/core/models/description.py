"""
Description records — what the extractors learn about a source file.

A record is built, rendered and discarded within one generator run.
Nothing here is persisted.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class PropField(BaseModel):
    """A declared field of a Props block or an exported interface."""

    name: str
    optional: bool = False
    type: str = ""  # raw type text, never parsed


class StateVar(BaseModel):
    """A ``useState`` binding."""

    name: str
    type: str = "unknown"
    initial_value: str = ""


class Handler(BaseModel):
    """An event handler found by naming convention."""

    name: str
    kind: str = "custom"  # click, change, submit, touch, drag, focus, blur, custom


class ExportInfo(BaseModel):
    """How the component is exported."""

    type: str = "default"  # default, named
    name: str = ""


class ComponentDescription(BaseModel):
    """Flat summary of a React component file."""

    name: str = ""
    file_path: str = ""
    props: list[PropField] = Field(default_factory=list)
    state: list[StateVar] = Field(default_factory=list)
    handlers: list[Handler] = Field(default_factory=list)
    hooks: list[str] = Field(default_factory=list)
    child_components: list[str] = Field(default_factory=list)
    icons: list[str] = Field(default_factory=list)
    style_classes: list[str] = Field(default_factory=list)
    exports: ExportInfo = Field(default_factory=ExportInfo)


class Association(BaseModel):
    """An inferred ActiveRecord association.

    ``name`` is the association as declared on the model; ``target`` is the
    referenced entity in singular form (only a trailing ``s`` is stripped).
    """

    kind: str  # belongs_to, has_many
    name: str
    target: str = ""

    @property
    def class_name(self) -> str:
        """Capitalized target, as used in ``class_name:`` options."""
        return self.target[:1].upper() + self.target[1:]


class Validation(BaseModel):
    """An inferred model validation."""

    kind: str  # presence, email, url
    field: str


class ModelDescription(BaseModel):
    """Flat summary of one exported interface/type."""

    name: str
    fields: list[PropField] = Field(default_factory=list)
    associations: list[Association] = Field(default_factory=list)
    validations: list[Validation] = Field(default_factory=list)
