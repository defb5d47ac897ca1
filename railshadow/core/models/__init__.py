"""
Domain models — Pydantic types for the generator.

All models are re-exported here for convenient access:

    from railshadow.core.models import ComponentDescription, ModelDescription, GeneratedFile
"""

from railshadow.core.models.config import GeneratorConfig, PathsConfig, TemplateNames
from railshadow.core.models.description import (
    Association,
    ComponentDescription,
    ExportInfo,
    Handler,
    ModelDescription,
    PropField,
    StateVar,
    Validation,
)
from railshadow.core.models.template import GeneratedFile

__all__ = [
    # description.py
    "Association",
    "ComponentDescription",
    "ExportInfo",
    # template.py
    "GeneratedFile",
    # config.py
    "GeneratorConfig",
    "Handler",
    "ModelDescription",
    "PathsConfig",
    "PropField",
    "StateVar",
    "TemplateNames",
    "Validation",
]
