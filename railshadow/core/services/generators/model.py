"""
Model generator — one ActiveRecord class per exported interface.
"""

from __future__ import annotations

from railshadow.core.models.config import GeneratorConfig
from railshadow.core.models.description import Association, ModelDescription, Validation
from railshadow.core.models.template import GeneratedFile
from railshadow.core.services.naming import to_snake_case
from railshadow.core.services.templates import load_template, render_template

DEFAULT_SCOPE = "scope :recent, -> { order(created_at: :desc) }"
INSTANCE_METHODS_HINT = "# add instance methods as needed"

_VALIDATION_LINES = {
    "presence": "validates :{field}, presence: true",
    "email": "validates :{field}, format: {{ with: URI::MailTo::EMAIL_REGEXP }}",
    "url": "validates :{field}, format: {{ with: URI::DEFAULT_PARSER.make_regexp }}",
}


def format_association(association: Association) -> str:
    if association.kind == "belongs_to":
        return f"belongs_to :{association.name}"
    if association.kind == "has_many":
        return f"has_many :{association.name}, class_name: '{association.class_name}'"
    return ""


def format_associations(associations: list[Association]) -> str:
    if not associations:
        return "# associations: none inferred"
    lines = [format_association(a) for a in associations]
    return "\n  ".join(line for line in lines if line)


def format_validations(validations: list[Validation]) -> str:
    if not validations:
        return "# validations: none inferred"
    lines = [
        _VALIDATION_LINES[v.kind].format(field=v.field)
        for v in validations
        if v.kind in _VALIDATION_LINES
    ]
    return "\n  ".join(lines)


def render_model(
    template: str,
    model: ModelDescription,
    *,
    interface_path: str,
    timestamp: str | None = None,
) -> str:
    values = {
        "model_name": model.name,
        "associations": format_associations(model.associations),
        "validations": format_validations(model.validations),
        "scopes": DEFAULT_SCOPE,
        "instance_methods": INSTANCE_METHODS_HINT,
        "interface_path": interface_path,
    }
    if timestamp is not None:
        values["timestamp"] = timestamp
    return render_template(template, values)


def generate(
    config: GeneratorConfig,
    models: list[ModelDescription],
    *,
    timestamp: str | None = None,
) -> list[GeneratedFile]:
    """Render ``app/models/<snake>.rb`` for every model, in input order."""
    template = load_template(config, "model")
    return [
        GeneratedFile(
            path=f"{config.models_output}/{to_snake_case(model.name)}.rb",
            content=render_model(
                template,
                model,
                interface_path=config.paths.types,
                timestamp=timestamp,
            ),
            reason=f"ActiveRecord model for {model.name}",
            label=f"{model.name} Model",
        )
        for model in models
    ]
