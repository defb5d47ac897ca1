"""
Stimulus generator — a controller stub per component.

State variables become ``static values``, handlers become action
methods that just log the event.
"""

from __future__ import annotations

from railshadow.core.models.config import GeneratorConfig
from railshadow.core.models.description import ComponentDescription
from railshadow.core.models.template import GeneratedFile
from railshadow.core.services.generators.view_component import common_values
from railshadow.core.services.naming import to_kebab_case
from railshadow.core.services.templates import load_template, render_template


def ts_to_js_type(ts_type: str = "") -> str:
    """Map a TS type annotation to a Stimulus value type (String by default)."""
    lowered = ts_type.lower()
    if "number" in lowered:
        return "Number"
    if "boolean" in lowered:
        return "Boolean"
    if "string" in lowered:
        return "String"
    if "array" in lowered or "[]" in lowered:
        return "Array"
    if "record" in lowered or "object" in lowered:
        return "Object"
    return "String"


def stimulus_values(description: ComponentDescription) -> str:
    return ", ".join(f"{s.name}: {ts_to_js_type(s.type)}" for s in description.state)


def stimulus_targets(description: ComponentDescription) -> str:
    targets = ['"element"']
    if description.child_components:
        targets.append('"content"')
    return ", ".join(targets)


def action_methods(description: ComponentDescription) -> str:
    if not description.handlers:
        return "// Add event handlers here"
    return "\n\n  ".join(
        f"{h.name}(event) {{\n    console.log('{h.name} called', event);\n  }}"
        for h in description.handlers
    )


def generate(
    config: GeneratorConfig,
    description: ComponentDescription,
    *,
    component_name: str | None = None,
    timestamp: str | None = None,
) -> list[GeneratedFile]:
    """Render ``<kebab>_controller.js`` for a component."""
    name = component_name or description.name
    content = render_template(load_template(config, "stimulus"), {
        "component_name": to_kebab_case(description.name),
        "stimulus_values": stimulus_values(description),
        "stimulus_targets": stimulus_targets(description),
        "initialization_code": (
            "// Initialize controller\n"
            f"    console.log('{description.name} controller connected')"
        ),
        "cleanup_code": (
            "// Cleanup resources\n"
            f"    console.log('{description.name} controller disconnected')"
        ),
        "action_methods": action_methods(description),
        **common_values(description, timestamp),
    })
    return [
        GeneratedFile(
            path=f"{config.stimulus_output}/{to_kebab_case(name)}_controller.js",
            content=content,
            reason=f"Stimulus controller for {name}",
            label="Stimulus Controller",
        ),
    ]
