"""
ViewComponent generator — Ruby class, ERB template and BEM stylesheet.

Uses the sidecar layout:

    app/components/<snake>/<snake>_component.rb
    app/components/<snake>/<snake>_component.html.erb
    app/assets/stylesheets/components/_<kebab>.css
"""

from __future__ import annotations

from railshadow.core.models.config import GeneratorConfig
from railshadow.core.models.description import ComponentDescription
from railshadow.core.models.template import GeneratedFile
from railshadow.core.services.naming import to_kebab_case, to_snake_case
from railshadow.core.services.templates import load_template, render_template


# ── Fragments ───────────────────────────────────────────────────


def prop_attrs(description: ComponentDescription) -> str:
    if not description.props:
        return "# No props"
    return "\n  ".join(f"attr_reader :{p.name}" for p in description.props)


def props_signature(description: ComponentDescription) -> str:
    """Keyword arguments; optional props default to nil."""
    return ", ".join(
        f"{p.name}: nil" if p.optional else f"{p.name}:"
        for p in description.props
    )


def prop_assignments(description: ComponentDescription) -> str:
    if not description.props:
        return "# no props detected"
    return "\n    ".join(f"@{p.name} = {p.name}" for p in description.props)


def html_structure(description: ComponentDescription) -> str:
    """ERB comment hints for each child component found in the JSX."""
    hints = "\n  ".join(f"<%# Child: {c} %>" for c in description.child_components)
    return hints or "<%# Add component content here %>"


def common_values(description: ComponentDescription, timestamp: str | None) -> dict[str, str]:
    """Placeholders every component artifact shares."""
    values = {"react_file_path": description.file_path or "unknown"}
    if timestamp is not None:
        values["timestamp"] = timestamp
    return values


# ── Public API ──────────────────────────────────────────────────


def generate(
    config: GeneratorConfig,
    description: ComponentDescription,
    *,
    component_name: str | None = None,
    timestamp: str | None = None,
) -> list[GeneratedFile]:
    """Render the Ruby class, ERB template and stylesheet for a component.

    Args:
        config: Generator configuration (template overrides, output tree).
        description: Result of ``analyze_component``.
        component_name: Name used for output paths; defaults to the
            analyzed component name.
        timestamp: Value for ``{{timestamp}}``; left unresolved when None.

    Returns:
        Three GeneratedFile instances: rb, erb, css.
    """
    name = component_name or description.name
    snake = to_snake_case(name)
    bem_block = to_kebab_case(description.name)
    shared = common_values(description, timestamp)

    rb = render_template(load_template(config, "view_component"), {
        "component_name": description.name,
        "props": props_signature(description),
        "prop_attrs": prop_attrs(description),
        "prop_assignments": prop_assignments(description),
        "bem_block": bem_block,
        **shared,
    })
    erb = render_template(load_template(config, "view_component_erb"), {
        "bem_block": bem_block,
        "stimulus_controller": to_kebab_case(description.name),
        "html_structure": html_structure(description),
        **shared,
    })
    css = render_template(load_template(config, "view_component_css"), {
        "bem_block": bem_block,
        **shared,
    })

    component_dir = f"{config.components_output}/{snake}"
    return [
        GeneratedFile(
            path=f"{component_dir}/{snake}_component.rb",
            content=rb,
            reason=f"ViewComponent class for {name}",
            label="ViewComponent (Ruby)",
        ),
        GeneratedFile(
            path=f"{component_dir}/{snake}_component.html.erb",
            content=erb,
            reason=f"ERB template for {name}",
            label="ViewComponent (ERB Template)",
        ),
        GeneratedFile(
            path=f"{config.stylesheets_output}/components/_{to_kebab_case(name)}.css",
            content=css,
            reason=f"BEM stylesheet for {name}",
            label="BEM Styles (CSS)",
        ),
    ]
