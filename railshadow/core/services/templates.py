"""
Templates — built-in defaults, file overrides, and placeholder rendering.

A template is plain text with ``{{name}}`` placeholders. Rendering is
literal substitution: every occurrence of a supplied placeholder is
replaced, and placeholders without a value are left in the output as-is
(user templates may be partial).

Lookup is override-then-default: ``<templates dir>/<file name>`` when
it exists, otherwise the embedded template below.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from railshadow.core.models.config import GeneratorConfig

logger = logging.getLogger(__name__)


# ── Built-in templates ──────────────────────────────────────────


_VIEW_COMPONENT_RB = """\
# frozen_string_literal: true
# Source: {{react_file_path}}

class {{component_name}}Component < ApplicationComponent
  {{prop_attrs}}

  def initialize({{props}})
    {{prop_assignments}}
  end

  # BEM helper for this component
  def block_class
    "{{bem_block}}"
  end

  # Suggested RubyUI components to consider:
  # - RubyUI::Button for actions
  # - RubyUI::Card for containers
  # - RubyUI::Badge for tags/status
  # - RubyUI::Avatar for user images
  # - RubyUI::Input, RubyUI::Select for form controls
  #
  # Example usage in ERB template:
  # <%= render RubyUI::Button.new(variant: :primary) { "Click me" } %>
end
"""

_VIEW_COMPONENT_ERB = """\
<%# Source: {{react_file_path}} %>
<%# BEM Block: {{bem_block}} %>

<div class="{{bem_block}}" data-controller="{{stimulus_controller}}">
  <%#
    TODO: Convert React JSX to ERB

    RubyUI components available:
    - <%= render RubyUI::Button.new(variant: :primary) { "Action" } %>
    - <%= render RubyUI::Card.new { ... } %>
    - <%= render RubyUI::Badge.new { "Status" } %>
    - <%= render RubyUI::Avatar.new(src: url, alt: name) %>

    Use BEM naming for custom elements:
    - {{bem_block}}__header
    - {{bem_block}}__content
    - {{bem_block}}__footer
    - {{bem_block}}--modifier
  %>

  {{html_structure}}
</div>
"""

_VIEW_COMPONENT_CSS = """\
/* Source: {{react_file_path}} */
/* ITCSS Layer: components */
/* BEM Block: {{bem_block}} */

.{{bem_block}} {
  /* Block base styles */
  /* Use Tailwind for spacing/colors, BEM for structure */
}

/* Elements */
.{{bem_block}}__header {
}

.{{bem_block}}__content {
}

.{{bem_block}}__footer {
}

/* Modifiers */
.{{bem_block}}--active {
}

.{{bem_block}}--disabled {
}
"""

_STIMULUS_CONTROLLER = """\
// {{react_file_path}}
import { Controller } from "@hotwired/stimulus"

export default class extends Controller {
  static values = { {{stimulus_values}} }
  static targets = [{{stimulus_targets}}]

  connect() {
    {{initialization_code}}
  }

  {{action_methods}}

  disconnect() {
    {{cleanup_code}}
  }
}
"""

_MODEL_RB = """\
# {{interface_path}}
class {{model_name}} < ApplicationRecord
  {{associations}}

  {{validations}}

  {{scopes}}

  {{instance_methods}}
end
"""

# Template key → built-in text. Keys match ``TemplateNames`` fields.
FALLBACK_TEMPLATES: dict[str, str] = {
    "view_component": _VIEW_COMPONENT_RB,
    "view_component_erb": _VIEW_COMPONENT_ERB,
    "view_component_css": _VIEW_COMPONENT_CSS,
    "stimulus": _STIMULUS_CONTROLLER,
    "model": _MODEL_RB,
}


# ── Public API ──────────────────────────────────────────────────


def load_template(config: GeneratorConfig, key: str) -> str:
    """Return the override file for ``key`` if present, else the built-in.

    Raises:
        KeyError: ``key`` is not a known template key.
    """
    fallback = FALLBACK_TEMPLATES[key]
    override = config.templates_dir / config.templates.file_for(key)
    if override.is_file():
        logger.info("Using template override %s", override)
        return override.read_text(encoding="utf-8")
    return fallback


def render_template(template: str, values: Mapping[str, str]) -> str:
    """Substitute ``{{name}}`` placeholders, in ``values`` order.

    Unknown placeholders are left untouched.
    """
    rendered = template
    for name, value in values.items():
        rendered = rendered.replace("{{" + name + "}}", value)
    leftover = placeholders(rendered)
    if leftover:
        logger.debug("Unresolved placeholders left in output: %s", ", ".join(leftover))
    return rendered


def placeholders(template: str) -> list[str]:
    """Names of the placeholders a template uses, in first-seen order."""
    seen: dict[str, None] = {}
    start = template.find("{{")
    while start != -1:
        end = template.find("}}", start + 2)
        if end == -1:
            break
        name = template[start + 2:end]
        if name.isidentifier():
            seen.setdefault(name, None)
        start = template.find("{{", end + 2)
    return list(seen)
