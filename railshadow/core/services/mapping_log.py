"""
Mapping log — keep docs/react_to_rails.md in step with generated output.

Each generated component appends one markdown section recording the
React source shape and the Rails artifacts produced for it.
"""

from __future__ import annotations

import logging
from pathlib import Path

from railshadow.core.models.config import GeneratorConfig
from railshadow.core.models.description import ComponentDescription
from railshadow.core.services.naming import to_kebab_case, to_snake_case

logger = logging.getLogger(__name__)


def _listing(items: list[str]) -> str:
    return ", ".join(items) or "n/a"


def build_mapping_entry(description: ComponentDescription) -> str:
    """Markdown section for one component (ends with a blank line)."""
    snake = to_snake_case(description.name)
    kebab = to_kebab_case(description.name)
    lines = [
        f"## {description.name}",
        f"- **React component:** `{description.name}`",
        f"  - Props: {_listing([p.name for p in description.props])}",
        f"  - State: {_listing([s.name for s in description.state])}",
        f"  - Hooks: {_listing(description.hooks)}",
        f"  - Icons: {_listing(description.icons)}",
        f"- **ViewComponent:** `app/components/{snake}/{snake}_component.rb`",
        f"- **ERB Template:** `app/components/{snake}/{snake}_component.html.erb`",
        f"- **BEM Styles:** `app/assets/stylesheets/components/_{kebab}.css`",
        f"- **Stimulus:** `app/javascript/controllers/{kebab}_controller.js`",
        "- **RubyUI usage:** [Document which RubyUI components to use]",
        "",
    ]
    return "\n".join(lines)


def append_mapping_entry(config: GeneratorConfig, description: ComponentDescription) -> Path:
    """Append the component's entry to the mapping log, creating it if needed."""
    log_path = config.mapping_log
    log_path.parent.mkdir(parents=True, exist_ok=True)
    with log_path.open("a", encoding="utf-8") as fh:
        fh.write(build_mapping_entry(description) + "\n")
    logger.info("Appended %s to %s", description.name, log_path)
    return log_path
