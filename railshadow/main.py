"""
railshadow — CLI entrypoint.

Usage:
    python -m railshadow.main --help
    python -m railshadow.main --all
    python -m railshadow.main --component=FilterChip
    python -m railshadow.main --models-only
    python -m railshadow.main --dry-run --component=FilterChip
    python -m railshadow.main --update-docs --component=FilterChip
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime, timezone
from pathlib import Path

import click

from railshadow import __version__
from railshadow.core.models.config import GeneratorConfig
from railshadow.core.models.template import GeneratedFile
from railshadow.core.observability.logging_config import (
    LOG_FILE_ENV,
    LOG_FILE_LEVEL_ENV,
    resolve_level,
    setup_logging,
)

logger = logging.getLogger(__name__)

_EPILOG = """\
\b
Output structure:
  rails_generated/
    app/
      components/<name>/<name>_component.rb     ViewComponent (sidecar)
      components/<name>/<name>_component.html.erb
      assets/stylesheets/components/_<name>.css ITCSS components layer (BEM)
      javascript/controllers/<name>_controller.js
      models/<name>.rb                          ActiveRecord models
"""


@click.command(
    epilog=_EPILOG,
    context_settings={
        "help_option_names": ["-h", "--help"],
        "ignore_unknown_options": True,
        "allow_extra_args": True,
    },
)
@click.version_option(version=__version__, prog_name="railshadow")
@click.option("--all", "all_components", is_flag=True, help="Generate all components.")
@click.option(
    "--component",
    metavar="NAME",
    default=None,
    is_flag=False,
    flag_value="",
    help="Generate a specific component.",
)
@click.option("--models-only", is_flag=True, help="Generate only models from TypeScript interfaces.")
@click.option("--dry-run", is_flag=True, help="Preview output without writing files.")
@click.option("--update-docs", is_flag=True, help="Append mapping info to the mapping log.")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to railshadow.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    all_components: bool,
    component: str | None,
    models_only: bool,
    dry_run: bool,
    update_docs: bool,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """Rails Component Generator (ViewComponent + ITCSS/BEM).

    Generates Rails shadow artifacts from React/TypeScript components:
    ViewComponent classes with ERB templates, BEM-structured CSS files,
    Stimulus controllers, and ActiveRecord models from TypeScript
    interfaces.
    """
    # ── Logging setup (once, at process start) ──────────────────
    setup_logging(
        level=resolve_level(debug=debug, verbose=verbose, quiet=quiet),
        log_file=os.environ.get(LOG_FILE_ENV),
        log_file_level=os.environ.get(LOG_FILE_LEVEL_ENV),
    )

    if ctx.args:
        logger.debug("Ignoring unknown arguments: %s", " ".join(ctx.args))

    # One primary action per run: models-only > component > all
    if not (models_only or component or all_components):
        raise click.UsageError("Please specify --all, --component=Name, or --models-only", ctx)

    from railshadow.core.config.loader import ConfigError, load_config
    from railshadow.core.context import set_config
    from railshadow.core.services.rails_generate import GenerationError, check_prerequisites

    try:
        set_config(load_config(Path(config_path) if config_path else None))
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    click.secho("🚀 Rails Component Generator\n", fg="cyan", bold=True)

    # Captured once so every artifact of this run shares it
    timestamp = datetime.now(timezone.utc).isoformat()

    try:
        check_prerequisites(_current_config(), create_docs=not dry_run)
        if models_only:
            _generate_models(dry_run=dry_run, timestamp=timestamp)
        elif component:
            _generate_component(
                component, dry_run=dry_run, update_docs=update_docs, timestamp=timestamp,
            )
        else:
            _generate_all(dry_run=dry_run, update_docs=update_docs, timestamp=timestamp)
    except GenerationError as e:
        click.secho(f"❌ Error: {e}", fg="red")
        sys.exit(1)


# ── Actions ─────────────────────────────────────────────────────


def _current_config() -> GeneratorConfig:
    from railshadow.core.context import get_config
    from railshadow.core.services.rails_generate import GenerationError

    config = get_config()
    if config is None:
        raise GenerationError("Generator configuration has not been loaded")
    return config


def _generate_component(
    component_name: str,
    *,
    dry_run: bool,
    update_docs: bool,
    timestamp: str,
) -> None:
    from railshadow.core.services.mapping_log import append_mapping_entry
    from railshadow.core.services.rails_generate import analyze_component_file, render_component

    config = _current_config()
    click.echo(f"📦 Generating Rails equivalent for {component_name}...\n")

    description = analyze_component_file(config, component_name)

    click.secho(f"✓ Analyzed {component_name}", fg="green")
    click.echo(f"  - Props: {len(description.props)}")
    click.echo(f"  - State: {len(description.state)}")
    click.echo(f"  - Handlers: {len(description.handlers)}")
    click.echo(f"  - Custom hooks: {len(description.hooks)}\n")

    files = render_component(
        config, description, component_name=component_name, timestamp=timestamp,
    )

    if dry_run:
        _print_files(files)
    else:
        _write_files(config.root, files)
        if update_docs:
            log_path = append_mapping_entry(config, description)
            click.secho(f"✓ Updated mapping log: {log_path}", fg="green")

    click.secho("\n✅ Generation complete!", fg="green", bold=True)


def _generate_models(*, dry_run: bool, timestamp: str) -> None:
    from railshadow.core.services.rails_generate import load_models, render_models

    config = _current_config()

    click.echo("📦 Generating models from TypeScript interfaces...\n")

    models = load_models(config)
    click.secho(f"✓ Found {len(models)} models\n", fg="green")

    files = render_models(config, models, timestamp=timestamp)
    if dry_run:
        _print_files(files)
    else:
        _write_files(config.root, files)

    click.secho("\n✅ Model generation complete!", fg="green", bold=True)


def _generate_all(
    *,
    dry_run: bool,
    update_docs: bool,
    timestamp: str,
) -> None:
    from railshadow.core.services.rails_generate import list_component_names

    click.echo("📦 Generating all components...\n")

    names = list_component_names(_current_config())
    click.echo(f"Found {len(names)} components\n")

    for name in names:
        _generate_component(
            name, dry_run=dry_run, update_docs=update_docs, timestamp=timestamp,
        )
        click.echo("---\n")

    click.secho("✅ All components generated!", fg="green", bold=True)


# ── Output ──────────────────────────────────────────────────────


def _print_files(files: list[GeneratedFile]) -> None:
    """Dry-run sink: rendered text goes to stdout, nothing is written."""
    for file in files:
        click.secho(f"=== {file.label} ===", fg="cyan")
        click.echo(file.content)


def _write_files(project_root: Path, files: list[GeneratedFile]) -> None:
    from railshadow.core.services.rails_generate import write_generated_file

    for file in files:
        written = write_generated_file(project_root, file)
        if written is not None:
            click.secho(f"✓ Saved {file.label}: {written}", fg="green")
        else:
            click.secho(f"⊘ Skipped {file.label}: {file.path} exists", fg="yellow")


if __name__ == "__main__":
    cli()
