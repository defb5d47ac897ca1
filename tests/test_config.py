"""
Tests for configuration loading — railshadow.yml parsing and defaults.
"""

import textwrap
from pathlib import Path

import pytest
from pydantic import ValidationError

from railshadow.core.config.loader import ConfigError, find_config_file, load_config
from railshadow.core.context import get_config, set_config
from railshadow.core.models.config import GeneratorConfig


@pytest.fixture
def custom_config_yml(tmp_path: Path) -> Path:
    """A railshadow.yml that moves every input and output."""
    content = textwrap.dedent("""\
        paths:
          components: web/components
          types: web/types.ts
          output: shadow
          mapping_log: notes/mapping.md
        templates:
          model: record.rb.tpl
    """)
    path = tmp_path / "railshadow.yml"
    path.write_text(content)
    return path


class TestLoadConfig:
    def test_custom_paths(self, custom_config_yml: Path, tmp_path: Path):
        config = load_config(custom_config_yml)
        assert config.root == tmp_path.resolve()
        assert config.components_dir == tmp_path.resolve() / "web" / "components"
        assert config.types_file == tmp_path.resolve() / "web" / "types.ts"
        assert config.models_output == "shadow/app/models"
        assert config.mapping_log == tmp_path.resolve() / "notes" / "mapping.md"
        assert config.templates.model == "record.rb.tpl"
        # Untouched keys keep their defaults
        assert config.paths.templates == "scripts/templates"
        assert config.templates.stimulus == "stimulus_controller.js.template"

    def test_wrapped_format(self, tmp_path: Path):
        path = tmp_path / "railshadow.yml"
        path.write_text("railshadow:\n  paths:\n    output: out\n")
        assert load_config(path).paths.output == "out"

    def test_root_override(self, tmp_path: Path):
        (tmp_path / "app").mkdir()
        path = tmp_path / "railshadow.yml"
        path.write_text("root: app\n")
        assert load_config(path).root == (tmp_path / "app").resolve()

    def test_empty_file_gives_defaults(self, tmp_path: Path):
        path = tmp_path / "railshadow.yml"
        path.write_text("")
        config = load_config(path)
        assert config.paths.components == "src/components/app"
        assert config.root == tmp_path.resolve()

    def test_no_file_gives_defaults_at_cwd(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        config = load_config()
        assert config.root == tmp_path.resolve()
        assert config.types_file == tmp_path.resolve() / "src" / "types" / "index.ts"

    def test_explicit_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "nope.yml")

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "railshadow.yml"
        path.write_text("paths: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(path)

    def test_non_mapping(self, tmp_path: Path):
        path = tmp_path / "railshadow.yml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="Expected a YAML mapping"):
            load_config(path)

    def test_invalid_schema(self, tmp_path: Path):
        path = tmp_path / "railshadow.yml"
        path.write_text("paths:\n  output: [1, 2]\n")
        with pytest.raises(ConfigError, match="Invalid generator configuration"):
            load_config(path)


class TestFindConfigFile:
    def test_found_in_parent(self, custom_config_yml: Path, tmp_path: Path):
        nested = tmp_path / "src" / "components"
        nested.mkdir(parents=True)
        assert find_config_file(nested) == custom_config_yml.resolve()

    def test_auto_detect(self, custom_config_yml: Path, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert load_config().paths.output == "shadow"


class TestConfigIsReadOnly:
    def test_frozen(self, tmp_path: Path):
        config = GeneratorConfig(root=tmp_path)
        with pytest.raises(ValidationError):
            config.root = Path("/elsewhere")
        with pytest.raises(ValidationError):
            config.paths.output = "x"

    def test_context_registration(self, tmp_path: Path):
        config = GeneratorConfig(root=tmp_path)
        set_config(config)
        assert get_config() is config
