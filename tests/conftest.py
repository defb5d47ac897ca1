"""
Shared test fixtures and configuration.
"""

import shutil
from pathlib import Path

import pytest

from railshadow.core.models.config import GeneratorConfig


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def filter_chip_source(fixtures_dir: Path) -> str:
    """A representative React component."""
    return (fixtures_dir / "FilterChip.tsx").read_text(encoding="utf-8")


@pytest.fixture
def types_source(fixtures_dir: Path) -> str:
    """A type-declarations file with two related interfaces."""
    return (fixtures_dir / "index.ts").read_text(encoding="utf-8")


@pytest.fixture
def prototype_root(tmp_path: Path, fixtures_dir: Path) -> Path:
    """A React prototype laid out the way the generator expects."""
    components = tmp_path / "src" / "components" / "app"
    components.mkdir(parents=True)
    shutil.copy(fixtures_dir / "FilterChip.tsx", components / "FilterChip.tsx")
    (components / "EmptyCard.tsx").write_text("export const EmptyCard = () => null;\n")
    (components / "README.md").write_text("not a component\n")

    types_dir = tmp_path / "src" / "types"
    types_dir.mkdir(parents=True)
    shutil.copy(fixtures_dir / "index.ts", types_dir / "index.ts")
    return tmp_path


@pytest.fixture
def config(prototype_root: Path) -> GeneratorConfig:
    """Default-layout config rooted at the sample prototype."""
    return GeneratorConfig(root=prototype_root)
