"""Shared test fixtures."""

from datetime import date
from pathlib import Path

import pytest
import yaml

from bulletin.config.schema import BulletinConfig, OutputConfig

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def report_date() -> date:
    """A Friday, for deterministic weekday names."""
    return date(2024, 3, 1)


@pytest.fixture
def raw_full() -> str:
    return (FIXTURE_DIR / "raw_response_full.txt").read_text()


@pytest.fixture
def raw_no_threats() -> str:
    return (FIXTURE_DIR / "raw_response_no_threats.txt").read_text()


@pytest.fixture
def tmp_config(tmp_path: Path) -> BulletinConfig:
    """Default config writing into a temporary output directory."""
    return BulletinConfig(output=OutputConfig(directory=str(tmp_path / "out")))


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "provider": {"model": "gpt-4o-mini", "temperature": 0.1},
        "render": {"viewport_width": 1024},
        "output": {"directory": str(tmp_path / "site")},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
