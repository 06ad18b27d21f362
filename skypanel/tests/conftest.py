"""Shared test fixtures."""

from pathlib import Path

import pytest
import yaml

from skypanel.config.schema import AppConfig
from skypanel.storage.snapshot_cache import SnapshotCache

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def wttr_raw() -> str:
    """Raw j1 body for a three-day forecast (2026-10-19 .. 2026-10-21)."""
    return (FIXTURE_DIR / "wttr_forecast_70737.json").read_text(encoding="utf-8")


@pytest.fixture
def snapshot_cache(tmp_path: Path) -> SnapshotCache:
    return SnapshotCache(tmp_path / "data" / "last_weather.json")


@pytest.fixture
def default_config(tmp_path: Path) -> AppConfig:
    """Default config pointed at a test provider and a temp cache slot."""
    return AppConfig(
        settings={"location": "70737", "unit": "F", "hour_12": True},
        provider={"base_url": "https://test-wttr.example.com", "timeout_seconds": 1.0},
        paths={"cache_file": str(tmp_path / "last_weather.json"), "icon_dir": "svg"},
    )


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "settings": {"location": "70737", "unit": "c", "12_hour": False},
        "provider": {"base_url": "https://test-wttr.example.com"},
    }
    path = tmp_path / "settings.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
