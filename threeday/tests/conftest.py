"""Shared test fixtures."""

import json
from datetime import datetime
from pathlib import Path

import pytest
import yaml

from threeday.config.schema import AppConfig, ServiceConfig
from threeday.tests.factories import KST, TEST_BASE_URL


@pytest.fixture
def test_config() -> AppConfig:
    """Config pointed at the mocked service URL."""
    return AppConfig(
        service=ServiceConfig(base_url=TEST_BASE_URL, service_key="test-key")
    )


@pytest.fixture
def morning_kst() -> datetime:
    """2024-01-01 06:30 KST, inside the 0500 slot."""
    return datetime(2024, 1, 1, 6, 30, tzinfo=KST)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "service": {"service_key": "yaml-key"},
        "grid": {"name": "Busan", "nx": 98, "ny": 76},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def vilage_fcst(fixtures_dir: Path) -> dict:
    with open(fixtures_dir / "vilage_fcst_20240101.json") as f:
        return json.load(f)
