"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from skycast.config.schema import ForecastApiConfig

FIXTURE_DIR = Path(__file__).parent / "fixtures"

TEST_BASE_URL = "https://forecast.test/forecast"
TEST_API_KEY = "test-key"
TEST_GEO_URL = "https://geo.test/v1"


def load_fixture(name: str) -> dict:
    with open(FIXTURE_DIR / name) as f:
        return json.load(f)


@pytest.fixture(autouse=True)
def no_env_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's $SKYCAST_API_KEY out of the tests."""
    monkeypatch.delenv("SKYCAST_API_KEY", raising=False)


@pytest.fixture
def api_config() -> ForecastApiConfig:
    return ForecastApiConfig(base_url=TEST_BASE_URL, api_key=TEST_API_KEY)


@pytest.fixture
def berkeley_payload() -> dict:
    return load_fixture("darksky_forecast_berkeley.json")


@pytest.fixture
def clear_night_payload() -> dict:
    return load_fixture("darksky_forecast_clear_night.json")


@pytest.fixture
def geocoding_payload() -> dict:
    return load_fixture("geocoding_berkeley.json")


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "api": {"base_url": TEST_BASE_URL, "api_key": TEST_API_KEY},
        "geocoder": {"base_url": TEST_GEO_URL},
        "locations": [
            {"name": "Berkeley", "latitude": 37.8716, "longitude": -122.2727},
        ],
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR
