"""Tests for configuration loading and environment overrides."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from flightnet.config import (
    PROJECT_ROOT,
    AppConfig,
    NetworkConfig,
    SearchConfig,
    get_config,
    reset_config,
)


def test_defaults():
    config = AppConfig()

    assert config.network.flights_file == "flights.csv"
    assert config.network.default_country == "USA"
    assert config.search.default_max_stops == 3
    assert config.search.default_max_cost == Decimal("1000")
    assert config.observability.level == "INFO"


def test_paths_are_joined_to_data_dir(tmp_path):
    config = NetworkConfig(data_dir=tmp_path, flights_file="routes.csv")

    assert config.flights_path == tmp_path / "routes.csv"
    assert config.airports_path == tmp_path / "airports.csv"


def test_default_data_dir_is_project_data():
    assert NetworkConfig().data_dir == PROJECT_ROOT / "data"
    assert (PROJECT_ROOT / "flightnet" / "config.py").is_file()


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("FLIGHTNET_NETWORK_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("FLIGHTNET_SEARCH_DEFAULT_MAX_STOPS", "5")
    monkeypatch.setenv("FLIGHTNET_LOG_LEVEL", "DEBUG")

    config = AppConfig()

    assert config.network.data_dir == tmp_path
    assert config.search.default_max_stops == 5
    assert config.observability.level == "DEBUG"


def test_negative_limits_rejected():
    with pytest.raises(ValidationError):
        SearchConfig(default_max_stops=-1)


def test_get_config_is_cached_until_reset(monkeypatch):
    first = get_config()
    assert get_config() is first

    monkeypatch.setenv("FLIGHTNET_SEARCH_HUB_COUNT", "9")
    reset_config()

    assert get_config() is not first
    assert get_config().search.hub_count == 9
