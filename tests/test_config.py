"""Tests for the pydantic-settings configuration."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from citynav.config import (
    AppConfig,
    DisplayConfig,
    GraphConfig,
    RoutingConfig,
    get_config,
    reset_config,
)


def test_defaults():
    config = AppConfig()

    assert config.graph.load_seed is True
    assert config.graph.locations_path.name == "locations.csv"
    assert config.graph.roads_path.parent == config.graph.data_dir
    assert config.routing.max_expansions is None
    assert config.display.color is True
    assert config.display.time_unit == "mins"
    assert config.display.pause_seconds == 0.0
    assert config.observability.level == "WARNING"


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("CITYNAV_GRAPH_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("CITYNAV_GRAPH_LOAD_SEED", "false")
    monkeypatch.setenv("CITYNAV_ROUTING_MAX_EXPANSIONS", "50")
    monkeypatch.setenv("CITYNAV_DISPLAY_COLOR", "0")
    monkeypatch.setenv("CITYNAV_LOG_LEVEL", "DEBUG")

    config = AppConfig()

    assert config.graph.data_dir == Path(tmp_path)
    assert config.graph.load_seed is False
    assert config.routing.max_expansions == 50
    assert config.display.color is False
    assert config.observability.level == "DEBUG"


def test_invalid_values_rejected():
    with pytest.raises(ValidationError):
        RoutingConfig(max_expansions=0)
    with pytest.raises(ValidationError):
        DisplayConfig(pause_seconds=-1)


def test_get_config_is_cached_until_reset(monkeypatch):
    first = get_config()
    assert get_config() is first

    monkeypatch.setenv("CITYNAV_DISPLAY_TIME_UNIT", "hours")
    assert get_config().display.time_unit == "mins"

    reset_config()
    assert get_config().display.time_unit == "hours"


def test_custom_file_names(tmp_path):
    config = GraphConfig(data_dir=tmp_path, roads_file="links.csv")

    assert config.roads_path == tmp_path / "links.csv"
