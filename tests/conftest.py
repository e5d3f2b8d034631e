"""Shared fixtures: the five-location seed network and services over it."""

from __future__ import annotations

import os

import pytest

from citynav.adapters.graph import DijkstraRouteSolver, InMemoryRoadNetwork
from citynav.config import reset_config
from citynav.services import NavigationService

SEED_LOCATIONS = [
    (0, "Central_Hub"),
    (1, "Airport"),
    (2, "West_End"),
    (3, "East_Gate"),
    (4, "South_Station"),
]

SEED_ROADS = [
    (0, 1, 15.0),
    (0, 2, 10.0),
    (1, 4, 25.0),
    (2, 3, 5.0),
    (3, 4, 10.0),
    (0, 3, 20.0),
]


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Isolate tests from CITYNAV_* variables and the cached config."""
    for name in list(os.environ):
        if name.startswith("CITYNAV_"):
            monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def network() -> InMemoryRoadNetwork:
    return InMemoryRoadNetwork()


@pytest.fixture
def seed_network() -> InMemoryRoadNetwork:
    network = InMemoryRoadNetwork()
    for location_id, label in SEED_LOCATIONS:
        network.add_location(location_id, label)
    for a, b, base_cost in SEED_ROADS:
        network.add_road(a, b, base_cost)
    return network


@pytest.fixture
def service(seed_network) -> NavigationService:
    return NavigationService(network=seed_network, route_solver=DijkstraRouteSolver())
