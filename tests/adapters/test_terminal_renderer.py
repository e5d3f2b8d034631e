"""Tests for the ANSI terminal renderer."""

import pytest

from citynav.adapters.rendering import TerminalNetworkRenderer
from citynav.adapters.rendering.terminal_renderer import CLEAR_SCREEN, Color
from citynav.config import DisplayConfig
from citynav.domain.models import NoPath, RouteResult, TrafficStatus


@pytest.fixture
def plain():
    return TerminalNetworkRenderer(DisplayConfig(color=False))


@pytest.fixture
def colored():
    return TerminalNetworkRenderer(DisplayConfig(color=True))


def test_status_table_lists_every_road(plain, seed_network):
    seed_network.update_status(2, 3, TrafficStatus.BLOCKED)

    text = plain.render_status(
        seed_network.list_locations(), seed_network.enumerate_edges()
    )
    rows = [line for line in text.splitlines() if "<->" in line]

    assert len(rows) == 6
    assert rows[0].startswith("Central_Hub")
    assert rows[0].endswith("CLEAR")
    assert any("West_End" in row and row.endswith("BLOCKED") for row in rows)
    assert "\033[" not in text


def test_status_colors(colored, seed_network):
    seed_network.update_status(0, 1, TrafficStatus.MODERATE)
    seed_network.update_status(0, 2, TrafficStatus.BLOCKED)

    text = colored.render_status(
        seed_network.list_locations(), seed_network.enumerate_edges()
    )

    assert f"{Color.YELLOW.value}MODERATE{Color.RESET.value}" in text
    assert f"{Color.BOLD.value}{Color.RED.value}BLOCKED" in text
    assert f"{Color.GREEN.value}CLEAR" in text


def test_map_lists_connections(plain, seed_network):
    text = plain.render_map(
        seed_network.list_locations(), seed_network.enumerate_edges()
    )

    assert "(0)Central_Hub -- (1)Airport, (2)West_End, (3)East_Gate" in text
    assert "* IDs: 0:Central_Hub, 1:Airport" in text


def test_map_marks_isolated_locations(plain, seed_network):
    seed_network.add_location(9, "Lighthouse")

    text = plain.render_map(
        seed_network.list_locations(), seed_network.enumerate_edges()
    )

    assert "(9)Lighthouse -- isolated" in text


def test_route_rendering(plain):
    route = RouteResult(
        path=(0, 2, 3),
        total_cost=15.0,
        labels=("Central_Hub", "West_End", "East_Gate"),
    )

    text = plain.render_route(route)

    assert "SUCCESS: Route Found." in text
    assert "OPTIMIZED PATH: Central_Hub >> West_End >> East_Gate" in text
    assert "ESTIMATED TRAVEL TIME: 15 mins" in text


def test_route_rendering_uses_time_unit():
    renderer = TerminalNetworkRenderer(DisplayConfig(color=False, time_unit="km"))
    route = RouteResult(path=(0, 1), total_cost=27.0, labels=("A", "B"))

    assert "27 km" in renderer.render_route(route)


def test_no_path_alert(plain):
    assert "NO PATH AVAILABLE" in plain.render_route(NoPath(0, 4))


def test_messages(plain, colored):
    assert plain.render_error("boom") == "[ERROR] boom"
    assert plain.render_success("ok") == "[SYSTEM] ok"
    assert plain.render_progress("wait") == ">>> wait"
    assert colored.render_error("boom").startswith(Color.RED.value)
    assert "CITY TRAFFIC NAVIGATION" in plain.render_header()


def test_clear_screen_only_with_color(plain, colored):
    assert plain.clear_screen() == ""
    assert colored.clear_screen() == CLEAR_SCREEN
