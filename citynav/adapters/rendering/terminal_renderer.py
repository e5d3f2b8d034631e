"""Terminal network renderer adapter.

Produces the operator-facing text views of the navigator: the network
map, the live status table and route outcomes. Colors are ANSI escape
codes and can be turned off through DisplayConfig.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Sequence

from ...config import DisplayConfig, get_config
from ...domain.models import Location, NoPath, Road, RouteOutcome, TrafficStatus


class Color(Enum):
    """ANSI color codes for terminal output."""

    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    CYAN = "\033[36m"

    # Formatting
    BOLD = "\033[1m"
    RESET = "\033[0m"


CLEAR_SCREEN = "\033[2J\033[1;1H"

_STATUS_COLORS = {
    TrafficStatus.CLEAR: Color.GREEN,
    TrafficStatus.MODERATE: Color.YELLOW,
    TrafficStatus.HEAVY: Color.RED,
    TrafficStatus.BLOCKED: Color.RED,
}

RULE = "-" * 58


@dataclass
class TerminalNetworkRenderer:
    """ANSI text renderer for the interactive front-end.

    This adapter implements NetworkRendererPort. Every method returns a
    string; printing is left to the caller.

    Attributes:
        config: Display configuration (color, time unit)
    """

    config: DisplayConfig = field(default_factory=lambda: get_config().display)

    def colored(self, text: str, color: Color, bold: bool = False) -> str:
        """Wrap text in ANSI color codes if colors are enabled."""
        if not self.config.color:
            return text

        prefix = color.value
        if bold:
            prefix = Color.BOLD.value + prefix

        return f"{prefix}{text}{Color.RESET.value}"

    def bold(self, text: str) -> str:
        if not self.config.color:
            return text
        return f"{Color.BOLD.value}{text}{Color.RESET.value}"

    def clear_screen(self) -> str:
        return CLEAR_SCREEN if self.config.color else ""

    def render_header(self) -> str:
        line = "=" * 58
        lines = [
            line,
            "       CITY TRAFFIC NAVIGATION & CONTROL SYSTEM",
            "            (Dijkstra's Algorithm Engine)",
            line,
        ]
        return self.colored("\n".join(lines), Color.CYAN)

    def render_map(
        self,
        locations: Sequence[Location],
        roads: Sequence[Road],
    ) -> str:
        """Render each location with the locations it connects to."""
        labels = {location.id: location.label for location in locations}
        links: Dict[int, List[int]] = {location.id: [] for location in locations}
        for road in roads:
            links.setdefault(road.a, []).append(road.b)
            links.setdefault(road.b, []).append(road.a)

        lines = [self.bold("[ CITY NETWORK VIEW ]")]
        for location in locations:
            connected = ", ".join(
                f"({other}){labels.get(other, '?')}"
                for other in sorted(links[location.id])
            )
            lines.append(
                f"    ({location.id}){location.label} -- {connected or 'isolated'}"
            )

        ids = ", ".join(f"{location.id}:{location.label}" for location in locations)
        lines.append(f"\n* IDs: {ids}")
        return "\n".join(lines)

    def render_status(
        self,
        locations: Sequence[Location],
        roads: Sequence[Road],
    ) -> str:
        """Render every road with its colored traffic status."""
        labels = {location.id: location.label for location in locations}
        lines = [
            self.bold("[ LIVE NETWORK MONITOR ]"),
            f"{'From':<15}{'':<5}{'To':<15}Status",
            RULE,
        ]
        for road in roads:
            status = self.colored(
                road.status.name,
                _STATUS_COLORS[road.status],
                bold=road.status.is_blocked,
            )
            lines.append(
                f"{labels.get(road.a, str(road.a)):<15} <-> "
                f"{labels.get(road.b, str(road.b)):<15}{status}"
            )
        return "\n".join(lines)

    def render_route(self, outcome: RouteOutcome) -> str:
        """Render a route query outcome."""
        if isinstance(outcome, NoPath):
            return self.colored(
                "!! ALERT: NO PATH AVAILABLE !! Road closures detected.", Color.RED
            )

        stops = " >> ".join(
            self.colored(label, Color.CYAN, bold=True) for label in outcome.labels
        )
        cost = f"{outcome.total_cost:g} {self.config.time_unit}"
        return "\n".join(
            [
                self.colored("SUCCESS: Route Found.", Color.GREEN),
                f"{self.bold('OPTIMIZED PATH:')} {stops}",
                f"ESTIMATED TRAVEL TIME: {self.bold(cost)}",
            ]
        )

    def render_error(self, message: str) -> str:
        return self.colored(f"[ERROR] {message}", Color.RED)

    def render_success(self, message: str) -> str:
        return self.colored(f"[SYSTEM] {message}", Color.GREEN)

    def render_progress(self, message: str) -> str:
        return self.colored(f">>> {message}", Color.BLUE)
