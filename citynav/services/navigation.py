"""Navigation service - the operations exposed to front-ends.

Front-ends (the terminal menu, tests, any other embedding) compose
these operations; the service itself performs no terminal I/O.

The service provides no internal locking. Embeddings that use threads
must not let a mutation overlap a route query.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Sequence

from ..domain.errors import NoRouteFoundError
from ..domain.models import (
    Location,
    NoPath,
    Road,
    RouteOutcome,
    RouteResult,
    TrafficStatus,
)
from ..ports.graph import Neighbor, RoadNetworkPort, RouteSolverPort


@dataclass
class NavigationService:
    """Main service for inspecting and routing over the road network.

    Attributes:
        network: Graph store owning locations and roads
        route_solver: Computes lowest-cost routes
    """

    network: RoadNetworkPort
    route_solver: RouteSolverPort

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def add_location(self, location_id: int, label: str) -> Location:
        location = self.network.add_location(location_id, label)
        self._logger.info(
            "Location registered",
            extra={"location_id": location.id, "label": location.label},
        )
        return location

    def add_road(self, a: int, b: int, base_cost: float) -> Road:
        road = self.network.add_road(a, b, base_cost)
        self._logger.info(
            "Road registered",
            extra={"a": road.a, "b": road.b, "base_cost": road.base_cost},
        )
        return road

    def update_status(self, a: int, b: int, status: TrafficStatus) -> Road:
        """Set the traffic status of a road.

        The change is visible to the very next route query.

        Args:
            a: First endpoint id.
            b: Second endpoint id.
            status: New status, or its integer code (0-3).

        Returns:
            The updated road.

        Raises:
            InvalidStatusError: If an integer code is outside 0..3.
            UnknownEdgeError: If no road joins a and b.
        """
        road = self.network.update_status(a, b, status)
        self._logger.info(
            "Traffic status updated",
            extra={"a": road.a, "b": road.b, "status": road.status.name},
        )
        return road

    def find_route(self, source: int, target: int) -> RouteOutcome:
        """Find the lowest-cost route under current traffic.

        Args:
            source: Departure location id.
            target: Arrival location id.

        Returns:
            RouteResult, or NoPath when the target is unreachable.

        Raises:
            UnknownLocationError: If source or target is not registered.
        """
        outcome = self.route_solver.solve(self.network, source, target)
        if isinstance(outcome, NoPath):
            self._logger.info(
                "Route unavailable",
                extra={"source": source, "target": target},
            )
        else:
            self._logger.info(
                "Route computed",
                extra={"stops": outcome.num_stops, "cost": outcome.total_cost},
            )
        return outcome

    def find_route_or_raise(self, source: int, target: int) -> RouteResult:
        """Like find_route(), but raises instead of returning NoPath.

        Raises:
            UnknownLocationError: If source or target is not registered.
            NoRouteFoundError: If no usable path exists.
        """
        outcome = self.find_route(source, target)
        if isinstance(outcome, NoPath):
            raise NoRouteFoundError(
                f"No path from {source} to {target}",
                source=source,
                target=target,
            )
        return outcome

    def enumerate_edges(self) -> List[Road]:
        return self.network.enumerate_edges()

    def lookup_label(self, location_id: int) -> str:
        return self.network.lookup_label(location_id)

    def list_locations(self) -> Sequence[Location]:
        return self.network.list_locations()

    def neighbors(self, location_id: int) -> List[Neighbor]:
        return self.network.neighbors(location_id)
