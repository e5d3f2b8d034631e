"""Dijkstra Route Solver adapter.

This adapter wraps the pure Dijkstra implementation and adds:
- Endpoint validation against the store
- A per-call snapshot of the network
- Domain model output (RouteResult / NoPath)
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ...domain.errors import UnknownLocationError
from ...domain.models import NoPath, RouteOutcome, RouteResult
from ...graph.dijkstra import dijkstra
from ...ports.graph import RoadNetworkPort


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    This adapter implements RouteSolverPort. It keeps no state between
    calls.

    Attributes:
        max_expansions: Optional cap on settled locations per search
    """

    max_expansions: Optional[int] = None
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(
        self,
        network: RoadNetworkPort,
        source: int,
        target: int,
    ) -> RouteOutcome:
        """Find the lowest-cost route between two locations.

        Args:
            network: The road network to search.
            source: Departure location id.
            target: Arrival location id.

        Returns:
            RouteResult with path, cost and labels, or NoPath when
            every route to the target is blocked.

        Raises:
            UnknownLocationError: If source or target is not registered.
            SearchLimitExceededError: If the expansion cap is reached.
        """
        self._logger.debug(
            "Solving route",
            extra={"source": source, "target": target},
        )

        # Validate inputs
        for endpoint in (source, target):
            if not network.has_location(endpoint):
                raise UnknownLocationError(
                    f"Unknown location: {endpoint}",
                    location_id=endpoint,
                )

        if source == target:
            return self._build_result(network, [source], 0.0)

        graph = network.snapshot()
        path, cost = dijkstra(graph, source, target, self.max_expansions)

        if not path:
            self._logger.debug(
                "No route found",
                extra={"source": source, "target": target},
            )
            return NoPath(source=source, target=target)

        self._logger.debug(
            "Route found",
            extra={
                "source": source,
                "target": target,
                "stops": len(path),
                "cost": cost,
            },
        )
        return self._build_result(network, path, cost)

    def _build_result(
        self, network: RoadNetworkPort, path: List[int], cost: float
    ) -> RouteResult:
        return RouteResult(
            path=tuple(path),
            total_cost=cost,
            labels=tuple(network.lookup_label(location_id) for location_id in path),
        )
