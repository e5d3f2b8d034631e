"""Graph ports - Abstractions for the road network and routing.

These protocols define the contracts for graph operations: the store
that owns locations and roads, the loader that seeds it, and the
solver that computes lowest-cost routes over it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Optional, Protocol, Sequence, Tuple

if TYPE_CHECKING:
    from ..domain.models import Location, Road, RouteOutcome, TrafficStatus

# (other_endpoint, base_cost, status) as seen from one endpoint
Neighbor = Tuple[int, float, "TrafficStatus"]


class RoadNetworkPort(Protocol):
    """Port for the graph store.

    Implementation: adapters/graph/memory_store.py

    The store exclusively owns locations and roads. Every other
    component reads through it or mutates through its operations.
    """

    def add_location(self, location_id: int, label: str) -> Location:
        """Register a new location.

        Raises:
            DuplicateIdError: If the id is already registered.
            InvalidLabelError: If the label is empty.
        """
        ...

    def add_road(self, a: int, b: int, base_cost: float) -> Road:
        """Insert an undirected road with CLEAR status.

        Raises:
            UnknownLocationError: If either endpoint is unregistered.
            SelfLoopError: If both endpoints are the same.
            InvalidCostError: If base_cost is not strictly positive.
            DuplicateEdgeError: If a road already joins a and b.
        """
        ...

    def update_status(self, a: int, b: int, status: TrafficStatus) -> Road:
        """Set the traffic status of the road between a and b.

        Raises:
            UnknownEdgeError: If no road joins a and b.
        """
        ...

    def neighbors(self, location_id: int) -> List[Neighbor]:
        """Return the roads incident to a location, seen from it."""
        ...

    def enumerate_edges(self) -> List[Road]:
        """Return every road exactly once, endpoints ordered by id."""
        ...

    def get_location(self, location_id: int) -> Optional[Location]:
        ...

    def has_location(self, location_id: int) -> bool:
        ...

    def lookup_label(self, location_id: int) -> str:
        """Return the label of a location.

        Raises:
            UnknownLocationError: If the id is not registered.
        """
        ...

    def list_locations(self) -> Sequence[Location]:
        ...

    def snapshot(self) -> Dict[int, List[Neighbor]]:
        """Return a detached adjacency view of the whole network."""
        ...


class NetworkLoaderPort(Protocol):
    """Port for seeding a road network from persistent data.

    Implementation: adapters/graph/csv_repository.py
    """

    def load_into(self, network: RoadNetworkPort) -> RoadNetworkPort:
        """Register every stored location and road in ``network``.

        Returns:
            The same network, for chaining.
        """
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Wraps: graph/dijkstra.py

    The solver computes lowest-cost routes over the current traffic
    snapshot of the network.
    """

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
            RouteResult with path and cost, or NoPath when unreachable.
        """
        ...
