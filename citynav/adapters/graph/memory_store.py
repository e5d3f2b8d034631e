"""In-memory road network store.

Each undirected road is held once, under its canonical ``(low, high)``
key, and indexed from both endpoints. A status update swaps that single
record, so the two directional views can never disagree.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional, Sequence, Tuple

from ...domain.errors import (
    DuplicateEdgeError,
    DuplicateIdError,
    InvalidCostError,
    InvalidIdError,
    InvalidLabelError,
    SelfLoopError,
    UnknownEdgeError,
    UnknownLocationError,
)
from ...domain.models import Location, Road, TrafficStatus
from ...graph.weights import HEAVIEST_MULTIPLIER
from ...ports.graph import Neighbor


def _canonical(a: int, b: int) -> Tuple[int, int]:
    return (a, b) if a < b else (b, a)


@dataclass
class InMemoryRoadNetwork:
    """Graph store keeping locations and roads in dictionaries.

    This adapter implements RoadNetworkPort. Mutations validate all of
    their inputs before touching any state.
    """

    _locations: Dict[int, Location] = field(default_factory=dict, repr=False)
    _roads: Dict[Tuple[int, int], Road] = field(default_factory=dict, repr=False)
    # location id -> neighbor ids, in insertion order
    _adjacency: Dict[int, List[int]] = field(default_factory=dict, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def add_location(self, location_id: int, label: str) -> Location:
        """Register a new location.

        Args:
            location_id: Unique integer id.
            label: Human-readable name, must not be blank.

        Returns:
            The registered Location.

        Raises:
            InvalidIdError: If the id is not an integer.
            DuplicateIdError: If the id is already registered.
            InvalidLabelError: If the label is not a non-empty string.
        """
        if isinstance(location_id, bool) or not isinstance(location_id, int):
            raise InvalidIdError(
                f"Location id must be an integer, got {location_id!r}",
                location_id=location_id,
            )
        if location_id in self._locations:
            raise DuplicateIdError(
                f"Location already registered: {location_id}",
                location_id=location_id,
            )
        if not isinstance(label, str) or not label.strip():
            raise InvalidLabelError(
                f"Location {location_id} needs a non-empty label",
                location_id=location_id,
            )

        location = Location(id=location_id, label=label)
        self._locations[location_id] = location
        self._adjacency[location_id] = []
        self._logger.debug(
            "Location added",
            extra={"location_id": location_id, "label": label},
        )
        return location

    def add_road(self, a: int, b: int, base_cost: float) -> Road:
        """Insert an undirected road with CLEAR status.

        Args:
            a: First endpoint id.
            b: Second endpoint id.
            base_cost: Strictly positive traversal cost.

        Returns:
            The inserted Road, endpoints in canonical order.

        Raises:
            UnknownLocationError: If either endpoint is unregistered.
            SelfLoopError: If a == b.
            InvalidCostError: If base_cost is not positive or its heaviest
                effective weight is not finite.
            DuplicateEdgeError: If a road already joins a and b.
        """
        for endpoint in (a, b):
            if endpoint not in self._locations:
                raise UnknownLocationError(
                    f"Unknown location: {endpoint}",
                    location_id=endpoint,
                )
        if a == b:
            raise SelfLoopError(
                f"Road endpoints must differ, got {a} twice",
                location_id=a,
            )
        if (
            isinstance(base_cost, bool)
            or not isinstance(base_cost, (int, float))
            or base_cost <= 0
            or not math.isfinite(base_cost * HEAVIEST_MULTIPLIER)
        ):
            raise InvalidCostError(
                f"Road cost must be a positive number, got {base_cost!r}",
                base_cost=base_cost,
            )

        key = _canonical(a, b)
        if key in self._roads:
            raise DuplicateEdgeError(
                f"Road already exists between {key[0]} and {key[1]}",
                a=key[0],
                b=key[1],
            )

        road = Road(a=key[0], b=key[1], base_cost=float(base_cost))
        self._roads[key] = road
        self._adjacency[a].append(b)
        self._adjacency[b].append(a)
        self._logger.debug(
            "Road added",
            extra={"a": road.a, "b": road.b, "base_cost": road.base_cost},
        )
        return road

    def update_status(self, a: int, b: int, status: TrafficStatus) -> Road:
        """Set the traffic status of the road between a and b.

        Args:
            a: First endpoint id.
            b: Second endpoint id.
            status: New status, or its integer code.

        Raises:
            InvalidStatusError: If an integer code is outside 0..3.
            UnknownEdgeError: If no road joins a and b.
        """
        if not isinstance(status, TrafficStatus):
            status = TrafficStatus.from_code(status)

        key = _canonical(a, b)
        road = self._roads.get(key)
        if road is None:
            raise UnknownEdgeError(
                f"No road between {a} and {b}",
                a=a,
                b=b,
            )

        updated = replace(road, status=status)
        self._roads[key] = updated
        self._logger.debug(
            "Road status updated",
            extra={
                "a": key[0],
                "b": key[1],
                "previous": road.status.name,
                "status": updated.status.name,
            },
        )
        return updated

    def neighbors(self, location_id: int) -> List[Neighbor]:
        """Return ``(other_endpoint, base_cost, status)`` for each incident road.

        Raises:
            UnknownLocationError: If the id is not registered.
        """
        if location_id not in self._adjacency:
            raise UnknownLocationError(
                f"Unknown location: {location_id}",
                location_id=location_id,
            )
        result: List[Neighbor] = []
        for other in self._adjacency[location_id]:
            road = self._roads[_canonical(location_id, other)]
            result.append((other, road.base_cost, road.status))
        return result

    def enumerate_edges(self) -> List[Road]:
        """Return every road once, sorted by canonical endpoints."""
        return [self._roads[key] for key in sorted(self._roads)]

    def get_road(self, a: int, b: int) -> Optional[Road]:
        return self._roads.get(_canonical(a, b))

    def get_location(self, location_id: int) -> Optional[Location]:
        return self._locations.get(location_id)

    def has_location(self, location_id: int) -> bool:
        return location_id in self._locations

    def lookup_label(self, location_id: int) -> str:
        """Return the label of a location.

        Raises:
            UnknownLocationError: If the id is not registered.
        """
        location = self._locations.get(location_id)
        if location is None:
            raise UnknownLocationError(
                f"Unknown location: {location_id}",
                location_id=location_id,
            )
        return location.label

    def list_locations(self) -> Sequence[Location]:
        """List all locations sorted by id."""
        return [self._locations[key] for key in sorted(self._locations)]

    def snapshot(self) -> Dict[int, List[Neighbor]]:
        """Return a detached adjacency view of the whole network.

        Later mutations of the store do not affect the returned mapping.
        """
        return {
            location_id: self.neighbors(location_id) for location_id in self._adjacency
        }

    @property
    def location_count(self) -> int:
        return len(self._locations)

    @property
    def road_count(self) -> int:
        return len(self._roads)
