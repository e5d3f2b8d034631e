"""Immutable domain models for the city navigator.

All models are frozen dataclasses with slots. A road's traffic status
is the only thing that changes during a session, and the store does it
by swapping in a new Road record rather than mutating one in place.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from .errors import InvalidStatusError


class TrafficStatus(Enum):
    """Congestion level of a road.

    The values are the canonical codes used on any textual interface:
    0=CLEAR, 1=MODERATE, 2=HEAVY, 3=BLOCKED. Declaration order is also
    severity order.
    """

    CLEAR = 0
    MODERATE = 1
    HEAVY = 2
    BLOCKED = 3

    @property
    def multiplier(self) -> Optional[float]:
        """Factor applied to a road's base cost, None when unusable."""
        return _MULTIPLIERS[self]

    @property
    def is_blocked(self) -> bool:
        return self is TrafficStatus.BLOCKED

    @classmethod
    def from_code(cls, code: int) -> TrafficStatus:
        """Convert a textual status code into a TrafficStatus.

        Raises:
            InvalidStatusError: If the code is not one of 0..3.
        """
        if isinstance(code, bool) or not isinstance(code, int):
            raise InvalidStatusError(
                f"Status code must be an integer 0-3, got {code!r}", code=code
            )
        try:
            return cls(code)
        except ValueError as e:
            raise InvalidStatusError(
                f"Unknown status code: {code}", code=code, cause=e
            )


_MULTIPLIERS = {
    TrafficStatus.CLEAR: 1.0,
    TrafficStatus.MODERATE: 1.8,
    TrafficStatus.HEAVY: 3.5,
    TrafficStatus.BLOCKED: None,
}


@dataclass(frozen=True, slots=True)
class Location:
    """A named place in the road network.

    Attributes:
        id: Stable integer identifier (e.g., 0 for 'Central_Hub')
        label: Human-readable name
    """

    id: int
    label: str


@dataclass(frozen=True, slots=True)
class Road:
    """An undirected road between two locations.

    Endpoints are stored canonically with ``a < b``.

    Attributes:
        a: Lower endpoint id
        b: Higher endpoint id
        base_cost: Traversal cost with clear traffic
        status: Current traffic status
    """

    a: int
    b: int
    base_cost: float
    status: TrafficStatus = TrafficStatus.CLEAR

    @property
    def key(self) -> tuple[int, int]:
        return (self.a, self.b)

    @property
    def effective_cost(self) -> Optional[float]:
        """Cost under the current status, None when blocked."""
        from ..graph.weights import effective_weight

        return effective_weight(self.base_cost, self.status)


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Lowest-cost route between two locations.

    Attributes:
        path: Ordered tuple of location ids, source first
        total_cost: Sum of effective weights along the path
        labels: Resolved labels for each stop
    """

    path: tuple[int, ...]
    total_cost: float
    labels: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.path:
            raise ValueError("A route must contain at least one location")

    @property
    def source(self) -> int:
        return self.path[0]

    @property
    def target(self) -> int:
        return self.path[-1]

    @property
    def is_empty(self) -> bool:
        return False

    @property
    def num_stops(self) -> int:
        """Return the number of locations on the route."""
        return len(self.path)

    @property
    def legs(self) -> tuple[tuple[int, int], ...]:
        """Consecutive (from, to) pairs along the route."""
        return tuple(zip(self.path, self.path[1:]))


@dataclass(frozen=True, slots=True)
class NoPath:
    """Outcome of a route query whose target is unreachable.

    This is a normal result, not an error: every road out of the
    reachable region is blocked.
    """

    source: int
    target: int

    @property
    def is_empty(self) -> bool:
        return True


RouteOutcome = Union[RouteResult, NoPath]
