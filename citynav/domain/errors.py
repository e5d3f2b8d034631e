"""Typed domain errors for the city navigator.

Every error raised by the graph store, the route solver or the
navigation service inherits from NavigationError and can optionally
wrap a root cause exception for debugging.

Structural errors (bad ids, duplicate roads, invalid costs) are raised
before any state is touched, so a failed mutation leaves the network
exactly as it was.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class NavigationError(Exception):
    """Base error for the navigation domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GraphError(NavigationError):
    """Graph loading or data integrity error.

    Attributes:
        file_path: Path to the graph data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class DuplicateIdError(GraphError):
    """A location with this id is already registered."""

    location_id: Optional[int] = None


@dataclass
class InvalidIdError(GraphError):
    """Location id is not an integer.

    Attributes:
        location_id: The rejected value
    """

    location_id: Optional[object] = None


@dataclass
class UnknownLocationError(GraphError):
    """Location id not found in the network.

    Attributes:
        location_id: The id that was not found
    """

    location_id: Optional[int] = None


@dataclass
class InvalidLabelError(GraphError):
    """Location label is empty."""

    location_id: Optional[int] = None


@dataclass
class DuplicateEdgeError(GraphError):
    """A road already joins the two locations.

    Attributes:
        a: First endpoint id
        b: Second endpoint id
    """

    a: Optional[int] = None
    b: Optional[int] = None


@dataclass
class UnknownEdgeError(GraphError):
    """No road joins the two locations.

    Attributes:
        a: First endpoint id
        b: Second endpoint id
    """

    a: Optional[int] = None
    b: Optional[int] = None


@dataclass
class SelfLoopError(GraphError):
    """A road cannot start and end at the same location."""

    location_id: Optional[int] = None


@dataclass
class InvalidCostError(GraphError):
    """Road base cost is not a strictly positive finite number.

    Attributes:
        base_cost: The rejected value
    """

    base_cost: Optional[float] = None


@dataclass
class InvalidStatusError(GraphError):
    """Traffic status code outside the 0..3 range.

    Attributes:
        code: The rejected code
    """

    code: Optional[object] = None


@dataclass
class NoRouteFoundError(NavigationError):
    """No usable path exists between the requested locations.

    Attributes:
        source: Departure location id
        target: Arrival location id
    """

    source: Optional[int] = None
    target: Optional[int] = None


@dataclass
class SearchLimitExceededError(NavigationError):
    """Route search settled more nodes than the configured cap.

    Attributes:
        max_expansions: The configured cap
    """

    max_expansions: int = 0


@dataclass
class RouteCostOverflowError(NavigationError):
    """A path cost grew past the largest representable float.

    Attributes:
        source: Departure location id
        target: Arrival location id
    """

    source: Optional[int] = None
    target: Optional[int] = None
