"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    DuplicateEdgeError,
    DuplicateIdError,
    GraphError,
    InvalidCostError,
    InvalidIdError,
    InvalidLabelError,
    InvalidStatusError,
    NavigationError,
    NoRouteFoundError,
    RouteCostOverflowError,
    SearchLimitExceededError,
    SelfLoopError,
    UnknownEdgeError,
    UnknownLocationError,
)
from .models import Location, NoPath, Road, RouteOutcome, RouteResult, TrafficStatus

__all__ = [
    # Models
    "TrafficStatus",
    "Location",
    "Road",
    "RouteResult",
    "NoPath",
    "RouteOutcome",
    # Errors
    "NavigationError",
    "GraphError",
    "DuplicateIdError",
    "InvalidIdError",
    "UnknownLocationError",
    "InvalidLabelError",
    "DuplicateEdgeError",
    "UnknownEdgeError",
    "SelfLoopError",
    "InvalidCostError",
    "InvalidStatusError",
    "NoRouteFoundError",
    "SearchLimitExceededError",
    "RouteCostOverflowError",
]
