"""Shortest-path computation using Dijkstra's algorithm.

This module computes the lowest-cost route between two locations of a
road network snapshot, where each road's cost depends on its traffic
status. Blocked roads are skipped during relaxation.
"""

import heapq
import math
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from ..domain.errors import RouteCostOverflowError, SearchLimitExceededError
from ..domain.models import TrafficStatus
from .weights import effective_weight

# Maps location id -> list of (neighbor_id, base_cost, status)
Graph = Mapping[int, Sequence[Tuple[int, float, TrafficStatus]]]


def dijkstra(
    graph: Graph,
    start: int,
    end: int,
    max_expansions: Optional[int] = None,
) -> Tuple[List[int], float]:
    """Compute the lowest-cost path between two locations.

    The priority queue never has keys decreased in place: each successful
    relaxation pushes a new entry and entries popped with a distance
    larger than the best known one are discarded.

    Parameters
    ----------
    graph:
        Adjacency snapshot as produced by ``RoadNetworkPort.snapshot``.
    start:
        Identifier of the departure location.
    end:
        Identifier of the arrival location.
    max_expansions:
        Optional cap on the number of settled locations.

    Returns
    -------
    list[int], float
        The sequence of location ids from ``start`` to ``end``
        (inclusive) and the total effective cost.
        If no path exists, returns ``([], float("inf"))``.

    Raises
    ------
    SearchLimitExceededError
        If more than ``max_expansions`` locations get settled.
    RouteCostOverflowError
        If ``end`` is not reached and some path cost overflowed to
        infinity on the way.
    """
    if start not in graph or end not in graph:
        return [], math.inf

    if start == end:
        return [start], 0.0

    distances: Dict[int, float] = {location: math.inf for location in graph}
    parent: Dict[int, int] = {}
    distances[start] = 0.0

    heap: List[Tuple[float, int]] = [(0.0, start)]
    expansions = 0
    overflowed = False

    while heap:
        current_distance, u = heapq.heappop(heap)

        # stale entry
        if current_distance > distances[u]:
            continue

        if u == end:
            break

        expansions += 1
        if max_expansions is not None and expansions > max_expansions:
            raise SearchLimitExceededError(
                f"Route search exceeded {max_expansions} expansions",
                max_expansions=max_expansions,
            )

        for v, base_cost, status in graph.get(u, ()):
            weight = effective_weight(base_cost, status)
            if weight is None:
                continue
            new_distance = current_distance + weight
            if not math.isfinite(new_distance):
                overflowed = True
                continue
            if new_distance < distances.get(v, math.inf):
                distances[v] = new_distance
                parent[v] = u
                heapq.heappush(heap, (new_distance, v))

    if end not in parent:
        if overflowed:
            raise RouteCostOverflowError(
                f"Route cost from {start} to {end} overflows",
                source=start,
                target=end,
            )
        return [], math.inf

    path: List[int] = [end]
    current = end
    while current != start:
        current = parent[current]
        path.append(current)

    path.reverse()
    return path, distances[end]
