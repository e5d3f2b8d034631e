"""Graph algorithms for the road network.

This subpackage holds the pure pieces of routing: the traffic-aware
weight model and the path-finding algorithm that runs on an adjacency
snapshot.
"""

from .dijkstra import Graph, dijkstra
from .weights import HEAVIEST_MULTIPLIER, effective_weight

__all__ = ["Graph", "dijkstra", "effective_weight", "HEAVIEST_MULTIPLIER"]
