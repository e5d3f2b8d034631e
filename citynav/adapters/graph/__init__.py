"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- InMemoryRoadNetwork: Dictionary-backed graph store
- CSVNetworkRepository: Seeds a store from CSV files
- DijkstraRouteSolver: Finds lowest-cost routes using Dijkstra's algorithm
"""

from .csv_repository import CSVNetworkRepository
from .dijkstra_solver import DijkstraRouteSolver
from .memory_store import InMemoryRoadNetwork

__all__ = ["InMemoryRoadNetwork", "CSVNetworkRepository", "DijkstraRouteSolver"]
