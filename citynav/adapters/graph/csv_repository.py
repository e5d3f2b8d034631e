"""CSV network repository adapter.

Loads the seed road network from two CSV files:
- locations: ``location_id,label``
- roads: ``from_id,to_id,base_cost[,status]``

The optional ``status`` column holds a traffic code (0-3); a missing or
empty value means CLEAR.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple

from ...config import GraphConfig, get_config
from ...domain.errors import GraphError
from ...domain.models import TrafficStatus
from ...ports.graph import RoadNetworkPort


@dataclass
class CSVNetworkRepository:
    """Network loader reading locations and roads from CSV files.

    This adapter implements NetworkLoaderPort.

    Attributes:
        config: Graph configuration (paths, file names)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load_into(self, network: RoadNetworkPort) -> RoadNetworkPort:
        """Register every location and road from the CSV files.

        Args:
            network: The store to populate.

        Returns:
            The same network, for chaining.

        Raises:
            GraphError: If a file cannot be read or a row is malformed.
            DuplicateIdError, DuplicateEdgeError, ...: If the data breaks
                a store invariant.
        """
        self._logger.debug(
            "Loading network",
            extra={
                "locations_path": str(self.config.locations_path),
                "roads_path": str(self.config.roads_path),
            },
        )

        locations = self._read_locations(self.config.locations_path)
        roads = self._read_roads(self.config.roads_path)

        for location_id, label in locations:
            network.add_location(location_id, label)
        for a, b, base_cost, status in roads:
            network.add_road(a, b, base_cost)
            if status is not TrafficStatus.CLEAR:
                network.update_status(a, b, status)

        self._logger.info(
            "Network loaded",
            extra={"locations": len(locations), "roads": len(roads)},
        )
        return network

    def _read_locations(self, path: Path) -> List[Tuple[int, str]]:
        rows: List[Tuple[int, str]] = []
        try:
            with path.open(encoding="utf-8", newline="") as f:
                reader = csv.DictReader(f)
                for row in reader:
                    raw_id = (row.get("location_id") or "").strip()
                    if not raw_id:
                        continue
                    rows.append((int(raw_id), (row.get("label") or "").strip()))
        except (OSError, KeyError, ValueError) as e:
            raise GraphError(
                f"Failed to load locations: {e}",
                file_path=str(path),
                cause=e,
            )
        return rows

    def _read_roads(self, path: Path) -> List[Tuple[int, int, float, TrafficStatus]]:
        rows: List[Tuple[int, int, float, TrafficStatus]] = []
        try:
            with path.open(encoding="utf-8", newline="") as f:
                reader = csv.DictReader(f)
                for row in reader:
                    from_id = (row.get("from_id") or "").strip()
                    to_id = (row.get("to_id") or "").strip()
                    cost_str = (row.get("base_cost") or "").strip()
                    status_str = (row.get("status") or "").strip()

                    if not from_id and not to_id and not cost_str:
                        continue

                    status = (
                        TrafficStatus.from_code(int(status_str))
                        if status_str
                        else TrafficStatus.CLEAR
                    )
                    rows.append((int(from_id), int(to_id), float(cost_str), status))
        except (OSError, KeyError, ValueError) as e:
            raise GraphError(
                f"Failed to load roads: {e}",
                file_path=str(path),
                cause=e,
            )
        return rows
