"""
Distance matrix utilities for delivery routing.

This module builds all-pairs shortest-distance matrices from a delivery graph.
"""
import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np

from delivery_routing.core.dijkstra import DijkstraPathFinder
from delivery_routing.core.graph import DeliveryGraph

logger = logging.getLogger(__name__)


class DistanceMatrixBuilder:
    """
    Builder class for shortest-distance matrices over a DeliveryGraph.
    """

    @staticmethod
    def build_shortest_distance_matrix(
        graph: DeliveryGraph,
        location_ids: Optional[Sequence[str]] = None
    ) -> Tuple[np.ndarray, List[str]]:
        """
        Create a matrix of shortest distances between the given locations.

        Args:
            graph: The delivery graph.
            location_ids: Locations to include, in matrix order. Defaults to
                every location in the graph.

        Returns:
            Tuple containing:
            - distance_matrix: 2D numpy array; np.inf where no path exists,
              including rows and columns of locations not in the graph.
            - location_ids: List of location IDs matching the matrix indices.
        """
        ids = list(location_ids) if location_ids is not None else graph.locations()
        n = len(ids)
        matrix = np.full((n, n), np.inf)

        for i, start in enumerate(ids):
            if start not in graph:
                logger.warning(f"Location '{start}' not in graph; its row stays unreachable")
                continue
            distances, _ = DijkstraPathFinder.shortest_distances(graph, start)
            for j, end in enumerate(ids):
                if end in distances:
                    matrix[i, j] = distances[end]

        return matrix, ids

    @staticmethod
    def to_serializable(matrix: np.ndarray) -> List[List[Optional[float]]]:
        """
        Convert a distance matrix to nested lists, replacing np.inf with None.
        """
        return [
            [None if np.isinf(value) else float(value) for value in row]
            for row in matrix
        ]
