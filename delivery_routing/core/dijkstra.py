import heapq
import logging
from typing import Dict, List, Optional, Sequence, Tuple

from delivery_routing.core.graph import DeliveryGraph
from delivery_routing.core.types import Distance

# Set up logging
logger = logging.getLogger(__name__)


class DijkstraPathFinder:
    """
    Implementation of Dijkstra's algorithm over a DeliveryGraph.
    """

    @staticmethod
    def _run(
        adjacency: Dict[str, Dict[str, Distance]],
        start: str,
        target: Optional[str] = None
    ) -> Tuple[Dict[str, float], Dict[str, str]]:
        """
        Single-source relaxation from `start`.

        Stops as soon as `target` is extracted from the queue when a target is
        given; otherwise runs until the queue is exhausted.

        Returns:
            Tentative distances for every location (inf if never reached) and
            the predecessor of every reached location other than `start`.
        """
        # Initialize distances dictionary with infinity for all nodes except start
        distances = {node: float('inf') for node in adjacency}
        distances[start] = 0
        previous: Dict[str, str] = {}

        # Priority queue with (distance, node); stale entries are skipped on extraction
        queue = [(0, start)]
        visited = set()

        while queue:
            current_distance, current_node = heapq.heappop(queue)

            if current_node in visited:
                continue
            visited.add(current_node)

            if current_node == target:
                break

            for neighbor, weight in adjacency[current_node].items():
                if neighbor in visited:
                    continue

                distance = current_distance + weight
                if distance < distances[neighbor]:
                    distances[neighbor] = distance
                    previous[neighbor] = current_node
                    heapq.heappush(queue, (distance, neighbor))

        return distances, previous

    @staticmethod
    def _reconstruct_path(
        previous: Dict[str, str],
        start: str,
        end: str,
        max_steps: int
    ) -> List[str]:
        """
        Walk predecessor links from `end` back to `start`.

        Returns:
            The path in start-to-end order, or an empty list if the chain does
            not terminate at `start` within `max_steps` links.
        """
        path = [end]
        current = end
        for _ in range(max_steps):
            if current == start:
                break
            current = previous.get(current)
            if current is None:
                break
            path.append(current)

        if path[-1] != start:
            logger.warning(
                f"Predecessor chain from '{end}' does not lead back to '{start}': {path}"
            )
            return []

        path.reverse()
        return path

    @staticmethod
    def shortest_path(graph: DeliveryGraph, start: str, end: str) -> List[str]:
        """
        Calculate the shortest path between two locations.

        When several paths share the minimum distance, the one whose
        predecessor chain was recorded first is returned.

        Args:
            graph: The delivery graph to search.
            start: Starting location.
            end: Target location.

        Returns:
            The list of locations from start to end, or an empty list if
            either location is unknown or end cannot be reached.
        """
        if start not in graph or end not in graph:
            logger.warning(f"Start location '{start}' or end location '{end}' not in graph")
            return []

        # Work on a snapshot so the search sees one consistent graph
        adjacency = graph.to_dict()
        distances, previous = DijkstraPathFinder._run(adjacency, start, target=end)

        if distances[end] == float('inf'):
            logger.warning(f"No path found from '{start}' to '{end}'")
            return []

        return DijkstraPathFinder._reconstruct_path(previous, start, end, len(adjacency))

    @staticmethod
    def shortest_distances(
        graph: DeliveryGraph,
        start: str
    ) -> Tuple[Dict[str, Distance], Dict[str, str]]:
        """
        Calculate shortest distances from `start` to every reachable location.

        Args:
            graph: The delivery graph to search.
            start: Starting location.

        Returns:
            A tuple of (distances, predecessors). Only reachable locations
            appear in distances; both are empty if start is unknown.
        """
        if start not in graph:
            logger.warning(f"Start location '{start}' not in graph")
            return {}, {}

        distances, previous = DijkstraPathFinder._run(graph.to_dict(), start)
        reachable = {node: dist for node, dist in distances.items() if dist != float('inf')}
        return reachable, previous

    @staticmethod
    def path_distance(graph: DeliveryGraph, path: Sequence[str]) -> Optional[Distance]:
        """
        Sum the route distances along a path.

        Args:
            graph: The delivery graph holding the routes.
            path: Ordered locations, start first.

        Returns:
            Total distance, 0 for paths of fewer than two locations, or None
            if any consecutive pair is not joined by a route.
        """
        total = 0
        for start, end in zip(path, path[1:]):
            distance = graph.route_distance(start, end)
            if distance is None:
                logger.warning(f"Broken path: no route between '{start}' and '{end}'")
                return None
            total += distance
        return total
