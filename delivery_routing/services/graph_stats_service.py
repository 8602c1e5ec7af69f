import logging
from typing import Any, Dict, Optional

from delivery_routing.core.distance_matrix import DistanceMatrixBuilder
from delivery_routing.core.graph import DeliveryGraph
from delivery_routing.services.depot_service import DepotService
from delivery_routing.utils.helpers import detect_isolated_locations

logger = logging.getLogger(__name__)


class GraphStatsService:
    """
    Service for summarizing the state of a delivery graph.
    """

    @staticmethod
    def summarize(
        graph: DeliveryGraph,
        depot: Optional[str] = None,
        include_distance_matrix: bool = False
    ) -> Dict[str, Any]:
        """
        Build a status summary of the graph.

        Args:
            graph: The delivery graph to summarize.
            depot: Depot name to report on; defaults to the configured depot.
            include_distance_matrix: If True, add all-pairs shortest distances
                (None for unreachable pairs) in `locations` order.

        Returns:
            Dictionary with location and route counts, the location list,
            isolated locations and depot status.
        """
        depot_name = DepotService.resolve_depot(depot)
        locations = graph.locations()

        summary = {
            'location_count': len(locations),
            'route_count': len(graph.routes()),
            'locations': locations,
            'isolated_locations': detect_isolated_locations(graph),
            'depot': depot_name,
            'has_depot': graph.has_location(depot_name),
        }

        if include_distance_matrix:
            matrix, _ = DistanceMatrixBuilder.build_shortest_distance_matrix(graph, locations)
            summary['distance_matrix'] = DistanceMatrixBuilder.to_serializable(matrix)

        logger.debug(
            f"Graph summary: {summary['location_count']} locations, "
            f"{summary['route_count']} routes"
        )
        return summary
