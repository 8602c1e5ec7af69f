"""
Route optimization for individual delivery orders.

This module composes two shortest-path queries (depot to pickup, pickup to
dropoff) into a single itinerary.
"""
import logging
from typing import Optional

from delivery_routing.core.dijkstra import DijkstraPathFinder
from delivery_routing.core.exceptions import MissingDepotError
from delivery_routing.core.graph import DeliveryGraph
from delivery_routing.core.types import DeliveryOrder, RoutePlan, RouteSegment
from delivery_routing.services.depot_service import DepotService
from delivery_routing.utils.helpers import format_route_plan

logger = logging.getLogger(__name__)


class RouteOptimizationService:
    """
    Service for planning the depot -> pickup -> dropoff route of an order.

    The service only reads from the graph; it never mutates the graph or the
    order it is given.
    """

    def __init__(self, graph: DeliveryGraph, path_finder: Optional[DijkstraPathFinder] = None):
        """
        Initialize the route optimization service.

        Args:
            graph: The delivery graph to route over.
            path_finder: Path finder to use; defaults to DijkstraPathFinder.
        """
        self.graph = graph
        self.path_finder = path_finder or DijkstraPathFinder()

    def plan_segment(self, from_location: str, to_location: str) -> RouteSegment:
        """
        Compute the shortest route between two locations.

        An empty path means no route exists; the segment distance is then
        None rather than the zero an empty path would otherwise sum to.
        """
        path = self.path_finder.shortest_path(self.graph, from_location, to_location)
        distance = self.path_finder.path_distance(self.graph, path) if path else None
        return RouteSegment(
            from_location=from_location,
            to_location=to_location,
            path=path,
            distance=distance
        )

    def optimize_route(self, order: DeliveryOrder, depot: Optional[str] = None) -> RoutePlan:
        """
        Plan the full route for an order.

        Args:
            order: The order; only pickup_location and dropoff_location are used.
            depot: Depot the agent starts from; defaults to the configured depot.

        Returns:
            RoutePlan with both segments. total_distance is None if either
            segment is unreachable.

        Raises:
            MissingDepotError: If the depot is not in the graph.
        """
        depot_name = DepotService.resolve_depot(depot)
        if not self.graph.has_location(depot_name):
            logger.error(f"Depot '{depot_name}' is missing; cannot optimize route")
            raise MissingDepotError(depot_name)

        pickup_segment = self.plan_segment(depot_name, order.pickup_location)
        delivery_segment = self.plan_segment(order.pickup_location, order.dropoff_location)

        total_distance = None
        if pickup_segment.is_reachable and delivery_segment.is_reachable:
            total_distance = pickup_segment.distance + delivery_segment.distance

        plan = RoutePlan(
            depot=depot_name,
            pickup_segment=pickup_segment,
            delivery_segment=delivery_segment,
            total_distance=total_distance,
            order_id=order.order_id
        )

        if plan.is_complete:
            logger.info(format_route_plan(plan))
        else:
            logger.warning(format_route_plan(plan))
        return plan
