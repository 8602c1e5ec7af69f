import logging
from typing import Optional

from delivery_routing import settings as routing_settings
from delivery_routing.core.graph import DeliveryGraph
from delivery_routing.core.types import AddResult

logger = logging.getLogger(__name__)


class DepotService:
    @staticmethod
    def resolve_depot(depot: Optional[str] = None) -> str:
        """
        Return the depot name to route from.

        Args:
            depot: Explicit depot name, if the caller has one.

        Returns:
            `depot` if given, otherwise the configured DEFAULT_DEPOT.
        """
        if depot:
            return depot
        return routing_settings.DEFAULT_DEPOT

    @staticmethod
    def ensure_depot(graph: DeliveryGraph, depot: Optional[str] = None) -> AddResult:
        """
        Make sure the depot location exists in the graph.

        Args:
            graph: The delivery graph to set up.
            depot: Explicit depot name; defaults to the configured depot.

        Returns:
            AddResult.ADDED if the depot was created, AddResult.ALREADY_EXISTS otherwise.
        """
        depot_name = DepotService.resolve_depot(depot)
        if graph.has_location(depot_name):
            return AddResult.ALREADY_EXISTS
        logger.info(f"Setting up depot location '{depot_name}'")
        return graph.add_location(depot_name)
