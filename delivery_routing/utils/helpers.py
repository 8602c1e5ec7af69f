"""
Helper functions for the delivery routing module.

This module provides formatting and inspection utilities used across the
services and the API.
"""
import logging
from typing import List, Optional, Sequence

from delivery_routing.core.constants import PATH_DISPLAY_SEPARATOR, UNAVAILABLE_DISTANCE_LABEL
from delivery_routing.core.graph import DeliveryGraph
from delivery_routing.core.types import Distance, RoutePlan

# Set up logging
logger = logging.getLogger(__name__)


def format_path_for_display(path: Sequence[str]) -> str:
    """
    Format a path for display.

    Args:
        path: Ordered location names.

    Returns:
        Locations joined with arrows, e.g. "Depot -> A -> B".
    """
    return PATH_DISPLAY_SEPARATOR.join(path)


def format_distance(distance: Optional[Distance], unit: str = "km") -> str:
    """
    Format a distance for display, using "N/A" for unreachable segments.
    """
    if distance is None:
        return UNAVAILABLE_DISTANCE_LABEL
    return f"{distance} {unit}"


def format_route_plan(plan: RoutePlan) -> str:
    """
    Render a route plan as a short multi-line report.

    Args:
        plan: The plan returned by RouteOptimizationService.optimize_route.

    Returns:
        One line per segment followed by the total.
    """
    header = "Route optimization"
    if plan.order_id is not None:
        header += f" for order {plan.order_id}"

    lines = [header]
    labels = ("Agent path", "Delivery path")
    for idx, (label, segment) in enumerate(zip(labels, plan.segments), start=1):
        line = (f"{idx}. {label} ({segment.from_location} to {segment.to_location}): "
                f"{format_distance(segment.distance)}")
        if segment.is_reachable:
            line += f" [{format_path_for_display(segment.path)}]"
        lines.append(line)

    lines.append(f"Total estimated delivery distance: {format_distance(plan.total_distance)}")
    return "\n".join(lines)


def detect_isolated_locations(graph: DeliveryGraph) -> List[str]:
    """
    Detect locations that have no routes at all.

    Since routes are bidirectional, a location with no neighbors has neither
    incoming nor outgoing connections.

    Args:
        graph: The delivery graph.

    Returns:
        Isolated location names in insertion order.
    """
    return [name for name in graph.locations() if not graph.neighbors_of(name)]
