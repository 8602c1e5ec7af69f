"""
Core data types for delivery routing.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

Distance = Union[int, float]


class AddResult(str, Enum):
    """Outcome of inserting a location or route into the delivery graph."""
    ADDED = "added"
    ALREADY_EXISTS = "already_exists"


@dataclass
class DeliveryOrder:
    """
    An order as seen by the routing core.

    Only the pickup and dropoff locations are used for routing; the id and
    price are carried along so results can be matched back to the order.
    """
    pickup_location: str
    dropoff_location: str
    order_id: Optional[int] = None
    price: Optional[float] = None


@dataclass
class RouteSegment:
    """Represents one leg of an itinerary between two locations."""
    from_location: str
    to_location: str
    path: List[str] = field(default_factory=list)
    distance: Optional[Distance] = None  # None when no route exists

    @property
    def is_reachable(self) -> bool:
        return self.distance is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'from_location': self.from_location,
            'to_location': self.to_location,
            'path': list(self.path),
            'distance': self.distance,
            'reachable': self.is_reachable,
        }


@dataclass
class RoutePlan:
    """
    Depot -> pickup -> dropoff itinerary for a single order.

    ``total_distance`` is None whenever either segment is unreachable; a
    partial sum is never reported.
    """
    depot: str
    pickup_segment: RouteSegment
    delivery_segment: RouteSegment
    total_distance: Optional[Distance] = None
    order_id: Optional[int] = None

    @property
    def segments(self) -> List[RouteSegment]:
        return [self.pickup_segment, self.delivery_segment]

    @property
    def is_complete(self) -> bool:
        return self.total_distance is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'order_id': self.order_id,
            'depot': self.depot,
            'pickup_segment': self.pickup_segment.to_dict(),
            'delivery_segment': self.delivery_segment.to_dict(),
            'total_distance': self.total_distance,
            'complete': self.is_complete,
        }
