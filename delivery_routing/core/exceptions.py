"""
Exceptions raised by the delivery routing core.
"""
from typing import Iterable


class DeliveryRoutingError(Exception):
    """Base class for all delivery routing errors."""


class UnknownLocationError(DeliveryRoutingError, KeyError):
    """Raised when a route references a location that has not been added."""

    def __init__(self, missing: Iterable[str]):
        self.missing = list(missing)
        super().__init__(
            f"Unknown location(s): {', '.join(repr(name) for name in self.missing)}. "
            f"Add them before adding routes."
        )

    def __str__(self):
        # KeyError.__str__ would repr() the message
        return self.args[0]


class MissingDepotError(DeliveryRoutingError):
    """Raised when the depot location is not present in the graph."""

    def __init__(self, depot: str):
        self.depot = depot
        super().__init__(f"Depot location '{depot}' is missing from the delivery graph")


class InvalidDistanceError(DeliveryRoutingError, ValueError):
    """Raised when a route distance is negative or not a number."""

    def __init__(self, start: str, end: str, distance):
        self.start = start
        self.end = end
        self.distance = distance
        super().__init__(
            f"Invalid distance {distance!r} for route '{start}' <-> '{end}'; "
            f"distances must be non-negative numbers"
        )
