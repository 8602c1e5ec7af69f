"""
Graph store for delivery locations and routes.

This module provides the DeliveryGraph class, an adjacency map of named
locations connected by bidirectional weighted routes.
"""
import logging
import math
from numbers import Real
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from delivery_routing.core.exceptions import InvalidDistanceError, UnknownLocationError
from delivery_routing.core.types import AddResult, Distance

logger = logging.getLogger(__name__)


class DeliveryGraph:
    """
    Mutable weighted graph of delivery locations.

    Format of the underlying adjacency map:
        {location: {neighbor: distance, ...}, ...}

    Routes are always stored in both directions, so every neighbor key is
    also a top-level location.
    """

    def __init__(self):
        """Initialize an empty delivery graph."""
        self._adjacency: Dict[str, Dict[str, Distance]] = {}

    @classmethod
    def from_routes(
        cls,
        locations: Iterable[str],
        routes: Iterable[Tuple[str, str, Distance]] = ()
    ) -> 'DeliveryGraph':
        """
        Build a graph from a list of locations and (start, end, distance) routes.

        Raises:
            UnknownLocationError: If a route references a location not in `locations`.
            InvalidDistanceError: If a route has a negative or non-numeric distance.
        """
        graph = cls()
        for name in locations:
            graph.add_location(name)
        for start, end, distance in routes:
            graph.add_route(start, end, distance)
        return graph

    def add_location(self, name: str) -> AddResult:
        """
        Add a location with no routes.

        Args:
            name: Unique location name.

        Returns:
            AddResult.ADDED, or AddResult.ALREADY_EXISTS if the location was
            present (the graph is left untouched in that case).
        """
        if name in self._adjacency:
            logger.warning(f"Location '{name}' already exists")
            return AddResult.ALREADY_EXISTS

        self._adjacency[name] = {}
        logger.info(f"Location added: {name}")
        return AddResult.ADDED

    def add_route(self, start: str, end: str, distance: Distance) -> AddResult:
        """
        Add a bidirectional route between two existing locations.

        Re-adding a route between the same pair overwrites its distance.

        Args:
            start: Name of one endpoint.
            end: Name of the other endpoint.
            distance: Non-negative route length.

        Returns:
            AddResult.ADDED.

        Raises:
            UnknownLocationError: If either endpoint has not been added.
            InvalidDistanceError: If distance is negative or not a finite number.
        """
        missing = [name for name in (start, end) if name not in self._adjacency]
        if missing:
            logger.error(f"Cannot add route '{start}' <-> '{end}': unknown location(s) {missing}")
            raise UnknownLocationError(missing)

        if (isinstance(distance, bool) or not isinstance(distance, Real)
                or not math.isfinite(distance) or distance < 0):
            raise InvalidDistanceError(start, end, distance)

        self._adjacency[start][end] = distance
        self._adjacency[end][start] = distance
        logger.info(f"Route added: {start} <-> {end} ({distance})")
        return AddResult.ADDED

    def has_location(self, name: str) -> bool:
        return name in self._adjacency

    def neighbors_of(self, name: str) -> Dict[str, Distance]:
        """Return a copy of the neighbors of `name`; empty if the location is unknown."""
        return dict(self._adjacency.get(name, {}))

    def route_distance(self, start: str, end: str) -> Optional[Distance]:
        """Return the distance of the direct route between two locations, or None."""
        return self._adjacency.get(start, {}).get(end)

    def locations(self) -> List[str]:
        """All locations in insertion order."""
        return list(self._adjacency)

    def routes(self) -> List[Tuple[str, str, Distance]]:
        """
        All routes, each undirected route listed once.

        The endpoint that was added to the graph first is listed first.
        """
        order = {name: idx for idx, name in enumerate(self._adjacency)}
        result = []
        for start, neighbors in self._adjacency.items():
            for end, distance in neighbors.items():
                if order[start] <= order[end]:
                    result.append((start, end, distance))
        return result

    def to_dict(self) -> Dict[str, Dict[str, Distance]]:
        """Return a deep copy of the adjacency map."""
        return {name: dict(neighbors) for name, neighbors in self._adjacency.items()}

    def __contains__(self, name) -> bool:
        return name in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __iter__(self) -> Iterator[str]:
        return iter(self._adjacency)

    def __repr__(self):
        return f"DeliveryGraph(locations={len(self)}, routes={len(self.routes())})"
