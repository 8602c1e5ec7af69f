"""
Serializers for the delivery routing API.

This module provides serializers for converting between API requests/responses
and the internal data structures used by the delivery routing core.
"""
import logging
from rest_framework import serializers

from delivery_routing import settings as routing_settings

logger = logging.getLogger(__name__)


class RouteSerializer(serializers.Serializer):
    """Serializer for a bidirectional route between two locations."""
    start = serializers.CharField(max_length=255, help_text="Name of one endpoint of the route.")
    end = serializers.CharField(max_length=255, help_text="Name of the other endpoint of the route.")
    distance = serializers.IntegerField(min_value=0, help_text="Length of the route in kilometers. Must be non-negative.")


class GraphPayloadSerializer(serializers.Serializer):
    """Locations and routes from which a delivery graph is built for a single request."""
    locations = serializers.ListField(
        child=serializers.CharField(max_length=255),
        help_text="Names of all locations in the graph. Duplicates are ignored."
    )
    routes = RouteSerializer(many=True, required=False,
                             help_text="Bidirectional routes between listed locations. Re-listing a pair overwrites its distance.")

    def validate_locations(self, value):
        max_locations = routing_settings.MAX_GRAPH_LOCATIONS
        if len(value) > max_locations:
            raise serializers.ValidationError(
                f"A graph may contain at most {max_locations} locations; got {len(value)}."
            )
        return value


class ShortestPathRequestSerializer(GraphPayloadSerializer):
    """Serializer for shortest path requests."""
    start = serializers.CharField(max_length=255, help_text="Location the path starts from.")
    end = serializers.CharField(max_length=255, help_text="Location the path ends at.")


class ShortestPathResponseSerializer(serializers.Serializer):
    """Serializer for shortest path responses."""
    start = serializers.CharField(max_length=255)
    end = serializers.CharField(max_length=255)
    path = serializers.ListField(child=serializers.CharField(max_length=255),
                                 help_text="Ordered locations from start to end; empty if no path exists.")
    distance = serializers.IntegerField(allow_null=True, help_text="Total path distance in kilometers, or null if unreachable.")
    reachable = serializers.BooleanField()


class DeliveryOrderSerializer(serializers.Serializer):
    """Serializer for the order fields used by route optimization."""
    pickup_location = serializers.CharField(max_length=255, help_text="Location the order is collected from (e.g., a restaurant).")
    dropoff_location = serializers.CharField(max_length=255, help_text="Location the order is delivered to.")
    order_id = serializers.IntegerField(required=False, allow_null=True, help_text="Identifier of the order (optional, echoed back).")
    price = serializers.FloatField(required=False, allow_null=True, min_value=0, help_text="Order price (optional, not used for routing).")


class RouteOptimizationRequestSerializer(GraphPayloadSerializer):
    """Serializer for route optimization requests."""
    order = DeliveryOrderSerializer(help_text="The order to plan a route for.")
    depot = serializers.CharField(max_length=255, required=False, allow_null=True, allow_blank=True,
                                  help_text="Location the agent starts from. Defaults to the configured depot.")


class RouteSegmentSerializer(serializers.Serializer):
    """Serializer for one leg of a route plan."""
    from_location = serializers.CharField(max_length=255)
    to_location = serializers.CharField(max_length=255)
    path = serializers.ListField(child=serializers.CharField(max_length=255))
    distance = serializers.IntegerField(allow_null=True, help_text="Segment distance in kilometers, or null if unreachable.")
    reachable = serializers.BooleanField()


class RoutePlanSerializer(serializers.Serializer):
    """Serializer for route optimization responses."""
    order_id = serializers.IntegerField(allow_null=True, required=False)
    depot = serializers.CharField(max_length=255)
    pickup_segment = RouteSegmentSerializer(help_text="Depot to pickup location.")
    delivery_segment = RouteSegmentSerializer(help_text="Pickup location to dropoff location.")
    total_distance = serializers.IntegerField(allow_null=True, help_text="Combined distance, or null if either segment is unreachable.")
    complete = serializers.BooleanField()
    report = serializers.CharField(required=False, help_text="Human-readable summary of the plan.")


class GraphSummaryRequestSerializer(GraphPayloadSerializer):
    """Serializer for graph summary requests."""
    depot = serializers.CharField(max_length=255, required=False, allow_null=True, allow_blank=True)
    include_distance_matrix = serializers.BooleanField(default=False,
                                                       help_text="If true, include all-pairs shortest distances in `locations` order.")


class GraphSummaryResponseSerializer(serializers.Serializer):
    """Serializer for graph summary responses."""
    location_count = serializers.IntegerField()
    route_count = serializers.IntegerField()
    locations = serializers.ListField(child=serializers.CharField(max_length=255))
    isolated_locations = serializers.ListField(child=serializers.CharField(max_length=255))
    depot = serializers.CharField(max_length=255)
    has_depot = serializers.BooleanField()
    distance_matrix = serializers.ListField(
        child=serializers.ListField(child=serializers.FloatField(allow_null=True)),
        required=False,
        help_text="Shortest distances between locations; null where no path exists."
    )
