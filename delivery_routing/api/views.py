"""
API views for delivery routing.

This module provides the API endpoints for shortest path, route optimization
and graph summary queries. Each request carries its own locations and routes,
from which a fresh delivery graph is built.
"""
from rest_framework import status
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.decorators import api_view
from drf_yasg.utils import swagger_auto_schema
from drf_yasg import openapi
import logging
from typing import Any, Dict

from delivery_routing.core.dijkstra import DijkstraPathFinder
from delivery_routing.core.exceptions import DeliveryRoutingError
from delivery_routing.core.graph import DeliveryGraph
from delivery_routing.core.types import DeliveryOrder
from delivery_routing.services.graph_stats_service import GraphStatsService
from delivery_routing.services.route_optimization_service import RouteOptimizationService
from delivery_routing.utils.helpers import format_route_plan
from delivery_routing.api.serializers import (
    ShortestPathRequestSerializer,
    ShortestPathResponseSerializer,
    RouteOptimizationRequestSerializer,
    RoutePlanSerializer,
    GraphSummaryRequestSerializer,
    GraphSummaryResponseSerializer,
)

# Set up logging
logger = logging.getLogger(__name__)


def build_graph(validated_data: Dict[str, Any]) -> DeliveryGraph:
    """
    Build a DeliveryGraph from validated `locations` and `routes` payload fields.

    Raises:
        UnknownLocationError: If a route references an unlisted location.
    """
    routes = [
        (route['start'], route['end'], route['distance'])
        for route in validated_data.get('routes', [])
    ]
    return DeliveryGraph.from_routes(validated_data['locations'], routes)


def _error_response(message: str, http_status: int) -> Response:
    return Response({"error": message}, status=http_status)


class ShortestPathView(APIView):
    """
    API view for finding the shortest path between two locations.
    """

    @swagger_auto_schema(
        request_body=ShortestPathRequestSerializer,
        responses={
            200: ShortestPathResponseSerializer,
            400: "Bad Request - Invalid input data or unknown route location",
            500: "Internal Server Error - Path calculation failed"
        },
        operation_id="shortest_path_create",
        operation_description="""Finds the shortest path between two locations of the supplied graph.
        An unreachable or unknown end location yields an empty path and a null distance.""",
        tags=['Delivery Routing']
    )
    def post(self, request, format=None):
        """
        POST endpoint for shortest path queries.

        Args:
            request: HTTP request object containing the graph and the start/end locations.
            format: Format of the response.

        Returns:
            Response object with the path and its distance.
        """
        serializer = ShortestPathRequestSerializer(data=request.data)

        if not serializer.is_valid():
            logger.error(f"ShortestPathView validation error: {serializer.errors}")
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        try:
            graph = build_graph(serializer.validated_data)
            start = serializer.validated_data['start']
            end = serializer.validated_data['end']

            path = DijkstraPathFinder.shortest_path(graph, start, end)
            distance = DijkstraPathFinder.path_distance(graph, path) if path else None

            response_serializer = ShortestPathResponseSerializer(data={
                "start": start,
                "end": end,
                "path": path,
                "distance": distance,
                "reachable": distance is not None,
            })
            if not response_serializer.is_valid():
                logger.error(f"ShortestPathView response serialization error: {response_serializer.errors}")
                return Response(response_serializer.errors, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

            return Response(response_serializer.data, status=status.HTTP_200_OK)

        except DeliveryRoutingError as e:
            logger.warning(f"ShortestPathView rejected request: {e}")
            return _error_response(str(e), status.HTTP_400_BAD_REQUEST)
        except Exception as e:
            logger.exception("Critical error during shortest path calculation: %s", str(e))
            return _error_response(
                "An unexpected error occurred during path calculation. Please try again later.",
                status.HTTP_500_INTERNAL_SERVER_ERROR
            )


class OptimizeRouteView(APIView):
    """
    API view for planning the depot -> pickup -> dropoff route of an order.
    """

    @swagger_auto_schema(
        request_body=RouteOptimizationRequestSerializer,
        responses={
            200: RoutePlanSerializer,
            400: openapi.Response("Bad Request - Invalid input data, unknown route location or missing depot."),
            500: openapi.Response("Internal Server Error - Route optimization failed.")
        },
        operation_id="optimize_route_create",
        operation_description="""Plans the route for a single order: from the depot to the pickup location,
        then from the pickup location to the dropoff location. Unreachable segments are reported with a
        null distance and a null total.""",
        tags=['Delivery Routing']
    )
    def post(self, request, format=None):
        """
        POST endpoint for route optimization.

        Args:
            request: HTTP request object containing the graph, the order and an optional depot.
            format: Format of the response.

        Returns:
            Response object with the route plan.
        """
        serializer = RouteOptimizationRequestSerializer(data=request.data)

        if not serializer.is_valid():
            logger.error(f"OptimizeRouteView validation error: {serializer.errors}")
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        try:
            graph = build_graph(serializer.validated_data)
            order = DeliveryOrder(**serializer.validated_data['order'])
            depot = serializer.validated_data.get('depot')

            plan = RouteOptimizationService(graph).optimize_route(order, depot=depot)

            response_data = plan.to_dict()
            response_data['report'] = format_route_plan(plan)
            response_serializer = RoutePlanSerializer(data=response_data)
            if not response_serializer.is_valid():
                logger.error(f"OptimizeRouteView response serialization error: {response_serializer.errors}")
                return Response(response_serializer.errors, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

            return Response(response_serializer.data, status=status.HTTP_200_OK)

        except DeliveryRoutingError as e:
            logger.warning(f"OptimizeRouteView rejected request: {e}")
            return _error_response(str(e), status.HTTP_400_BAD_REQUEST)
        except Exception as e:
            logger.exception("Critical error during route optimization: %s", str(e))
            return _error_response(
                "An unexpected error occurred during route optimization. Please try again later.",
                status.HTTP_500_INTERNAL_SERVER_ERROR
            )


class GraphSummaryView(APIView):
    """
    API view for summarizing a delivery graph.
    """

    @swagger_auto_schema(
        request_body=GraphSummaryRequestSerializer,
        responses={
            200: GraphSummaryResponseSerializer,
            400: "Bad Request - Invalid input data or unknown route location",
            500: "Internal Server Error - Summary failed"
        },
        operation_id="graph_summary_create",
        operation_description="Reports location and route counts, isolated locations, depot status and, "
                              "optionally, all-pairs shortest distances for the supplied graph.",
        tags=['Delivery Routing']
    )
    def post(self, request, format=None):
        serializer = GraphSummaryRequestSerializer(data=request.data)

        if not serializer.is_valid():
            logger.error(f"GraphSummaryView validation error: {serializer.errors}")
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        try:
            graph = build_graph(serializer.validated_data)
            summary = GraphStatsService.summarize(
                graph,
                depot=serializer.validated_data.get('depot'),
                include_distance_matrix=serializer.validated_data.get('include_distance_matrix', False)
            )

            response_serializer = GraphSummaryResponseSerializer(data=summary)
            if not response_serializer.is_valid():
                logger.error(f"GraphSummaryView response serialization error: {response_serializer.errors}")
                return Response(response_serializer.errors, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

            return Response(response_serializer.data, status=status.HTTP_200_OK)

        except DeliveryRoutingError as e:
            logger.warning(f"GraphSummaryView rejected request: {e}")
            return _error_response(str(e), status.HTTP_400_BAD_REQUEST)
        except Exception as e:
            logger.exception("Critical error during graph summary: %s", str(e))
            return _error_response(
                "An unexpected error occurred while summarizing the graph. Please try again later.",
                status.HTTP_500_INTERNAL_SERVER_ERROR
            )


@swagger_auto_schema(
    method='get',
    operation_id="health_check_get",
    operation_description="Performs a health check of the API. Returns the operational status of the service.",
    responses={
        200: openapi.Response(
            description="API is healthy and operational.",
            examples={"application/json": {"status": "healthy"}}
        )
    },
    tags=['Health Check']
)
@api_view(['GET'])
def health_check(request):
    """
    Health check endpoint to verify the API is running.
    """
    return Response({"status": "healthy"}, status=status.HTTP_200_OK)
