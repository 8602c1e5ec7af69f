"""
URL configuration for the delivery routing API.

This module defines the URL patterns for the delivery routing API endpoints.
"""
from django.urls import path
from delivery_routing.api.views import ShortestPathView, OptimizeRouteView, GraphSummaryView, health_check

app_name = 'delivery_routing'

urlpatterns = [
    # Health check endpoint
    path('health/', health_check, name='health_check_get'),

    # Routing endpoints
    path('shortest-path/', ShortestPathView.as_view(), name='shortest_path_create'),
    path('optimize-route/', OptimizeRouteView.as_view(), name='optimize_route_create'),
    path('graph-summary/', GraphSummaryView.as_view(), name='graph_summary_create'),
]
