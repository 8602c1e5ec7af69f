"""
Delivery Routing Module.

This module provides a weighted graph of delivery locations and the
shortest-path queries used to plan depot -> pickup -> dropoff itineraries.
"""

__version__ = '0.1.0'
