"""
Woosmap web services client.

This module provides:
- Authenticated request building (API key or signed URL)
- The response status protocol (OK / ZERO_RESULTS / error)
- Typed results for directions, places, geocoding and distance matrices

Main classes:
- WoosMap: High-level facade over all services
- WoosmapClient: Low-level API client
- Configuration: Immutable, validated client settings

Errors:
- InvalidConfigurationError: Invalid settings
- InvalidPremierConfigurationException: Unusable signing secret
- InvalidResponseException: Failed query
- ZeroResultsException: Query matched nothing
"""

from .woosmap_client import WoosmapClient
from .woosmap_config import AuthenticationMode, Configuration, ServiceName
from .woosmap_distance_matrix import DistanceMatrix
from .woosmap_errors import (
    InvalidConfigurationError,
    InvalidPremierConfigurationException,
    InvalidResponseException,
    WoosmapError,
    ZeroResultsException,
)
from .woosmap_location import find_locations
from .woosmap_models import Distance, Duration, LatLng, Leg, Location, Place, PlaceDetails
from .woosmap_places import find_place_details, find_places
from .woosmap_result import Result
from .woosmap_route import Route
from .woosmap_service import WoosMap
from .woosmap_signing import sign_url

__all__ = [
    # Main classes
    "WoosMap",
    "WoosmapClient",
    "Configuration",
    "AuthenticationMode",
    "ServiceName",
    "Result",
    "sign_url",

    # Mappers and values
    "Route",
    "DistanceMatrix",
    "find_places",
    "find_place_details",
    "find_locations",
    "Distance",
    "Duration",
    "LatLng",
    "Leg",
    "Location",
    "Place",
    "PlaceDetails",

    # Errors
    "WoosmapError",
    "InvalidConfigurationError",
    "InvalidPremierConfigurationException",
    "InvalidResponseException",
    "ZeroResultsException",
]

# Version info
__version__ = "1.0.0"
