"""
High-level entry point for the woosmap module.

Wraps one configuration snapshot and one API client, and exposes the
routing, places, geocoding and distance matrix operations with the
configured default language filled in.
"""

from typing import Any, Dict, List, Optional

import requests

from ..config.logger_module import log_info
from .woosmap_client import WoosmapClient
from .woosmap_config import Configuration
from .woosmap_distance_matrix import DistanceMatrix
from .woosmap_errors import ZeroResultsException
from .woosmap_location import find_locations
from .woosmap_models import Location, Place, PlaceDetails
from .woosmap_places import find_place_details, find_places
from .woosmap_route import Route


class WoosMap:
    """
    Facade over the Woosmap services.

    Instances are tied to one Configuration. Use configure() to get a new
    facade on changed settings; the current one is never mutated.
    """

    def __init__(self,
                 config: Configuration,
                 client: Optional[WoosmapClient] = None,
                 session: Optional[requests.Session] = None):
        """
        Initialize the facade.

        Args:
            config: Validated configuration
            client: API client (built from config if omitted)
            session: HTTP session handed to a newly built client
        """
        self.config = config
        self.client = client or WoosmapClient(config, session=session)

        log_info(f"WoosMap initialized (default_language={config.default_language})")

    @classmethod
    def from_env(cls, env_path: Optional[str] = None, **overrides: Any) -> "WoosMap":
        """Build a facade from WOOSMAP_* environment variables."""
        return cls(Configuration.from_env(env_path, **overrides))

    def configure(self, **changes: Any) -> "WoosMap":
        """Return a facade on a re-validated copy of the configuration, sharing this one's session."""
        return WoosMap(self.config.configure(**changes), session=self.client.session)

    def options(self) -> Dict[str, Any]:
        return self.config.options()

    def _options_with_defaults(self, options: Dict[str, Any]) -> Dict[str, Any]:
        merged = {"language": self.config.default_language}
        merged.update(options)
        return merged

    def route(self, origin: str, destination: str, **options: Any) -> Route:
        """Directions from origin to destination."""
        return Route(self.client, origin, destination, self._options_with_defaults(options))

    def distance(self, origin: str, destination: str, **options: Any) -> str:
        """Display text of the route distance, e.g. "104 km"."""
        return self.route(origin, destination, **options).distance.text

    def duration(self, origin: str, destination: str, **options: Any) -> str:
        """Display text of the route duration, e.g. "1 hour 12 mins"."""
        return self.route(origin, destination, **options).duration.text

    def places(self, keyword: str, language: Optional[str] = None) -> List[Place]:
        return find_places(self.client, keyword, language or self.config.default_language)

    def place(self, place_id: str, language: Optional[str] = None) -> PlaceDetails:
        return find_place_details(self.client, place_id, language or self.config.default_language)

    def distance_matrix(self, origin: str, destination: str, **options: Any) -> DistanceMatrix:
        return DistanceMatrix(self.client, origin, destination, self._options_with_defaults(options))

    def geocode(self, address: str, language: Optional[str] = None) -> List[Location]:
        """
        Geocode an address.

        Unlike find_locations, an address the service cannot geocode yields
        an empty list instead of ZeroResultsException.
        """
        try:
            return find_locations(self.client, address, language or self.config.default_language)
        except ZeroResultsException:
            log_info(f"No locations found for '{address}'")
            return []
