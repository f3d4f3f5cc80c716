"""
Keyword place search and place details lookups.
"""

from typing import List

from ..config.logger_module import log_info
from .woosmap_client import WoosmapClient
from .woosmap_config import ServiceName
from .woosmap_errors import InvalidResponseException
from .woosmap_models import Place, PlaceDetails


def find_places(client: WoosmapClient, keyword: str, language: str) -> List[Place]:
    """
    Search places matching a keyword.

    Args:
        client: API client
        keyword: Free text to complete
        language: Language of the returned descriptions

    Returns:
        Places in the order the service ranked them

    Raises:
        ZeroResultsException: If nothing matches
        InvalidResponseException: On any other failure
    """
    result = client.query(ServiceName.PLACES, {"input": keyword, "language": language})
    places = [Place.from_payload(item) for item in result.get("predictions") or []]
    log_info(f"Found {len(places)} places for '{keyword}'")
    return places


def find_place_details(client: WoosmapClient, place_id: str, language: str) -> PlaceDetails:
    """
    Resolve a place id into its address and coordinates.

    Raises:
        ZeroResultsException: If the id is unknown to the service
        InvalidResponseException: On any other failure
    """
    result = client.query(ServiceName.PLACE_DETAILS, {"place_id": place_id, "language": language})
    details = result.get("result")
    if not details:
        raise InvalidResponseException("Place details response contains no result")
    return PlaceDetails.from_payload(details)
