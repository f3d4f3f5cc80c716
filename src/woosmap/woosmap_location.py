"""
Address geocoding.
"""

from typing import List

from ..config.logger_module import log_info
from .woosmap_client import WoosmapClient
from .woosmap_config import ServiceName
from .woosmap_models import Location


def find_locations(client: WoosmapClient, address: str, language: str) -> List[Location]:
    """
    Geocode an address.

    Args:
        client: API client
        address: Address or place name to look up
        language: Language of the formatted addresses

    Returns:
        One Location per match, in service order

    Raises:
        ZeroResultsException: If the address could not be geocoded
        InvalidResponseException: On any other failure
    """
    result = client.query(ServiceName.GEOCODE, {"address": address, "language": language})
    locations = [Location.from_payload(item) for item in result.get("results") or []]
    log_info(f"Geocoded '{address}' to {len(locations)} locations")
    return locations
