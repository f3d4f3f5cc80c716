"""
Single-cell distance matrix lookups.
"""

from functools import cached_property
from typing import Any, Dict, Optional

from .woosmap_client import STATUS_OK, STATUS_ZERO_RESULTS, WoosmapClient
from .woosmap_config import ServiceName
from .woosmap_errors import InvalidResponseException, ZeroResultsException
from .woosmap_models import Distance, Duration
from .woosmap_result import Result


class DistanceMatrix:
    """
    Distance and travel time between one origin and one destination.

    Only the first cell of the matrix is read. The query runs once, on first
    access; a failed query is re-raised on every later access.
    """

    def __init__(self,
                 client: WoosmapClient,
                 origin: str,
                 destination: str,
                 options: Optional[Dict[str, Any]] = None):
        self.origin = origin
        self.destination = destination
        self.options = dict(options or {})
        self._client = client
        self._error: Optional[Exception] = None

    @cached_property
    def _result(self) -> Result:
        if self._error is not None:
            raise self._error
        args = {"origins": self.origin, "destinations": self.destination}
        args.update(self.options)
        try:
            return self._client.query(ServiceName.DISTANCE_MATRIX, args)
        except InvalidResponseException as e:
            self._error = e
            raise

    @cached_property
    def _element(self) -> Dict[str, Any]:
        element = self._result.dig("rows", 0, "elements", 0)
        if not isinstance(element, dict) or not element:
            raise InvalidResponseException("Distance matrix response contains no elements")

        status = element.get("status", STATUS_OK)
        if status in (STATUS_ZERO_RESULTS, "NOT_FOUND"):
            raise ZeroResultsException(f"No distance matrix result: {status}")
        if status != STATUS_OK:
            raise InvalidResponseException(f"Distance matrix element status: {status}")
        return element

    @cached_property
    def _distance(self) -> Distance:
        try:
            return Distance(**self._element["distance"])
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise InvalidResponseException(f"Malformed distance matrix distance: {e!r}")

    @cached_property
    def _duration(self) -> Duration:
        try:
            return Duration(**self._element["duration"])
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise InvalidResponseException(f"Malformed distance matrix duration: {e!r}")

    @property
    def distance(self) -> int:
        """Distance in meters."""
        return self._distance.value

    @property
    def duration(self) -> int:
        """Travel time in seconds."""
        return self._duration.value

    @property
    def distance_text(self) -> str:
        return self._distance.text

    @property
    def duration_text(self) -> str:
        return self._duration.text

    @property
    def origin_address(self) -> Optional[str]:
        return self._result.dig("origin_addresses", 0)

    @property
    def destination_address(self) -> Optional[str]:
        return self._result.dig("destination_addresses", 0)

    def __repr__(self) -> str:
        return f"DistanceMatrix({self.origin!r} -> {self.destination!r})"
