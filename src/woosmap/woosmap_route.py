"""
Directions between two points.
"""

from functools import cached_property
from typing import Any, Dict, List, Optional

from .woosmap_client import WoosmapClient
from .woosmap_config import ServiceName
from .woosmap_errors import InvalidResponseException
from .woosmap_models import Distance, Duration, Leg
from .woosmap_result import Result


class Route:
    """
    The first route the directions service proposes between two points.

    The query is sent on first access to any field and its envelope is kept,
    so repeated access never issues a second request. A failed query is
    remembered and re-raised the same way.
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
        args = {"origin": self.origin, "destination": self.destination}
        args.update(self.options)
        try:
            return self._client.query(ServiceName.DIRECTIONS, args)
        except InvalidResponseException as e:
            self._error = e
            raise

    @cached_property
    def _route(self) -> Dict[str, Any]:
        route = self._result.dig("routes", 0)
        if not isinstance(route, dict) or not route:
            raise InvalidResponseException("Directions response contains no routes")
        return route

    @cached_property
    def legs(self) -> List[Leg]:
        raw_legs = self._route.get("legs") or []
        if not raw_legs:
            raise InvalidResponseException("Directions route contains no legs")
        return [Leg.from_payload(leg) for leg in raw_legs]

    @property
    def distance(self) -> Distance:
        return self.legs[0].distance

    @property
    def duration(self) -> Duration:
        return self.legs[0].duration

    @property
    def summary(self) -> Optional[str]:
        return self._route.get("summary")

    @property
    def start_address(self) -> Optional[str]:
        return self.legs[0].start_address

    @property
    def end_address(self) -> Optional[str]:
        return self.legs[-1].end_address

    def __repr__(self) -> str:
        return f"Route({self.origin!r} -> {self.destination!r})"
