"""
Typed, immutable values projected from Woosmap response payloads.
"""

from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from .woosmap_errors import InvalidResponseException


class FrozenModel(BaseModel):
    """Base for read-only value objects."""

    model_config = ConfigDict(frozen=True)


class Distance(FrozenModel):
    """Distance in meters plus the service's display text."""
    value: int
    text: str = ""


class Duration(FrozenModel):
    """Duration in seconds plus the service's display text."""
    value: int
    text: str = ""


class LatLng(FrozenModel):
    lat: float
    lng: float

    @classmethod
    def from_payload(cls, data: Optional[Dict[str, Any]]) -> Optional["LatLng"]:
        if not data:
            return None
        return cls(lat=data["lat"], lng=data["lng"])


def _malformed(what: str, error: Exception) -> InvalidResponseException:
    return InvalidResponseException(f"Malformed {what} in response: {error!r}")


class Leg(FrozenModel):
    """One leg of a route, between two consecutive waypoints."""

    distance: Distance
    duration: Duration
    start_address: Optional[str] = None
    end_address: Optional[str] = None
    start_location: Optional[LatLng] = None
    end_location: Optional[LatLng] = None

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "Leg":
        try:
            return cls(
                distance=Distance(**data["distance"]),
                duration=Duration(**data["duration"]),
                start_address=data.get("start_address"),
                end_address=data.get("end_address"),
                start_location=LatLng.from_payload(data.get("start_location")),
                end_location=LatLng.from_payload(data.get("end_location")),
            )
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise _malformed("route leg", e)


def highlight(description: str, matches: List[Dict[str, Any]], tag: str = "strong") -> str:
    """
    Wrap each matched substring of a description in an HTML tag.

    Matches are {"offset": int, "length": int} pairs; overlapping or
    out-of-range matches are clipped.
    """
    parts = []
    cursor = 0
    for match in sorted(matches, key=lambda m: m["offset"]):
        start = max(int(match["offset"]), cursor)
        end = min(int(match["offset"]) + int(match["length"]), len(description))
        if end <= start:
            continue
        parts.append(description[cursor:start])
        parts.append(f"<{tag}>{description[start:end]}</{tag}>")
        cursor = end
    parts.append(description[cursor:])
    return "".join(parts)


class Place(FrozenModel):
    """A place suggestion returned by a keyword search."""

    text: str
    html: str
    place_id: Optional[str] = None
    types: Tuple[str, ...] = ()

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "Place":
        try:
            description = data["description"]
            return cls(
                text=description,
                html=highlight(description, data.get("matched_substrings") or []),
                place_id=data.get("place_id"),
                types=tuple(data.get("types") or ()),
            )
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise _malformed("place prediction", e)


def address_components(components: List[Dict[str, Any]]) -> Mapping[str, Tuple[str, ...]]:
    """
    Group address component names by kind.

    A component listed under several types (e.g. locality and political)
    appears under each of them. Names keep document order within a kind.
    The result is read-only.
    """
    grouped: Dict[str, List[str]] = {}
    for component in components:
        for kind in component.get("types") or ():
            grouped.setdefault(kind, []).append(component["long_name"])
    return MappingProxyType({kind: tuple(names) for kind, names in grouped.items()})


class Location(FrozenModel):
    """A geocoded address."""

    address: str
    latitude: float
    longitude: float
    # (kind, names) pairs; exposed as a read-only mapping through components
    component_groups: Tuple[Tuple[str, Tuple[str, ...]], ...] = ()
    types: Tuple[str, ...] = ()
    place_id: Optional[str] = None

    @property
    def components(self) -> Mapping[str, Tuple[str, ...]]:
        return MappingProxyType(dict(self.component_groups))

    @property
    def lat_lng(self) -> Tuple[float, float]:
        return (self.latitude, self.longitude)

    @classmethod
    def _fields_from(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        location = data["geometry"]["location"]
        return {
            "address": data["formatted_address"],
            "latitude": location["lat"],
            "longitude": location["lng"],
            "component_groups": tuple(
                address_components(data.get("address_components") or []).items()
            ),
            "types": tuple(data.get("types") or ()),
            "place_id": data.get("place_id"),
        }

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "Location":
        try:
            return cls(**cls._fields_from(data))
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise _malformed("geocoding result", e)


class PlaceDetails(Location):
    """Details of a single place, resolved from its place id."""

    name: Optional[str] = None

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "PlaceDetails":
        try:
            return cls(name=data.get("name"), **cls._fields_from(data))
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise _malformed("place details", e)
