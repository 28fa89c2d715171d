"""Geolocation contract and side assignment."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Protocol

from cardbattle.config import REFERENCE_LATITUDE
from cardbattle.model.schema import Side

logger = logging.getLogger(__name__)


class LocationUnavailableError(Exception):
    """The location provider could not supply a coordinate."""

    pass


@dataclass(frozen=True)
class Coordinate:
    """Geographic coordinate in decimal degrees."""

    lat: float
    lng: float = 0.0

    def __str__(self) -> str:
        return f"{self.lat:.4f}, {self.lng:.4f}"


def determine_side(coordinate: Coordinate, reference_latitude: float = REFERENCE_LATITUDE) -> Side:
    """East at or above the reference latitude, West below it."""
    return Side.EAST if coordinate.lat >= reference_latitude else Side.WEST


class LocationProvider(Protocol):
    """Supplies the human's coordinate once."""

    def request_location(self) -> Coordinate:
        """Return a coordinate or raise LocationUnavailableError."""
        ...


class FixedLocationProvider:
    """Provider returning a preset coordinate (CLI options, emulators, tests)."""

    def __init__(self, coordinate: Optional[Coordinate] = None):
        self._coordinate = coordinate

    def set_location(self, lat: float, lng: float) -> None:
        self._coordinate = Coordinate(lat=lat, lng=lng)

    def request_location(self) -> Coordinate:
        if self._coordinate is None:
            raise LocationUnavailableError("Location permission not granted.")
        logger.debug(f"Providing fixed location {self._coordinate}")
        return self._coordinate


# Named debug locations offered when real positioning is unavailable
MOCK_LOCATIONS: Dict[str, Coordinate] = {
    "Afeka College": Coordinate(lat=32.113, lng=34.818),
    "Tel Aviv Center": Coordinate(lat=32.080, lng=34.780),
    "North Location": Coordinate(lat=32.820, lng=34.820),
    "South Location": Coordinate(lat=32.810, lng=34.810),
}


def mock_location(name: str) -> Coordinate:
    """Look up a named debug location."""
    try:
        return MOCK_LOCATIONS[name]
    except KeyError:
        raise LocationUnavailableError(
            f"Unknown mock location '{name}'. Choose one of: {', '.join(MOCK_LOCATIONS)}"
        ) from None
