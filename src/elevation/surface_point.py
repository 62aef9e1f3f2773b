"""Immutable surface coordinate with its terrain altitude."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bodies.protocols import TerrainProvider


class SurfacePointFormatError(ValueError):
    """Raised when persisted surface point text cannot be parsed."""


@dataclass(frozen=True)
class SurfacePoint:
    """A point on a body's surface.

    Latitude and longitude are in degrees, altitude in metres.
    """

    latitude: float
    longitude: float
    altitude: float

    @classmethod
    def at(cls, terrain: TerrainProvider, latitude: float, longitude: float) -> SurfacePoint:
        """Query the terrain and build the point at the given coordinates."""
        return cls(latitude, longitude, float(terrain.height(latitude, longitude)))

    @classmethod
    def parse(cls, text: str) -> SurfacePoint:
        """Parse the ``"altitude, latitude, longitude"`` form produced by format()."""
        parts = str(text).split(',')
        if len(parts) != 3:
            msg = f'Invalid surface point format (arg count): {text!r}'
            raise SurfacePointFormatError(msg)
        try:
            altitude, latitude, longitude = (float(p.strip()) for p in parts)
        except ValueError as e:
            msg = f'Invalid surface point number: {text!r}'
            raise SurfacePointFormatError(msg) from e
        if not all(math.isfinite(v) for v in (altitude, latitude, longitude)):
            msg = f'Non-finite surface point value: {text!r}'
            raise SurfacePointFormatError(msg)
        return cls(latitude, longitude, altitude)

    def format(self) -> str:
        """Text form used in save files; repr() of a float round-trips exactly."""
        return f'{float(self.altitude)!r}, {float(self.latitude)!r}, {float(self.longitude)!r}'

    def __str__(self) -> str:
        return self.format()
