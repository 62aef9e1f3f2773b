"""Terrain providers.

GaussianHillsTerrain is a deterministic analytic surface built from a handful
of Gaussian hills (negative heights give basins). It stands in for a real
height map when running from a catalog file or in tests.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Sequence

    from bodies.protocols import TerrainProvider


@dataclass(frozen=True)
class Hill:
    """Single Gaussian feature on a sphere (degrees / metres)."""

    latitude: float
    longitude: float
    height: float
    width_deg: float


class GaussianHillsTerrain:
    """Sum of Gaussian hills over great-circle distance, plus a base level."""

    def __init__(self, hills: Sequence[Hill], base_altitude: float = 0.0) -> None:
        self.hills = tuple(hills)
        self.base_altitude = float(base_altitude)
        self._lat = np.radians([h.latitude for h in self.hills])
        self._lon = np.radians([h.longitude for h in self.hills])
        self._height = np.array([h.height for h in self.hills], dtype=np.float64)
        self._width = np.radians([h.width_deg for h in self.hills])

    def height(self, latitude: float, longitude: float) -> float:
        if not self.hills:
            return self.base_altitude
        lat = math.radians(latitude)
        lon = math.radians(longitude)
        # Haversine distance to every hill centre (radians)
        sin_dlat = np.sin((self._lat - lat) * 0.5)
        sin_dlon = np.sin((self._lon - lon) * 0.5)
        a = sin_dlat**2 + math.cos(lat) * np.cos(self._lat) * sin_dlon**2
        dist = 2.0 * np.arcsin(np.sqrt(np.clip(a, 0.0, 1.0)))
        bumps = self._height * np.exp(-((dist / self._width) ** 2))
        return self.base_altitude + float(bumps.sum())


class CountingTerrain:
    """Wraps a terrain provider and counts height queries."""

    def __init__(self, inner: TerrainProvider) -> None:
        self.inner = inner
        self.calls = 0

    def height(self, latitude: float, longitude: float) -> float:
        self.calls += 1
        return self.inner.height(latitude, longitude)
