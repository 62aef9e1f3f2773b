"""In-memory cache of each body's highest point.

The scan behind a cache miss is expensive (tens of thousands of terrain
queries), so each body is scanned at most once per cache lifetime. Entries
come either from a scan or from a persisted save file (see
elevation.persistence) and are never overwritten afterwards.
"""

from __future__ import annotations

import logging
import math
import threading
from typing import TYPE_CHECKING

from domain.models import ScannerSettings
from elevation.scanner import scan_for_max_elevation

if TYPE_CHECKING:
    from collections.abc import Callable

    from bodies.protocols import Body, TerrainProvider
    from elevation.scanner import ScanResult
    from elevation.surface_point import SurfacePoint

    ScanFunction = Callable[..., ScanResult]

logger = logging.getLogger(__name__)


class ElevationCache:
    """Body name -> highest SurfacePoint, computed lazily.

    get_or_compute() holds a lock for the whole duration of a miss, so two
    threads asking for the same body never scan it twice.

    Usage:
        cache = ElevationCache(settings)
        altitude = cache.get_or_compute(body)  # scans on first call only
    """

    def __init__(
        self,
        settings: ScannerSettings | None = None,
        *,
        scan: ScanFunction | None = None,
    ) -> None:
        """Initialize an empty cache.

        Args:
            settings: Scan parameters. Defaults to ScannerSettings().
            scan: Scan implementation, scan_for_max_elevation by default.
        """
        self.settings = settings or ScannerSettings()
        self._scan = scan or scan_for_max_elevation
        self._points: dict[str, SurfacePoint] = {}
        self._lock = threading.RLock()
        self.scans_performed = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._points)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._points

    def try_get(self, name: str) -> SurfacePoint | None:
        """Cached point for a body name, or None if not computed yet."""
        with self._lock:
            return self._points.get(name)

    def put(self, name: str, point: SurfacePoint) -> bool:
        """Insert a point unless the body already has one.

        Returns:
            True if the point was stored.
        """
        with self._lock:
            if name in self._points:
                return False
            self._points[name] = point
            return True

    def items(self) -> list[tuple[str, SurfacePoint]]:
        """Snapshot of all entries, sorted by body name."""
        with self._lock:
            return sorted(self._points.items())

    def clear(self) -> None:
        """Drop every entry (used when persisted data is invalidated)."""
        with self._lock:
            self._points.clear()

    @staticmethod
    def _terrain_of(body: Body) -> TerrainProvider | None:
        if not body.has_solid_surface:
            return None
        return body.terrain

    def get_or_compute_point(self, body: Body) -> SurfacePoint | None:
        """Highest point of the body, scanning it on first request.

        Returns None for bodies without a solid surface or terrain; such
        bodies are never scanned nor cached.
        """
        terrain = self._terrain_of(body)
        if terrain is None:
            return None
        with self._lock:
            point = self._points.get(body.name)
            if point is not None:
                return point
            s = self.settings
            result = self._scan(
                terrain,
                initial_scan_points=s.initial_scan_points,
                filter_size=s.filter_size,
                smallest_increment=s.smallest_increment_deg,
                label=body.name,
            )
            self.scans_performed += 1
            self._points[body.name] = result.point
            logger.debug(
                'Cached max elevation of %s after %d samples in %.0f ms',
                body.name,
                result.sample_count,
                result.elapsed_ms,
            )
            return result.point

    def get_or_compute(self, body: Body) -> float:
        """Altitude of the body's highest point, NaN if it has no surface."""
        point = self.get_or_compute_point(body)
        return math.nan if point is None else point.altitude
