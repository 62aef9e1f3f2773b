"""Full-body scan: coarse grid followed by adaptive refinement."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

from bodies.terrain import CountingTerrain
from elevation.grid import sample_coarse_grid
from elevation.refiner import find_highest
from shared.constants import FILTER_SIZE, INITIAL_SCAN_POINTS, SMALLEST_INCREMENT_DEG

if TYPE_CHECKING:
    from bodies.protocols import TerrainProvider
    from elevation.surface_point import SurfacePoint

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScanResult:
    """Highest point found plus the cost of finding it."""

    point: SurfacePoint
    sample_count: int
    elapsed_ms: float


def scan_for_max_elevation(
    terrain: TerrainProvider,
    *,
    initial_scan_points: int = INITIAL_SCAN_POINTS,
    filter_size: int = FILTER_SIZE,
    smallest_increment: float = SMALLEST_INCREMENT_DEG,
    label: str = 'body',
) -> ScanResult:
    """Run the expensive scan for the highest point of one body."""
    start = time.perf_counter()
    counter = CountingTerrain(terrain)

    samples, increment = sample_coarse_grid(counter, initial_scan_points)
    highest = find_highest(
        counter,
        samples,
        increment,
        filter_size=filter_size,
        smallest_increment=smallest_increment,
    )

    elapsed_ms = (time.perf_counter() - start) * 1000.0
    logger.info(
        'Scanned highest elevation on %s in %d ms (%d samples): %d m at latitude=%s, longitude=%s',
        label,
        elapsed_ms,
        counter.calls,
        highest.altitude,
        highest.latitude,
        highest.longitude,
    )
    return ScanResult(highest, counter.calls, elapsed_ms)
