from __future__ import annotations

import math
from typing import TYPE_CHECKING

from elevation.surface_point import SurfacePoint
from shared.constants import INITIAL_SCAN_POINTS

if TYPE_CHECKING:
    from bodies.protocols import TerrainProvider


def coarse_increment(sample_count: int) -> float:
    """Latitude spacing (degrees) of a whole-sphere grid of about N points."""
    if sample_count < 1:
        msg = f'sample_count must be at least 1, got {sample_count}'
        raise ValueError(msg)
    return 180.0 / math.sqrt(sample_count)


def sample_coarse_grid(
    terrain: TerrainProvider,
    sample_count: int = INITIAL_SCAN_POINTS,
) -> tuple[list[SurfacePoint], float]:
    """
    Sample the whole sphere on a quasi-uniform grid.

    Rows are spaced ``180 / sqrt(N)`` degrees apart; within a row the
    longitude step widens by ``1 / cos(latitude)`` so every sample covers
    roughly the same area. Both poles are sampled exactly once; no interior
    row reaches ``|latitude| == 90``.

    Args:
        terrain: Height query capability of the body.
        sample_count: Approximate total number of samples (N >= 1).

    Returns:
        (points, increment): the samples and the latitude increment used,
        which seeds the first refinement round.

    """
    increment = coarse_increment(sample_count)
    points = [SurfacePoint.at(terrain, 90.0, 0.0)]

    row = 1
    latitude = row * increment - 90.0
    while latitude < 90.0 - increment:
        lon_increment = increment / math.cos(math.radians(latitude))
        col = 0
        longitude = -180.0
        while longitude < 180.0:
            points.append(SurfacePoint.at(terrain, latitude, longitude))
            col += 1
            longitude = -180.0 + col * lon_increment
        row += 1
        latitude = row * increment - 90.0

    points.append(SurfacePoint.at(terrain, -90.0, 0.0))
    return points, increment
