"""Coarse-to-fine search for the highest sampled point.

Starting from the best coarse-grid samples, every round samples a small
sub-grid around each retained candidate with an eight times finer latitude
step, keeps half as many of the best results, and repeats until the step is
below SMALLEST_INCREMENT_DEG. Retained candidates stay in the pool of the next
round, so the best altitude never decreases from one round to the next.

Ties between equal altitudes are resolved by the stable descending sort: the
candidate sampled first wins.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from operator import attrgetter
from typing import TYPE_CHECKING

from elevation.surface_point import SurfacePoint
from shared.constants import (
    FILTER_SIZE,
    MAX_REFINE_ROUNDS,
    REFINE_LONGITUDE_SUBSTEP,
    REFINE_SHRINK_FACTOR,
    SMALLEST_INCREMENT_DEG,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from bodies.protocols import TerrainProvider

logger = logging.getLogger(__name__)

_by_altitude = attrgetter('altitude')


@dataclass(frozen=True)
class RefinementRound:
    """Candidate pool after one round (round 0 is the filtered input)."""

    index: int
    increment: float
    candidates: tuple[SurfacePoint, ...]
    samples: int

    @property
    def best(self) -> SurfacePoint:
        return self.candidates[0]


def top_candidates(points: Iterable[SurfacePoint], keep: int) -> list[SurfacePoint]:
    """Best ``keep`` points by altitude, highest first."""
    return sorted(points, key=_by_altitude, reverse=True)[: max(1, keep)]


def _wrap_longitude(longitude: float) -> float:
    return (longitude + 180.0) % 360.0 - 180.0


def sample_neighbourhood(
    terrain: TerrainProvider,
    center: SurfacePoint,
    increment: float,
    small_increment: float,
) -> list[SurfacePoint]:
    """
    Sample a sub-grid of +-increment/2 around a candidate.

    Latitude steps by ``small_increment``; longitude spans
    ``increment / cos(latitude)`` and steps by a tenth of that. Candidates at
    exactly a pole have no defined longitude span and produce no samples.
    Rows that would leave [-90, 90] are skipped.
    """
    if abs(center.latitude) >= 90.0:
        return []
    lon_increment = min(360.0, increment / math.cos(math.radians(center.latitude)))
    lon_step = lon_increment * REFINE_LONGITUDE_SUBSTEP
    lat_steps = round(increment / small_increment)
    lon_steps = round(1.0 / REFINE_LONGITUDE_SUBSTEP)

    lat0 = center.latitude - 0.5 * increment
    lon0 = center.longitude - 0.5 * lon_increment
    samples: list[SurfacePoint] = []
    for i in range(lat_steps + 1):
        latitude = lat0 + i * small_increment
        if abs(latitude) > 90.0:
            continue
        for j in range(lon_steps + 1):
            longitude = _wrap_longitude(lon0 + j * lon_step)
            samples.append(SurfacePoint.at(terrain, latitude, longitude))
    return samples


def iter_refinement_rounds(
    terrain: TerrainProvider,
    candidates: Iterable[SurfacePoint],
    increment: float,
    *,
    filter_size: int = FILTER_SIZE,
    smallest_increment: float = SMALLEST_INCREMENT_DEG,
    max_rounds: int = MAX_REFINE_ROUNDS,
) -> Iterator[RefinementRound]:
    """Yield the candidate pool of every refinement round, coarse to fine."""
    keep = max(1, filter_size)
    pool = top_candidates(candidates, keep)
    if not pool:
        msg = 'Refinement needs at least one candidate'
        raise ValueError(msg)

    index = 0
    yield RefinementRound(index, increment, tuple(pool), 0)

    while increment > smallest_increment:
        if index >= max_rounds:
            logger.warning(
                'Refinement stopped after %d rounds at increment %.6g deg',
                index,
                increment,
            )
            return
        small_increment = REFINE_SHRINK_FACTOR * increment
        fresh: list[SurfacePoint] = []
        for candidate in pool:
            fresh.extend(
                sample_neighbourhood(terrain, candidate, increment, small_increment)
            )
        keep = max(1, keep // 2)
        pool = top_candidates([*pool, *fresh], keep)
        increment = small_increment
        index += 1
        logger.debug(
            'Round %d: %d new samples, keeping %d, increment %.6g deg',
            index,
            len(fresh),
            len(pool),
            increment,
        )
        yield RefinementRound(index, increment, tuple(pool), len(fresh))


def find_highest(
    terrain: TerrainProvider,
    candidates: Iterable[SurfacePoint],
    increment: float,
    *,
    filter_size: int = FILTER_SIZE,
    smallest_increment: float = SMALLEST_INCREMENT_DEG,
    max_rounds: int = MAX_REFINE_ROUNDS,
) -> SurfacePoint:
    """Refine candidates down to the smallest increment and return the best point."""
    last = None
    for last in iter_refinement_rounds(
        terrain,
        candidates,
        increment,
        filter_size=filter_size,
        smallest_increment=smallest_increment,
        max_rounds=max_rounds,
    ):
        pass
    return last.best
