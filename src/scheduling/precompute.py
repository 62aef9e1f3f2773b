"""Time-boxed precomputation of body peaks in priority order.

Every body is handed to the cache's get-or-compute path, highest priority
first. Bodies cached earlier (by a prior run or during play) return at once,
so each run spends its budget on bodies that are still missing and repeated
runs converge on a fully populated cache.

The budget is checked between bodies only: a scan that has started always
runs to completion.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

from scheduling.priority import sort_bodies
from shared.constants import LOG_MEMORY_AFTER_PRECOMPUTE
from shared.diagnostics import get_memory_info, log_memory_usage

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from bodies.protocols import Body
    from elevation.cache import ElevationCache

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PrecomputeReport:
    """Outcome of one precompute run."""

    done: int
    total: int
    elapsed_ms: float
    budget_exhausted: bool

    @property
    def percent_done(self) -> int:
        if self.total == 0:
            return 100
        return int(100.0 * self.done / self.total)


class PrecomputeDriver:
    """Walks bodies in priority order filling the elevation cache.

    Usage:
        driver = PrecomputeDriver(cache, bodies)
        report = driver.run(4000)  # at most ~4 s plus the scan in progress
    """

    def __init__(
        self,
        cache: ElevationCache,
        bodies: Iterable[Body],
        *,
        home: Body | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the driver.

        Args:
            cache: Elevation cache to fill.
            bodies: Every body of the system; bodies without a surface are skipped.
            home: Home body; looked up from ``is_home_world`` when omitted.
            clock: Seconds-based monotonic clock.
        """
        self.cache = cache
        self.bodies = list(bodies)
        self.home = home
        self._clock = clock

    def scheduled_bodies(self) -> list[Body]:
        """Solid-surface bodies in the order they will be processed."""
        solid = [b for b in self.bodies if b.has_solid_surface]
        return sort_bodies(solid, self.home)

    def run(
        self,
        budget_ms: float | None = None,
        on_body_done: Callable[[int, int, str], None] | None = None,
    ) -> PrecomputeReport:
        """Precompute until every body is done or the budget is spent.

        Args:
            budget_ms: Time budget in milliseconds; None or negative means
                run to completion.
            on_body_done: Optional callback (done, total, body name) after
                each body.

        Returns:
            PrecomputeReport with the number of bodies processed.
        """
        bodies = self.scheduled_bodies()
        total = len(bodies)
        unbounded = budget_ms is None or budget_ms < 0
        if unbounded:
            logger.info('Pre-calculating maximum elevations for all %d bodies', total)
        else:
            logger.info(
                'Pre-calculating maximum elevations for up to %s ms (%d total bodies)',
                budget_ms,
                total,
            )

        baseline = get_memory_info() if LOG_MEMORY_AFTER_PRECOMPUTE else None
        start = self._clock()
        done = 0
        exhausted = False
        for body in bodies:
            self.cache.get_or_compute(body)
            done += 1
            if on_body_done is not None:
                on_body_done(done, total, body.name)
            elapsed_ms = (self._clock() - start) * 1000.0
            if not unbounded and elapsed_ms > budget_ms and done < total:
                exhausted = True
                break

        report = PrecomputeReport(
            done=done,
            total=total,
            elapsed_ms=(self._clock() - start) * 1000.0,
            budget_exhausted=exhausted,
        )
        logger.info(
            'Elapsed time %d ms, %d%% of bodies have been calculated (%d/%d)',
            report.elapsed_ms,
            report.percent_done,
            report.done,
            report.total,
        )
        if LOG_MEMORY_AFTER_PRECOMPUTE:
            log_memory_usage('after precompute', baseline=baseline)
        return report
