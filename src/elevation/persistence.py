"""Versioned persistence of the elevation cache.

A persisted block is one version stamp entry followed by
``elevation:<body-name> = "<altitude>, <latitude>, <longitude>"`` entries.
The stamp identifies the scanning logic that produced the data; a block with
a missing or different stamp is ignored as a whole, so the peaks get
recomputed on demand instead of silently persisting stale values.
"""

from __future__ import annotations

import logging
import zlib
from typing import TYPE_CHECKING

from domain.models import ScannerSettings
from elevation.surface_point import SurfacePoint, SurfacePointFormatError
from shared.constants import (
    CACHE_VERSION_KEY,
    ELEVATION_PREFIX,
    REFINE_LONGITUDE_SUBSTEP,
    REFINE_SHRINK_FACTOR,
    SCAN_ALGORITHM_REVISION,
)

if TYPE_CHECKING:
    from elevation.cache import ElevationCache
    from elevation.store import KeyValueStore

logger = logging.getLogger(__name__)


def compute_version_stamp(settings: ScannerSettings | None = None) -> int:
    """Stamp of the current scanning logic.

    Covers the algorithm revision and every parameter that changes the
    result of a scan, so a settings change invalidates persisted peaks too.
    """
    s = settings or ScannerSettings()
    signature = '|'.join(
        repr(v)
        for v in (
            SCAN_ALGORITHM_REVISION,
            s.initial_scan_points,
            s.filter_size,
            float(s.smallest_increment_deg),
            REFINE_SHRINK_FACTOR,
            REFINE_LONGITUDE_SUBSTEP,
        )
    )
    return zlib.crc32(signature.encode('utf-8'))


def _parse_stamp(raw: str | None) -> int | None:
    if raw is None:
        return None
    try:
        return int(str(raw).strip())
    except ValueError:
        logger.warning('Unreadable cache version stamp: %r', raw)
        return None


def load_cache(store: KeyValueStore, cache: ElevationCache) -> int:
    """Replace the cache contents with the persisted block, if it is current.

    Returns:
        Number of entries loaded.
    """
    cache.clear()
    current = compute_version_stamp(cache.settings)
    raw = store.get_value(CACHE_VERSION_KEY)
    if _parse_stamp(raw) != current:
        if raw is None:
            logger.info('No previous cached data found')
        else:
            logger.info(
                'Ignoring cached data with stamp %s (current = %s)',
                raw,
                current,
            )
        return 0

    logger.info('Read cache version stamp: %s', current)
    loaded = 0
    for name, value in store.values():
        if not name.startswith(ELEVATION_PREFIX):
            continue
        body_name = name[len(ELEVATION_PREFIX):]
        try:
            point = SurfacePoint.parse(value)
        except SurfacePointFormatError as e:
            logger.warning('Skipping cached max elevation of %s: %s', body_name, e)
            continue
        if cache.put(body_name, point):
            loaded += 1
            logger.debug('Read max elevation of %s: %s', body_name, point)
        else:
            logger.warning('Duplicate cached max elevation of %s ignored', body_name)
    logger.info('Loaded %d cached max elevations', loaded)
    return loaded


def save_cache(cache: ElevationCache, store: KeyValueStore) -> int:
    """Write the cache to the store, alphabetically by body name.

    An empty cache writes nothing at all, not even the stamp.

    Returns:
        Number of entries written.
    """
    entries = cache.items()
    if not entries:
        return 0

    stamp = compute_version_stamp(cache.settings)
    logger.info('Writing cache version stamp: %s', stamp)
    store.add_value(CACHE_VERSION_KEY, stamp)
    for body_name, point in entries:
        logger.debug('Write max elevation of %s: %s', body_name, point)
        store.add_value(ELEVATION_PREFIX + body_name, point.format())
    return len(entries)
