"""Human-readable export of every cached peak."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from shared.constants import APP_NAME, DUMP_NODE_NAME

if TYPE_CHECKING:
    from elevation.cache import ElevationCache

logger = logging.getLogger(__name__)


def render_dump(cache: ElevationCache, file_name: str) -> str:
    """Render the dump file text: header comments, then one block per body."""
    entries = cache.items()
    lines = [
        f'// {file_name}',
        '// This file is auto-generated and will be overwritten. Do not hand-edit.',
        '//',
        f'// Highest points of celestial bodies, as calculated by {APP_NAME}',
        '//',
        f'// {len(entries)} bodies present in file',
    ]
    for name, point in entries:
        lines += [
            '',
            DUMP_NODE_NAME,
            '{',
            f'    name = {name}',
            f'    elevation = {float(point.altitude)!r}',
            f'    latitude = {float(point.latitude)!r}',
            f'    longitude = {float(point.longitude)!r}',
            '}',
        ]
    return '\n'.join(lines) + '\n'


def write_dump(cache: ElevationCache, path: str | Path) -> int:
    """Overwrite the dump file with the cache contents.

    Returns:
        Number of bodies written.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_dump(cache, path.name), encoding='utf-8')
    count = len(cache)
    logger.info("Wrote %d bodies' data to %s", count, path)
    return count
