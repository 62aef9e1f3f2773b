"""Orbital hierarchy helpers used for scheduling."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from shared.constants import HIERARCHY_DEPTH_LIMIT

if TYPE_CHECKING:
    from collections.abc import Iterable

    from bodies.protocols import Body

logger = logging.getLogger(__name__)


def is_star(body: Body) -> bool:
    """A body with no parent (or orbiting itself) is the central star."""
    parent = body.reference_body
    return parent is None or parent is body


def semi_major_axis(body: Body | None) -> float:
    """Semi-major axis of the body's orbit, 0.0 when it has none."""
    if body is None or body.semi_major_axis is None:
        return 0.0
    return float(body.semi_major_axis)


def find_home_body(bodies: Iterable[Body]) -> Body | None:
    for body in bodies:
        if body.is_home_world:
            return body
    return None


def is_homeworld_sibling(body: Body, home: Body | None) -> bool:
    """True if the body orbits the same parent as the home body.

    The home body itself and the central star are never siblings.
    """
    if home is None or body is home:
        return False
    if is_star(body) or is_star(home):
        return False
    return body.reference_body is home.reference_body


def hierarchy_level(body: Body) -> int:
    """Orbital depth: 0 for the star, 1 for planets, 2 for their moons, ...

    A reference-body chain deeper than HIERARCHY_DEPTH_LIMIT is a broken
    configuration (most likely a cycle); it is logged and the level reached
    so far is returned.
    """
    level = 0
    current = body
    while not is_star(current):
        level += 1
        if level > HIERARCHY_DEPTH_LIMIT:
            logger.error(
                'Hierarchy overflow for %s, parent %s',
                body.name,
                current.reference_body.name,
            )
            break
        current = current.reference_body
    return level
