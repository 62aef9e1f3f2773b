"""Order in which bodies get their expensive data precomputed.

The bodies the player is most likely to look at come first: the home body,
then its moons, then its siblings, then everything else from the star
outwards. The order only affects scheduling, never results.

Each comparison below returns <0, 0 or >0 like a classic ``cmp``; the chain
is evaluated in order and the first non-zero result decides.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import TYPE_CHECKING

from bodies.hierarchy import (
    find_home_body,
    hierarchy_level,
    is_homeworld_sibling,
    semi_major_axis,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from bodies.protocols import Body

    Comparison = Callable[[Body, Body, 'Body | None'], int]


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def _is_home(body: Body | None, home: Body | None) -> bool:
    return home is not None and body is home


def homeworld_comparison(b1: Body, b2: Body, home: Body | None) -> int:
    """Home body first."""
    return _cmp(_is_home(b2, home), _is_home(b1, home))


def homeworld_moon_comparison(b1: Body, b2: Body, home: Body | None) -> int:
    """Moons of the home body next."""
    return _cmp(_is_home(b2.reference_body, home), _is_home(b1.reference_body, home))


def sibling_comparison(b1: Body, b2: Body, home: Body | None) -> int:
    """Bodies orbiting the same primary as the home body next."""
    return _cmp(is_homeworld_sibling(b2, home), is_homeworld_sibling(b1, home))


def hierarchy_comparison(b1: Body, b2: Body, home: Body | None) -> int:
    """Planets before moons."""
    return _cmp(hierarchy_level(b1), hierarchy_level(b2))


def moon_parent_comparison(b1: Body, b2: Body, home: Body | None) -> int:
    """Moons of inner planets before moons of outer ones."""
    return _cmp(semi_major_axis(b1.reference_body), semi_major_axis(b2.reference_body))


def sma_comparison(b1: Body, b2: Body, home: Body | None) -> int:
    """Smaller orbits first."""
    return _cmp(semi_major_axis(b1), semi_major_axis(b2))


def name_comparison(b1: Body, b2: Body, home: Body | None) -> int:
    """Alphabetical by name."""
    return _cmp(b1.name, b2.name)


# In descending order of importance
COMPARISONS: tuple[Comparison, ...] = (
    homeworld_comparison,
    homeworld_moon_comparison,
    sibling_comparison,
    hierarchy_comparison,
    moon_parent_comparison,
    sma_comparison,
    name_comparison,
)


class PlanetComparer:
    """Total order over bodies built from a chain of comparisons.

    ``home`` is used as given; with None the home rules never fire. Use
    sort_bodies() to fall back to the body flagged ``is_home_world``.
    """

    def __init__(
        self,
        home: Body | None = None,
        comparisons: tuple[Comparison, ...] = COMPARISONS,
    ) -> None:
        self.home = home
        self.comparisons = comparisons

    def compare(self, b1: Body, b2: Body) -> int:
        for comparison in self.comparisons:
            result = comparison(b1, b2, self.home)
            if result != 0:
                return result
        return 0

    def sort(self, bodies: Iterable[Body]) -> list[Body]:
        return sorted(bodies, key=cmp_to_key(self.compare))


def sort_bodies(bodies: Iterable[Body], home: Body | None = None) -> list[Body]:
    """Bodies in precompute priority order.

    An explicit ``home`` wins over the ``is_home_world`` flags; without one
    the flagged body is used.
    """
    bodies = list(bodies)
    if home is None:
        home = find_home_body(bodies)
    return PlanetComparer(home).sort(bodies)
