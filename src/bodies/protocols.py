"""Narrow capabilities the scanner needs from a celestial body.

Anything satisfying these protocols can be scanned and scheduled: a live game
body adapter, a catalog body with synthetic terrain, or a test double.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class TerrainProvider(Protocol):
    """Terrain-height query for a single body."""

    def height(self, latitude: float, longitude: float) -> float:
        """Return the terrain altitude (m) at the given coordinates (degrees)."""
        ...


@runtime_checkable
class Body(Protocol):
    """Identity, surface and hierarchy metadata of a celestial body.

    ``reference_body`` is the body this one orbits; the central star has
    ``None`` (or itself). ``semi_major_axis`` is ``None`` for bodies without
    an orbit.
    """

    @property
    def name(self) -> str: ...

    @property
    def has_solid_surface(self) -> bool: ...

    @property
    def terrain(self) -> TerrainProvider | None: ...

    @property
    def reference_body(self) -> Body | None: ...

    @property
    def semi_major_axis(self) -> float | None: ...

    @property
    def is_home_world(self) -> bool: ...
