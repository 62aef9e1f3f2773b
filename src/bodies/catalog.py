"""Body catalog loaded from a TOML description of a planetary system.

Example::

    [[bodies]]
    name = "Sun"
    solid_surface = false

    [[bodies]]
    name = "Kerbin"
    parent = "Sun"
    semi_major_axis = 13599840256.0
    home = true

    [[bodies.hills]]
    latitude = 61.6
    longitude = 46.4
    height = 6764.0
    width_deg = 2.5
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

import tomlkit
from pydantic import ValidationError

from bodies.terrain import GaussianHillsTerrain, Hill
from domain.models import BodyDefinition

if TYPE_CHECKING:
    from bodies.protocols import TerrainProvider

logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """Raised when a catalog file cannot be turned into a body system."""


@dataclass(eq=False)
class CatalogBody:
    """Body backed by a catalog entry. Satisfies bodies.protocols.Body."""

    name: str
    has_solid_surface: bool = True
    terrain: TerrainProvider | None = None
    reference_body: CatalogBody | None = field(default=None, repr=False)
    semi_major_axis: float | None = None
    is_home_world: bool = False


def build_bodies(definitions: list[BodyDefinition]) -> list[CatalogBody]:
    """Create linked bodies from validated definitions, keeping file order."""
    bodies: dict[str, CatalogBody] = {}
    for d in definitions:
        if d.name in bodies:
            msg = f'Duplicate body name: {d.name}'
            raise CatalogError(msg)
        terrain = None
        if d.solid_surface:
            terrain = GaussianHillsTerrain(
                [Hill(h.latitude, h.longitude, h.height, h.width_deg) for h in d.hills],
                base_altitude=d.base_altitude,
            )
        bodies[d.name] = CatalogBody(
            name=d.name,
            has_solid_surface=d.solid_surface,
            terrain=terrain,
            semi_major_axis=d.semi_major_axis,
            is_home_world=d.home,
        )

    for d in definitions:
        if d.parent is None:
            continue
        parent = bodies.get(d.parent)
        if parent is None:
            msg = f'Body {d.name} orbits unknown body {d.parent}'
            raise CatalogError(msg)
        bodies[d.name].reference_body = parent

    homes = [b.name for b in bodies.values() if b.is_home_world]
    if len(homes) > 1:
        msg = f'More than one home body: {", ".join(homes)}'
        raise CatalogError(msg)
    return list(bodies.values())


def load_catalog(path: str | Path) -> list[CatalogBody]:
    """Load and validate a body catalog TOML file."""
    path = Path(path)
    if not path.exists():
        msg = f'Catalog not found: {path}'
        raise FileNotFoundError(msg)
    data = tomlkit.parse(path.read_text(encoding='utf-8')).unwrap()
    raw_bodies = data.get('bodies', [])
    try:
        definitions = [BodyDefinition.model_validate(b) for b in raw_bodies]
    except ValidationError as e:
        msg = f'Invalid catalog {path}: {e}'
        raise CatalogError(msg) from e
    bodies = build_bodies(definitions)
    logger.info('Loaded %d bodies from %s', len(bodies), path)
    return bodies
