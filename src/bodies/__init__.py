"""Celestial body capabilities, hierarchy helpers and catalog loading."""
from bodies.catalog import CatalogBody, CatalogError, build_bodies, load_catalog
from bodies.hierarchy import (
    find_home_body,
    hierarchy_level,
    is_homeworld_sibling,
    semi_major_axis,
)
from bodies.protocols import Body, TerrainProvider
from bodies.terrain import CountingTerrain, GaussianHillsTerrain, Hill

__all__ = [
    'Body',
    'CatalogBody',
    'CatalogError',
    'CountingTerrain',
    'GaussianHillsTerrain',
    'Hill',
    'TerrainProvider',
    'build_bodies',
    'find_home_body',
    'hierarchy_level',
    'is_homeworld_sibling',
    'load_catalog',
    'semi_major_axis',
]
