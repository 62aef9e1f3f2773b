"""Precompute scheduling: body priority order and the time-boxed driver."""
from scheduling.precompute import PrecomputeDriver, PrecomputeReport
from scheduling.priority import COMPARISONS, PlanetComparer, sort_bodies

__all__ = [
    'COMPARISONS',
    'PlanetComparer',
    'PrecomputeDriver',
    'PrecomputeReport',
    'sort_bodies',
]
