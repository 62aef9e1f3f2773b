"""Elevation module - highest-point scanning, caching and persistence."""

from .cache import ElevationCache
from .dump import render_dump, write_dump
from .grid import sample_coarse_grid
from .persistence import compute_version_stamp, load_cache, save_cache
from .refiner import find_highest, iter_refinement_rounds
from .scanner import ScanResult, scan_for_max_elevation
from .store import SaveNode, ScenarioFile
from .surface_point import SurfacePoint, SurfacePointFormatError

__all__ = [
    'ElevationCache',
    'SaveNode',
    'ScanResult',
    'ScenarioFile',
    'SurfacePoint',
    'SurfacePointFormatError',
    'compute_version_stamp',
    'find_highest',
    'iter_refinement_rounds',
    'load_cache',
    'render_dump',
    'sample_coarse_grid',
    'save_cache',
    'scan_for_max_elevation',
    'write_dump',
]
