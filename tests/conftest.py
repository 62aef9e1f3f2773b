"""Pytest configuration and fixtures for elevation scanner tests."""

import sys
from pathlib import Path

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

from bodies.catalog import build_bodies  # noqa: E402
from domain.models import BodyDefinition  # noqa: E402


@pytest.fixture
def solar_system():
    """Small system with a home planet, moons, siblings and a gas giant.

    Returns a dict name -> body. Only Sun and Jool lack a solid surface.
    """
    definitions = [
        BodyDefinition(name='Sun', solid_surface=False),
        BodyDefinition(name='Moho', parent='Sun', semi_major_axis=5.0e9),
        BodyDefinition(name='Eve', parent='Sun', semi_major_axis=9.8e9),
        BodyDefinition(name='Gilly', parent='Eve', semi_major_axis=3.1e7),
        BodyDefinition(name='Kerbin', parent='Sun', semi_major_axis=1.36e10, home=True),
        BodyDefinition(name='Mun', parent='Kerbin', semi_major_axis=1.2e7),
        BodyDefinition(name='Minmus', parent='Kerbin', semi_major_axis=4.7e7),
        BodyDefinition(name='Duna', parent='Sun', semi_major_axis=2.07e10),
        BodyDefinition(name='Ike', parent='Duna', semi_major_axis=3.2e6),
        BodyDefinition(name='Jool', parent='Sun', semi_major_axis=6.9e10, solid_surface=False),
        BodyDefinition(name='Laythe', parent='Jool', semi_major_axis=2.7e7),
    ]
    return {b.name: b for b in build_bodies(definitions)}
