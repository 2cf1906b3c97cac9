"""Pytest configuration and shared fixtures."""

import numpy as np
import pytest

from phongrt.core.color import Color
from phongrt.core.light import PointLight
from phongrt.core.matrix import Matrix
from phongrt.core.tuples import point
from phongrt.geometry.sphere import Sphere
from phongrt.geometry.world import World
from phongrt.materials.material import Material


@pytest.fixture
def default_world():
    """
    One white light at (-10, 10, -10), a unit sphere with a greenish
    material and a concentric sphere of radius 0.5.
    """
    world = World()
    world.add_light(PointLight(point(-10.0, 10.0, -10.0), Color(1.0, 1.0, 1.0)))
    world.add_shape(Sphere(material=Material(Color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2)))
    world.add_shape(Sphere(Matrix.scaling(0.5, 0.5, 0.5)))
    return world


@pytest.fixture
def rng():
    """Seeded generator for the property-style tests."""
    return np.random.default_rng(20240101)
