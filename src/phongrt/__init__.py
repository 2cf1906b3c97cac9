"""
phongrt - a CPU ray tracer for spheres and planes lit by point lights with
Phong shading and hard shadows.
"""

from phongrt.camera import Camera, Config
from phongrt.core import (BLACK, WHITE, Color, Matrix, NonInvertibleMatrixError, PointLight,
                          Ray, Tuple, point, vector)
from phongrt.geometry import HitRecord, Intersection, Plane, Shape, Sphere, World, hit
from phongrt.materials import Material, SolidColor, Stripe, Texture
from phongrt.renderer import Canvas

__version__ = "0.1.0"

__all__ = [
    "BLACK",
    "WHITE",
    "Camera",
    "Canvas",
    "Color",
    "Config",
    "HitRecord",
    "Intersection",
    "Material",
    "Matrix",
    "NonInvertibleMatrixError",
    "Plane",
    "PointLight",
    "Ray",
    "Shape",
    "SolidColor",
    "Sphere",
    "Stripe",
    "Texture",
    "Tuple",
    "World",
    "hit",
    "point",
    "vector",
]
