from phongrt.geometry.intersection import HitRecord, Intersection, hit, sort_intersections
from phongrt.geometry.plane import Plane
from phongrt.geometry.shape import Shape
from phongrt.geometry.sphere import Sphere
from phongrt.geometry.world import World

__all__ = [
    "HitRecord",
    "Intersection",
    "Plane",
    "Shape",
    "Sphere",
    "World",
    "hit",
    "sort_intersections",
]
