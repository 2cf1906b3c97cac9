# geometry/plane.py
from typing import List

from phongrt.core.ray import Ray
from phongrt.core.tuples import Tuple, vector
from phongrt.geometry.intersection import Intersection
from phongrt.geometry.shape import Shape

# Rays with a smaller y direction are treated as parallel to the plane
PARALLEL_EPSILON = 1e-6


class Plane(Shape):
    """
    The infinite xz plane through the origin, facing +y.
    """
    def local_intersect(self, ray: Ray) -> List[Intersection]:
        if abs(ray.direction.y) < PARALLEL_EPSILON:
            return []
        t = -ray.origin.y / ray.direction.y
        return [Intersection(t, self)]

    def local_normal_at(self, point: Tuple) -> Tuple:
        return vector(0.0, 1.0, 0.0)
