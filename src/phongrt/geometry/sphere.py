# geometry/sphere.py
import math
from typing import List

from phongrt.core.ray import Ray
from phongrt.core.tuples import Tuple, point
from phongrt.geometry.intersection import Intersection
from phongrt.geometry.shape import Shape


class Sphere(Shape):
    """
    The unit sphere centred at the origin. Use the transform to move, scale
    or squash it into an ellipsoid.
    """
    origin = point(0.0, 0.0, 0.0)

    def local_intersect(self, ray: Ray) -> List[Intersection]:
        oc = ray.origin - self.origin
        a = ray.direction.dot(ray.direction)
        half_b = ray.direction.dot(oc)
        c = oc.dot(oc) - 1.0
        discriminant = half_b * half_b - a * c

        if discriminant < 0:
            return []

        sqrt_disc = math.sqrt(discriminant)
        # Smaller root first, both are returned even when they coincide
        return [
            Intersection((-half_b - sqrt_disc) / a, self),
            Intersection((-half_b + sqrt_disc) / a, self),
        ]

    def local_normal_at(self, point: Tuple) -> Tuple:
        return (point - self.origin).normalized()
