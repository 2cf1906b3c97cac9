# geometry/world.py
from typing import List

from phongrt.core.color import BLACK, Color
from phongrt.core.light import PointLight
from phongrt.core.ray import Ray
from phongrt.core.tuples import Tuple
from phongrt.geometry.intersection import HitRecord, Intersection, hit, sort_intersections
from phongrt.geometry.shape import Shape


class World:
    """
    An ordered collection of shapes and lights. Every shape is tested against
    every ray; there is no acceleration structure.
    """
    def __init__(self):
        self.shapes: List[Shape] = []
        self.lights: List[PointLight] = []

    def add_shape(self, shape: Shape):
        self.shapes.append(shape)

    def add_light(self, light: PointLight):
        self.lights.append(light)

    def intersect(self, ray: Ray) -> List[Intersection]:
        """
        Returns all intersections of `ray` with the world's shapes, sorted by
        t. Ties keep shape insertion order.
        """
        intersections = []
        for shape in self.shapes:
            intersections.extend(shape.intersect(ray))
        return sort_intersections(intersections)

    def shade_hit(self, light_index: int, rec: HitRecord) -> Color:
        """Color contributed by one light at the hit described by `rec`."""
        return rec.shape.material.lighting(
            self.lights[light_index],
            rec.point,
            rec.eye,
            rec.normal,
            self.is_shadowed(light_index, rec.over_point),
            rec.shape,
        )

    def color_at(self, ray: Ray) -> Color:
        first = hit(self.intersect(ray))
        if first is None:
            return BLACK

        rec = HitRecord(first, ray)
        result = BLACK
        for light_index in range(len(self.lights)):
            result = result + self.shade_hit(light_index, rec)
        return result

    def is_shadowed(self, light_index: int, point: Tuple) -> bool:
        """
        True if any shape lies between `point` and the light, i.e. a shadow
        feeler from `point` hits something before reaching the light.
        """
        v = self.lights[light_index].position - point
        distance = v.norm()
        if distance == 0:
            return False
        ray = Ray(point, v / distance)
        for shape in self.shapes:
            for intersection in shape.intersect(ray):
                if 0 < intersection.t < distance:
                    return True
        return False
