# geometry/intersection.py
import itertools
import math
from typing import Iterable, List, Optional

from phongrt.core.ray import Ray

# Offset along the normal for secondary ray origins, avoids self-shadowing
EPSILON = 1e-6

_ids = itertools.count()


class Intersection:
    """
    A ray parameter `t` at which a ray meets `shape`. Every intersection gets
    a unique id; two intersections are equal only if they are the same one.
    Ordering compares t.
    """
    __slots__ = ("t", "shape", "id")

    def __init__(self, t: float, shape):
        self.t = t
        self.shape = shape
        self.id = next(_ids)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Intersection):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __lt__(self, other: "Intersection") -> bool:
        return self.t < other.t

    def __repr__(self) -> str:
        return f"Intersection(t={self.t}, shape={type(self.shape).__name__}, id={self.id})"


def _sort_key(intersection: Intersection):
    # NaN goes last and never compares below a real t
    return (math.isnan(intersection.t), intersection.t)


def sort_intersections(intersections: Iterable[Intersection]) -> List[Intersection]:
    """Stable sort by t. Equal t values keep their insertion order."""
    return sorted(intersections, key=_sort_key)


def hit(intersections: Iterable[Intersection]) -> Optional[Intersection]:
    """
    Returns the first intersection with t > 0 from a list sorted by t, or
    None if there is none.
    """
    for intersection in intersections:
        if intersection.t > 0:
            return intersection
    return None


class HitRecord:
    """
    Shading context for an intersection along the ray that produced it.
    """
    def __init__(self, intersection: Intersection, ray: Ray):
        self.t = intersection.t
        self.shape = intersection.shape
        self.point = ray.at(self.t)
        self.eye = -ray.direction

        normal = self.shape.normal_at(self.point)
        if normal.dot(self.eye) < 0:
            self.inside = True
            normal = -normal
        else:
            self.inside = False
        self.normal = normal

        self.over_point = self.point + normal * EPSILON
        self.under_point = self.point - normal * EPSILON
