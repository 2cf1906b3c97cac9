# core/ray.py
from phongrt.core.matrix import Matrix
from phongrt.core.tuples import Tuple


class Ray:
    """
    Represents a ray in 3D space with an origin point and a direction vector.
    The direction need not be unit length.
    """
    __slots__ = ("origin", "direction")

    def __init__(self, origin: Tuple, direction: Tuple):
        self.origin = origin
        self.direction = direction

    def at(self, t: float) -> Tuple:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    def transform(self, m: Matrix) -> "Ray":
        """
        Returns the ray transformed by `m`. The direction is deliberately left
        unnormalized so t values found in the new frame stay valid in this one.
        """
        return Ray(m @ self.origin, m @ self.direction)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ray):
            return NotImplemented
        return self.origin == other.origin and self.direction == other.direction

    __hash__ = None

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r})"
