# core/tuples.py
import math


class Tuple:
    """
    A homogeneous 4-component tuple. Points carry w=1 and vectors w=0; the
    arithmetic keeps that discipline (point - point is a vector, point + vector
    is a point).
    """
    __slots__ = ("x", "y", "z", "w")

    def __init__(self, x: float, y: float, z: float, w: float):
        self.x = x
        self.y = y
        self.z = z
        self.w = w

    def is_point(self) -> bool:
        return self.w == 1.0

    def is_vector(self) -> bool:
        return self.w == 0.0

    def __add__(self, other: "Tuple") -> "Tuple":
        return Tuple(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: "Tuple") -> "Tuple":
        return Tuple(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __neg__(self) -> "Tuple":
        return Tuple(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, t: float) -> "Tuple":
        return Tuple(self.x * t, self.y * t, self.z * t, self.w * t)

    def __rmul__(self, t: float) -> "Tuple":
        return self.__mul__(t)

    def __truediv__(self, t: float) -> "Tuple":
        return Tuple(self.x / t, self.y / t, self.z / t, self.w / t)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return (self.x == other.x and self.y == other.y
                and self.z == other.z and self.w == other.w)

    __hash__ = None

    def __getitem__(self, index: int) -> float:
        if not 0 <= index < 4:
            raise IndexError(f"tuple index {index} out of range")
        return (self.x, self.y, self.z, self.w)[index]

    def __iter__(self):
        return iter((self.x, self.y, self.z, self.w))

    def dot(self, other: "Tuple") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def cross(self, other: "Tuple") -> "Tuple":
        """
        Cross product of the xyz parts. The w components are ignored and the
        result is always a vector.
        """
        return vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def norm_squared(self) -> float:
        return self.dot(self)

    def norm(self) -> float:
        return math.sqrt(self.norm_squared())

    def normalized(self) -> "Tuple":
        return self / self.norm()

    def normalize(self) -> None:
        """
        Normalizes the tuple in place.
        """
        n = self.norm()
        self.x /= n
        self.y /= n
        self.z /= n
        self.w /= n

    def reflect(self, normal: "Tuple") -> "Tuple":
        """
        Reflects this vector about `normal`.
        """
        return self - normal * 2 * self.dot(normal)

    def __repr__(self) -> str:
        return f"Tuple({self.x}, {self.y}, {self.z}, {self.w})"


def point(x: float, y: float, z: float) -> Tuple:
    return Tuple(x, y, z, 1.0)


def vector(x: float, y: float, z: float) -> Tuple:
    return Tuple(x, y, z, 0.0)
