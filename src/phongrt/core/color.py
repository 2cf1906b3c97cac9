# core/color.py
import math
from typing import Tuple, Union


def _to_channel(c: float) -> int:
    if math.isnan(c):
        return 0
    # int() rounds toward zero
    return int(min(255.0, max(0.0, c * 256)))


class Color:
    """
    A linear RGB color. Channels are unclamped during arithmetic and only
    clamped to 0-255 when serialized.
    """
    __slots__ = ("r", "g", "b")

    def __init__(self, r: float, g: float, b: float):
        self.r = r
        self.g = g
        self.b = b

    def __add__(self, other: "Color") -> "Color":
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __sub__(self, other: "Color") -> "Color":
        return Color(self.r - other.r, self.g - other.g, self.b - other.b)

    def __mul__(self, other: Union["Color", float]) -> "Color":
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b)
        return Color(self.r * other, self.g * other, self.b * other)

    def __rmul__(self, other: float) -> "Color":
        return self.__mul__(other)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.r == other.r and self.g == other.g and self.b == other.b

    def __hash__(self) -> int:
        return hash((self.r, self.g, self.b))

    def __getitem__(self, index: int) -> float:
        if not 0 <= index < 3:
            raise IndexError(f"color index {index} out of range")
        return (self.r, self.g, self.b)[index]

    def __iter__(self):
        return iter((self.r, self.g, self.b))

    def to_rgb8(self) -> Tuple[int, int, int]:
        """
        Returns the channels scaled by 256, truncated and clamped to 0-255.
        """
        return _to_channel(self.r), _to_channel(self.g), _to_channel(self.b)

    def __str__(self) -> str:
        return "{} {} {}".format(*self.to_rgb8())

    def __repr__(self) -> str:
        return f"Color({self.r}, {self.g}, {self.b})"


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
