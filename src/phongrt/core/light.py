# core/light.py
from phongrt.core.color import Color
from phongrt.core.tuples import Tuple


class PointLight:
    """
    A light source with no size, emitting `intensity` from `position`.
    """
    def __init__(self, position: Tuple, intensity: Color):
        self.position = position
        self.intensity = intensity

    def __repr__(self) -> str:
        return f"PointLight({self.position!r}, {self.intensity!r})"
