from phongrt.core.color import BLACK, WHITE, Color
from phongrt.core.light import PointLight
from phongrt.core.matrix import Matrix, NonInvertibleMatrixError
from phongrt.core.ray import Ray
from phongrt.core.tuples import Tuple, point, vector

__all__ = [
    "BLACK",
    "WHITE",
    "Color",
    "Matrix",
    "NonInvertibleMatrixError",
    "PointLight",
    "Ray",
    "Tuple",
    "point",
    "vector",
]
