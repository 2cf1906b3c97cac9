# materials/textures.py
import math

from phongrt.core.color import Color
from phongrt.core.matrix import Matrix
from phongrt.core.tuples import Tuple


class Texture:
    """
    Base class for all textures. A texture maps a point in its own space to a
    color and carries an affine transform whose inverse is cached whenever the
    transform is assigned.
    """
    def __init__(self):
        self._transform = Matrix.identity().frozen()
        self._transform_inverse = self._transform

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, transform: Matrix):
        transform = transform.frozen()
        self._transform_inverse = transform.inverse().frozen()
        self._transform = transform

    @property
    def transform_inverse(self) -> Matrix:
        return self._transform_inverse

    def color_at(self, point: Tuple) -> Color:
        """Return the color at `point`, given in texture space."""
        raise NotImplementedError("color_at() must be implemented by texture subclasses.")

    def color_at_texture(self, point: Tuple) -> Color:
        """Return the color at `point`, given in the parent texture's space."""
        return self.color_at(self._transform_inverse @ point)

    def color_at_shape(self, point: Tuple, shape) -> Color:
        """Return the color at world-space `point` on `shape`."""
        local = shape.transform_inverse @ point
        return self.color_at(self._transform_inverse @ local)


class SolidColor(Texture):
    """A single color everywhere; the transform has no visible effect."""
    def __init__(self, color: Color):
        super().__init__()
        self.color = color

    def color_at(self, point: Tuple) -> Color:
        return self.color

    def __repr__(self) -> str:
        return f"SolidColor({self.color!r})"


class Stripe(Texture):
    """
    Alternates between two textures in unit-wide stripes perpendicular to the
    x axis. Even stripes (by mathematical floor of x) use `a`, odd ones `b`.
    """
    def __init__(self, a: Texture, b: Texture):
        super().__init__()
        self.a = a
        self.b = b

    @classmethod
    def colors(cls, a: Color, b: Color) -> "Stripe":
        return cls(SolidColor(a), SolidColor(b))

    def color_at(self, point: Tuple) -> Color:
        if math.floor(point.x) % 2 == 0:
            return self.a.color_at_texture(point)
        return self.b.color_at_texture(point)
