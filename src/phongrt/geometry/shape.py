# geometry/shape.py
from typing import List, Optional

from phongrt.core.matrix import Matrix
from phongrt.core.ray import Ray
from phongrt.core.tuples import Tuple, vector
from phongrt.materials.material import Material


class Shape:
    """
    Abstract primitive defined in its own canonical local space.

    Subclasses implement local_intersect() and local_normal_at(); the generic
    intersect() and normal_at() move rays and points into local space through
    the cached inverse transform and should not be overridden.
    """
    def __init__(self, transform: Optional[Matrix] = None,
                 material: Optional[Material] = None):
        self._transform = Matrix.identity().frozen()
        self._transform_inverse = self._transform
        if transform is not None:
            self.transform = transform
        self.material = material if material is not None else Material()

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

    def local_intersect(self, ray: Ray) -> List["Intersection"]:
        """
        Returns every intersection of the local-space `ray` with the shape,
        sorted by t, including those behind the origin.
        """
        raise NotImplementedError("local_intersect() must be implemented by subclasses.")

    def local_normal_at(self, point: Tuple) -> Tuple:
        raise NotImplementedError("local_normal_at() must be implemented by subclasses.")

    def intersect(self, ray: Ray) -> List["Intersection"]:
        return self.local_intersect(ray.transform(self._transform_inverse))

    def normal_at(self, point: Tuple) -> Tuple:
        """
        Returns the outward unit normal at world-space `point`, which the
        caller guarantees lies on the surface.
        """
        local_point = self._transform_inverse @ point
        local_normal = self.local_normal_at(local_point)
        world_normal = self._transform_inverse.transpose() @ local_normal
        return vector(world_normal.x, world_normal.y, world_normal.z).normalized()
