# materials/material.py
import math
from typing import Optional, Union

from phongrt.core.color import WHITE, Color
from phongrt.core.light import PointLight
from phongrt.core.tuples import Tuple
from phongrt.materials.textures import SolidColor, Texture


class Material:
    """
    Phong surface parameters plus the texture supplying the surface color.
    A plain Color given as the texture is wrapped in a SolidColor.
    """
    def __init__(self, texture: Optional[Union[Color, Texture]] = None,
                 ambient: float = 0.1, diffuse: float = 0.9,
                 specular: float = 0.9, shininess: float = 200.0):
        if texture is None:
            texture = SolidColor(WHITE)
        elif isinstance(texture, Color):
            texture = SolidColor(texture)
        self.texture = texture
        self.ambient = ambient
        self.diffuse = diffuse
        self.specular = specular
        self.shininess = shininess

    def lighting(self, light: PointLight, point: Tuple, eye: Tuple, normal: Tuple,
                 in_shadow: bool, shape) -> Color:
        """
        Phong shading of `point` on `shape` lit by `light`.

        Args:
            light: The light source.
            point: World-space point being shaded.
            eye: Unit vector from the point towards the eye.
            normal: Unit surface normal at the point, facing the eye.
            in_shadow: If True, only the ambient term is returned.
            shape: Shape the point lies on; its transform places the texture.
        """
        color = self.texture.color_at_shape(point, shape)
        effective = color * light.intensity
        ambient = effective * self.ambient
        if in_shadow:
            return ambient

        lightv = (light.position - point).normalized()
        light_dot_normal = lightv.dot(normal)
        if light_dot_normal < 0:
            # light is on the other side of the surface
            return ambient

        diffuse = effective * self.diffuse * light_dot_normal
        reflectv = (-lightv).reflect(normal)
        reflect_dot_eye = reflectv.dot(eye)
        if reflect_dot_eye <= 0:
            return ambient + diffuse

        factor = math.pow(reflect_dot_eye, self.shininess)
        specular = light.intensity * self.specular * factor
        return ambient + diffuse + specular

    def __repr__(self) -> str:
        return (f"Material(texture={self.texture!r}, ambient={self.ambient}, "
                f"diffuse={self.diffuse}, specular={self.specular}, "
                f"shininess={self.shininess})")
