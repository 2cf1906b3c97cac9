# renderer/scenes.py
"""
Example scenes. Each builder returns either a ready-to-render
``(World, Camera)`` pair or an already drawn Canvas.
"""
import math
from typing import List, Tuple as Pair

from phongrt.camera.camera import Camera, Config
from phongrt.core.color import WHITE, Color
from phongrt.core.light import PointLight
from phongrt.core.matrix import Matrix
from phongrt.core.ray import Ray
from phongrt.core.tuples import Tuple, point, vector
from phongrt.geometry.intersection import hit
from phongrt.geometry.plane import Plane
from phongrt.geometry.sphere import Sphere
from phongrt.geometry.world import World
from phongrt.materials.material import Material
from phongrt.materials.textures import Stripe
from phongrt.renderer.canvas import Canvas


def _wall_material() -> Material:
    return Material(Color(1.0, 0.9, 0.9), specular=0.0)


def simple_scene(hsize: int = 200, vsize: int = 100) -> Pair[World, Camera]:
    """Three spheres in a room whose floor and walls are flattened spheres."""
    world = World()

    world.add_shape(Sphere(Matrix.scaling(10.0, 0.01, 10.0), _wall_material()))
    world.add_shape(Sphere(
        Matrix.translation(0.0, 0.0, 5.0)
        @ Matrix.rotation_y(-math.pi / 4)
        @ Matrix.rotation_x(math.pi / 2)
        @ Matrix.scaling(10.0, 0.01, 10.0),
        _wall_material(),
    ))
    world.add_shape(Sphere(
        Matrix.translation(0.0, 0.0, 5.0)
        @ Matrix.rotation_y(math.pi / 4)
        @ Matrix.rotation_x(math.pi / 2)
        @ Matrix.scaling(10.0, 0.01, 10.0),
        _wall_material(),
    ))

    world.add_shape(Sphere(
        Matrix.translation(-0.5, 1.0, 0.5),
        Material(Color(0.1, 1.0, 0.5), diffuse=0.7, specular=0.3),
    ))
    world.add_shape(Sphere(
        Matrix.translation(1.5, 0.5, -0.5) @ Matrix.scaling(0.5, 0.5, 0.5),
        Material(Color(0.5, 1.0, 0.1), diffuse=0.7, specular=0.3),
    ))
    world.add_shape(Sphere(
        Matrix.translation(-1.5, 0.33, -0.75) @ Matrix.scaling(0.33, 0.33, 0.33),
        Material(Color(1.0, 0.7, 0.1), diffuse=0.7, specular=0.3),
    ))

    world.add_light(PointLight(point(-10.0, 10.0, -10.0), WHITE))

    camera = Camera(Config(
        hsize=hsize,
        vsize=vsize,
        from_=point(0.0, 1.5, -5.0),
        at=point(0.0, 1.0, 0.0),
    ))
    return world, camera


def stripes_scene(hsize: int = 160, vsize: int = 90) -> Pair[World, Camera]:
    """A striped ball in front of a striped floor and wall."""
    world = World()
    green, blue = Color(0.1, 0.8, 0.3), Color(0.1, 0.3, 0.8)

    world.add_shape(Plane(material=Material(Stripe.colors(green, blue))))
    world.add_shape(Plane(Matrix.rotation_x(math.pi / 2), Material(Stripe.colors(green, blue))))

    ball_texture = Stripe.colors(Color(0.8, 0.3, 0.1), Color(0.7, 0.4, 0.1))
    ball_texture.transform = Matrix.rotation_y(math.pi / 4) @ Matrix.scaling(0.1, 0.1, 0.1)
    world.add_shape(Sphere(
        Matrix.translation(0.0, 2.0, 2.0) @ Matrix.scaling(0.75, 0.75, 0.75),
        Material(ball_texture),
    ))

    world.add_light(PointLight(point(-5.0, 10.0, 5.0), WHITE))

    camera = Camera(Config(
        hsize=hsize,
        vsize=vsize,
        from_=point(0.0, 5.0, 10.0),
        at=point(0.0, 2.0, 0.0),
    ))
    return world, camera


def sphere_silhouette(size: int = 100) -> Canvas:
    """
    Shades a sheared sphere by casting rays from a fixed eye at a wall,
    without a camera or world.
    """
    ray_origin = point(0.0, 0.0, -5.0)
    wall_z = 10.0
    wall_size = 7.0
    pixel_size = wall_size / size
    half = wall_size / 2

    canvas = Canvas(size, size)
    shape = Sphere(
        Matrix.shearing(1.0, 0.0, 0.0, 0.0, 0.0, 0.0) @ Matrix.scaling(0.5, 1.0, 1.0),
        Material(Color(1.0, 0.2, 1.0)),
    )
    light = PointLight(point(-10.0, 10.0, -10.0), WHITE)

    for y in range(size):
        world_y = half - pixel_size * y
        for x in range(size):
            world_x = pixel_size * x - half
            position = point(world_x, world_y, wall_z)
            ray = Ray(ray_origin, (position - ray_origin).normalized())

            first = hit(shape.intersect(ray))
            if first is not None:
                p = ray.at(first.t)
                normal = first.shape.normal_at(p)
                eye = -ray.direction
                canvas[x, y] = first.shape.material.lighting(light, p, eye, normal, False, first.shape)
    return canvas


def clock(size: int = 400) -> Canvas:
    """Twelve white dots laid out like the hour marks of a clock face."""
    canvas = Canvas(size, size)
    origin = point(0.0, 0.0, 0.0)
    offset = Matrix.translation(3 * size / 8, 0.0, 0.0)
    center = Matrix.translation(size / 2, size / 2, 0.0)

    for hour in range(12):
        rotation = Matrix.rotation_z(hour * math.pi / 6)
        p = center @ rotation @ offset @ origin
        x = int(p.x)
        y = size - int(p.y) - 1
        canvas[x, y] = WHITE
    return canvas


def projectile(gravity: Tuple = None, wind: Tuple = None) -> List[Tuple]:
    """
    Returns the positions of a projectile launched from (0, 1, 0) until it
    falls to the ground.
    """
    gravity = gravity if gravity is not None else vector(0.0, -0.1, 0.0)
    wind = wind if wind is not None else vector(-0.01, 0.0, 0.0)
    position = point(0.0, 1.0, 0.0)
    velocity = vector(1.0, 1.0, 0.0).normalized()

    positions = []
    while position.y > 0:
        positions.append(position)
        position = position + velocity
        velocity = velocity + gravity + wind
    return positions


def _render(builder):
    def render(width: int, height: int) -> Canvas:
        world, camera = builder(width, height)
        return camera.render(world)
    return render


# Scene name -> function(width, height) returning a Canvas
SCENES = {
    'simple': _render(simple_scene),
    'stripes': _render(stripes_scene),
    'sphere': lambda width, height: sphere_silhouette(width),
    'clock': lambda width, height: clock(width),
}
