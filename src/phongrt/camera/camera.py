# camera/camera.py
import logging
import math
import time
from dataclasses import dataclass, field

from phongrt.core.matrix import Matrix
from phongrt.core.ray import Ray
from phongrt.core.tuples import Tuple, point, vector
from phongrt.renderer.canvas import Canvas

logger = logging.getLogger(__name__)


@dataclass
class Config:
    """Parameters for constructing a Camera."""
    hsize: int = 100
    vsize: int = 100
    fov: float = math.pi / 3  # in radians
    from_: Tuple = field(default_factory=lambda: point(0.0, 0.0, 0.0))
    at: Tuple = field(default_factory=lambda: point(0.0, 0.0, -1.0))
    up: Tuple = field(default_factory=lambda: vector(0.0, 1.0, 0.0))


class Camera:
    """
    A pinhole camera. The canvas sits one unit in front of the eye, spanning
    `fov` across its longer side.
    """
    def __init__(self, config: Config = None):
        if config is None:
            config = Config()
        self.hsize = config.hsize
        self.vsize = config.vsize
        self.fov = config.fov
        self.transform = Matrix.view_transform(config.from_, config.at, config.up)
        self.transform_inverse = self.transform.inverse()

        half_view = math.tan(config.fov / 2)
        aspect = config.hsize / config.vsize
        if aspect >= 1:
            self.half_width = half_view
            self.half_height = half_view / aspect
        else:
            self.half_width = half_view * aspect
            self.half_height = half_view
        self.pixel_size = self.half_width * 2 / config.hsize

    def ray_for_pixel(self, x: int, y: int) -> Ray:
        """Returns the ray from the eye through the centre of pixel (x, y)."""
        world_x = self.half_width - (x + 0.5) * self.pixel_size
        world_y = self.half_height - (y + 0.5) * self.pixel_size

        pixel = self.transform_inverse @ point(world_x, world_y, -1.0)
        origin = self.transform_inverse @ point(0.0, 0.0, 0.0)
        direction = (pixel - origin).normalized()
        return Ray(origin, direction)

    def render(self, world) -> Canvas:
        """
        Renders `world` into a new canvas, visiting pixels in row-major order.
        """
        logger.info("Rendering %dx%d image of %d shapes and %d lights",
                    self.hsize, self.vsize, len(world.shapes), len(world.lights))
        start = time.perf_counter()

        image = Canvas(self.hsize, self.vsize)
        for y in range(self.vsize):
            for x in range(self.hsize):
                image[x, y] = world.color_at(self.ray_for_pixel(x, y))
            logger.debug("Finished row %d/%d", y + 1, self.vsize)

        logger.info("Render finished in %.2fs", time.perf_counter() - start)
        return image
