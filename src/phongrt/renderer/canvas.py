# renderer/canvas.py
import io
import logging
import os
import sys
from typing import TextIO, Union

import numpy as np
from PIL import Image

from phongrt.core.color import Color

logger = logging.getLogger(__name__)

PPM_MAX_VALUE = 255


class Canvas:
    """
    A width x height grid of linear RGB colors, initially black. Pixels are
    addressed as ``canvas[x, y]`` with x the column and y the row from the top.
    """
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        # Stored row-major: pixels[y, x] = (r, g, b)
        self.pixels = np.zeros((height, width, 3), dtype=np.float64)

    def _check(self, x: int, y: int):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} canvas")

    def __getitem__(self, index) -> Color:
        x, y = index
        self._check(x, y)
        r, g, b = self.pixels[y, x].tolist()
        return Color(r, g, b)

    def __setitem__(self, index, color: Color):
        x, y = index
        self._check(x, y)
        self.pixels[y, x] = (color.r, color.g, color.b)

    def to_rgb8(self) -> np.ndarray:
        """
        Returns the pixels as uint8 channels: each value scaled by 256,
        truncated toward zero and clamped to 0-255.
        """
        scaled = np.trunc(np.clip(np.nan_to_num(self.pixels), 0.0, 1.0) * 256)
        return np.clip(scaled, 0, PPM_MAX_VALUE).astype(np.uint8)

    def to_ppm(self, stream: TextIO):
        """
        Writes the canvas to `stream` as a plain (P3) pixmap, one pixel per
        line. I/O errors propagate to the caller.
        """
        stream.write(f"P3\n{self.width} {self.height}\n{PPM_MAX_VALUE}\n")
        for r, g, b in self.to_rgb8().reshape(-1, 3).tolist():
            stream.write(f"{r} {g} {b}\n")

    def ppm(self) -> str:
        buffer = io.StringIO()
        self.to_ppm(buffer)
        return buffer.getvalue()

    def to_image(self) -> Image.Image:
        return Image.fromarray(self.to_rgb8())

    def save(self, path: Union[str, os.PathLike]):
        """
        Saves the canvas. ``.ppm`` files are written as plain P3 text, ``-``
        writes P3 to stdout, anything else goes through Pillow.
        """
        path = os.fspath(path)
        if path == "-":
            self.to_ppm(sys.stdout)
            sys.stdout.flush()
            return
        if path.lower().endswith(".ppm"):
            with open(path, "w", encoding="ascii", newline="\n") as f:
                self.to_ppm(f)
        else:
            self.to_image().save(path)
        logger.info("Saved %dx%d canvas to %s", self.width, self.height, path)
