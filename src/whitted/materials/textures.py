"""Textures: procedural checkers, bitmaps and a Fresnel weight.

Textures are looked up with the intersection's (u, v) coordinates scaled by
``scaling``; bitmaps wrap around in both directions.

Example:
    >>> from whitted.materials.textures import CheckerTexture
    >>> checker = CheckerTexture((1.0, 0.5, 0.5), (0.5, 1.0, 1.0), scaling=0.2)
"""

from __future__ import annotations

import logging
import math
from pathlib import Path

import numpy as np
from PIL import Image as PILImage

from whitted.core.ray import Color, Ray, as_vector, color, faceforward, fresnel, normalize
from whitted.geometry.base import IntersectionInfo
from whitted.materials.base import Texture

logger = logging.getLogger(__name__)


def load_bitmap(path: str | Path) -> np.ndarray:
    """Load an image file as a (height, width, 3) float64 array in [0, 1].

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Bitmap not found: {path}")
    with PILImage.open(path) as image:
        pixels = np.asarray(image.convert("RGB"), dtype=np.float64) / 255.0
    logger.debug("Loaded bitmap %s (%dx%d)", path, pixels.shape[1], pixels.shape[0])
    return pixels


class CheckerTexture(Texture):
    """Alternating squares of two colours, one unit of (u, v) per square."""

    def __init__(self, color1=(0.0, 0.0, 0.0), color2=(1.0, 1.0, 1.0), scaling: float = 1.0) -> None:
        self.color1 = as_vector(color1)
        self.color2 = as_vector(color2)
        self.scaling = float(scaling)

    def sample(self, ray: Ray, info: IntersectionInfo) -> Color:
        x = math.floor(info.u * self.scaling)
        y = math.floor(info.v * self.scaling)
        return self.color1 if (x + y) % 2 == 0 else self.color2


class BitmapTexture(Texture):
    """Image texture with wrap-around addressing.

    A (u, v) step of 1 / scaling spans the whole image.
    """

    def __init__(self, path: str | Path, scaling: float = 1.0) -> None:
        self.pixels = load_bitmap(path)
        self.scaling = float(scaling)

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    def sample(self, ray: Ray, info: IntersectionInfo) -> Color:
        x = math.floor(info.u * self.scaling * self.width) % self.width
        y = math.floor(info.v * self.scaling * self.height) % self.height
        return self.pixels[y, x]


class Fresnel(Texture):
    """Greyscale Fresnel reflectance, for use as a layer opacity."""

    def __init__(self, ior: float = 1.5) -> None:
        self.ior = float(ior)

    def sample(self, ray: Ray, info: IntersectionInfo) -> Color:
        normal = faceforward(ray.direction, normalize(info.normal))
        reflectance = fresnel(ray.direction, normal, self.ior)
        return color(reflectance, reflectance, reflectance)
