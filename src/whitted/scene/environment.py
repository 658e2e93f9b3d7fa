"""Environments: the colour seen along rays that hit nothing.

Components:
    SolidEnvironment: One constant background colour
    CubemapEnvironment: Six images on the faces of an infinitely large cube

Cube-map faces are looked up by the direction's dominant axis using the
usual cube-map orientation (each face seen from the inside, +y up on the
side faces). Face images are named posx, negx, posy, negy, posz and negz
inside one folder; the first of .bmp, .png, .jpg found is used.

Example:
    >>> from whitted.scene.environment import CubemapEnvironment
    >>> env = CubemapEnvironment()
    >>> env.load_maps("data/env/forest")
    >>> env.is_loaded()
    True
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path

import numpy as np

from whitted.core.ray import Color, Vector, as_color
from whitted.materials.textures import load_bitmap

logger = logging.getLogger(__name__)

# Face names in the order (+x, -x, +y, -y, +z, -z)
FACE_NAMES = ("posx", "negx", "posy", "negy", "posz", "negz")

# File extensions tried for each face, in order
FACE_EXTENSIONS = (".bmp", ".png", ".jpg")


class Environment(ABC):
    """Background colour source."""

    @abstractmethod
    def is_loaded(self) -> bool:
        """Whether sample() can be called."""

    @abstractmethod
    def sample(self, direction: Vector) -> Color:
        """Return the background colour seen along ``direction``."""


class SolidEnvironment(Environment):
    """A constant background colour."""

    def __init__(self, color=(0.0, 0.0, 0.0)) -> None:
        self.color = as_color(color)

    def is_loaded(self) -> bool:
        return True

    def sample(self, direction: Vector) -> Color:
        return self.color.copy()


def cube_face_coordinates(direction: Vector) -> tuple[str, float, float]:
    """Map a direction to a cube-map face and image coordinates.

    Args:
        direction: Any non-zero direction.

    Returns:
        Tuple of (face_name, u, v) with u, v in [0, 1]; u runs left to
        right and v top to bottom in the face image.

    Raises:
        ValueError: If the direction is the zero vector.
    """
    x, y, z = (float(c) for c in direction)
    ax, ay, az = abs(x), abs(y), abs(z)

    if ax >= ay and ax >= az:
        major = ax
        if x > 0.0:
            face, sc, tc = "posx", -z, -y
        else:
            face, sc, tc = "negx", z, -y
    elif ay >= az:
        major = ay
        if y > 0.0:
            face, sc, tc = "posy", x, z
        else:
            face, sc, tc = "negy", x, -z
    else:
        major = az
        if z > 0.0:
            face, sc, tc = "posz", x, -y
        else:
            face, sc, tc = "negz", -x, -y

    if major == 0.0:
        raise ValueError("Cannot look up the environment for a zero direction")

    return face, (sc / major + 1.0) / 2.0, (tc / major + 1.0) / 2.0


class CubemapEnvironment(Environment):
    """Environment backed by six face images."""

    def __init__(self) -> None:
        self.faces: dict[str, np.ndarray] = {}
        self._loaded = False

    def load_maps(self, folder: str | Path) -> None:
        """Load all six faces from ``folder``.

        The environment only becomes loaded once every face has been read.

        Raises:
            FileNotFoundError: If a face image is missing.
        """
        folder = Path(folder)
        faces: dict[str, np.ndarray] = {}
        for name in FACE_NAMES:
            for extension in FACE_EXTENSIONS:
                path = folder / f"{name}{extension}"
                if path.is_file():
                    faces[name] = load_bitmap(path)
                    break
            else:
                raise FileNotFoundError(f"Cube map face '{name}' not found in {folder}")

        self.faces = faces
        self._loaded = True
        logger.info("Loaded cube map environment from %s", folder)

    def is_loaded(self) -> bool:
        return self._loaded

    def sample(self, direction: Vector) -> Color:
        """Return the face texel seen along ``direction``.

        Raises:
            RuntimeError: If load_maps() has not succeeded.
        """
        if not self._loaded:
            raise RuntimeError("Environment not loaded. Call load_maps() first.")

        face, u, v = cube_face_coordinates(direction)
        pixels = self.faces[face]
        height, width = pixels.shape[:2]
        px = min(int(u * width), width - 1)
        py = min(int(v * height), height - 1)
        return pixels[py, px].copy()
