"""Pinhole camera model for perspective projection ray generation.

This module implements a pinhole camera that generates primary rays for
rendering. The camera is placed by a position and three Euler angles:

- yaw: turn left/right about the world y axis (positive turns toward +x)
- pitch: tilt up/down (positive looks up)
- roll: rotate about the viewing direction

In its unrotated pose the camera looks along +z with +y up and +x to the
right. ``fov`` is the field of view across the screen diagonal.

begin_frame() caches three corners of the virtual screen (upper-left,
upper-right, lower-left) at unit depth in world space; generate_ray() then
interpolates between them in pixel units, with y growing downward.

Example:
    >>> import math
    >>> from whitted.camera.pinhole import PinholeCamera
    >>>
    >>> camera = PinholeCamera(
    ...     position=(0.0, 60.0, -120.0),
    ...     yaw=math.radians(-10),
    ...     pitch=math.radians(-15),
    ...     width=640,
    ...     height=480,
    ... )
    >>> camera.begin_frame()
    >>> ray = camera.generate_ray(320.0, 240.0)  # Ray through image center
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from whitted.core.ray import Ray, Vector, as_vector, normalize, vec3
from whitted.core.transform import rotation_around_x, rotation_around_y, rotation_around_z


@dataclass
class PinholeCamera:
    """Configuration and per-frame state of a pinhole camera.

    Attributes:
        position: Camera position in world space (x, y, z).
        yaw: Rotation about the y axis in radians.
        pitch: Upward tilt in radians.
        roll: Rotation about the view axis in radians.
        fov: Diagonal field of view in degrees (0 < fov < 180).
        width: Frame width in pixels (defines the aspect ratio and the
            pixel units of generate_ray).
        height: Frame height in pixels.
    """

    position: tuple[float, float, float] = (0.0, 0.0, 0.0)
    yaw: float = 0.0
    pitch: float = 0.0
    roll: float = 0.0
    fov: float = 90.0
    width: int = 640
    height: int = 480

    _origin: Vector | None = field(default=None, init=False, repr=False)
    _upper_left: Vector | None = field(default=None, init=False, repr=False)
    _upper_right: Vector | None = field(default=None, init=False, repr=False)
    _lower_left: Vector | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if not 0.0 < self.fov < 180.0:
            raise ValueError(f"Field of view must be in (0, 180) degrees, got {self.fov}")
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Camera resolution must be positive, got {self.width}x{self.height}")

    @property
    def aspect_ratio(self) -> float:
        """Width divided by height."""
        return self.width / self.height

    def rotation(self) -> np.ndarray:
        """The camera-to-world rotation (roll, then pitch, then yaw)."""
        # Rotating about +x by a positive angle tilts +z downward
        return (
            rotation_around_y(self.yaw)
            @ rotation_around_x(-self.pitch)
            @ rotation_around_z(self.roll)
        )

    def begin_frame(self) -> None:
        """Cache the screen corners for the current pose.

        Must be called after moving the camera and before generating rays
        for a new frame.
        """
        x = -self.aspect_ratio
        y = 1.0
        # Scale the screen so its half diagonal subtends fov / 2
        scaling = math.tan(math.radians(self.fov / 2.0)) / math.hypot(x, y)
        x *= scaling
        y *= scaling

        origin = as_vector(self.position)
        rotation = self.rotation()
        self._origin = origin
        self._upper_left = rotation @ vec3(x, y, 1.0) + origin
        self._upper_right = rotation @ vec3(-x, y, 1.0) + origin
        self._lower_left = rotation @ vec3(x, -y, 1.0) + origin

    def generate_ray(self, x: float, y: float) -> Ray:
        """Generate the primary ray through a continuous pixel coordinate.

        Args:
            x: Horizontal pixel coordinate in [0, width] (left to right).
            y: Vertical pixel coordinate in [0, height] (top to bottom).

        Returns:
            A depth-0 ray from the camera position with unit direction.

        Raises:
            RuntimeError: If begin_frame() has not been called.
        """
        if self._origin is None:
            raise RuntimeError("Camera not set up. Call begin_frame() first.")

        target = (
            self._upper_left
            + (self._upper_right - self._upper_left) * (x / self.width)
            + (self._lower_left - self._upper_left) * (y / self.height)
        )
        return Ray(origin=self._origin.copy(), direction=normalize(target - self._origin))

    def get_camera_info(self) -> dict[str, tuple[float, float, float]]:
        """Get the cached screen corners for debugging.

        Returns:
            Dictionary with origin, upper_left, upper_right, lower_left.

        Raises:
            RuntimeError: If begin_frame() has not been called.
        """
        if self._origin is None:
            raise RuntimeError("Camera not set up. Call begin_frame() first.")
        return {
            "origin": tuple(float(c) for c in self._origin),
            "upper_left": tuple(float(c) for c in self._upper_left),
            "upper_right": tuple(float(c) for c in self._upper_right),
            "lower_left": tuple(float(c) for c in self._lower_left),
        }
