"""Affine transforms between a node's object space and world space.

A Transform is a 3x3 linear part plus a translation offset. Operations
compose in call order: ``T.scale(...)`` followed by ``T.translate(...)``
scales first and then moves the result. The inverse of the linear part is
cached on every change so untransforming a ray costs one matrix product.

Example:
    >>> import math
    >>> from whitted.core.transform import Transform
    >>> T = Transform()
    >>> T.rotate(math.radians(30), 0.0, math.radians(60))
    >>> T.translate((40.0, 16.0, 30.0))
    >>> T.transform_point((0.0, 0.0, 0.0))
    array([40., 16., 30.])
"""

from __future__ import annotations

import math

import numpy as np

from whitted.core.ray import Vector, as_vector


def rotation_around_x(angle: float) -> np.ndarray:
    """Rotation matrix about the x axis (radians, right-handed)."""
    s, c = math.sin(angle), math.cos(angle)
    return np.array(((1.0, 0.0, 0.0), (0.0, c, -s), (0.0, s, c)))


def rotation_around_y(angle: float) -> np.ndarray:
    """Rotation matrix about the y axis (radians)."""
    s, c = math.sin(angle), math.cos(angle)
    return np.array(((c, 0.0, s), (0.0, 1.0, 0.0), (-s, 0.0, c)))


def rotation_around_z(angle: float) -> np.ndarray:
    """Rotation matrix about the z axis (radians)."""
    s, c = math.sin(angle), math.cos(angle)
    return np.array(((c, -s, 0.0), (s, c, 0.0), (0.0, 0.0, 1.0)))


class Transform:
    """Local-to-world transform of a scene node.

    Attributes:
        matrix: The 3x3 linear part (scale and rotation).
        inverse: Cached inverse of ``matrix``.
        offset: The world-space translation.
    """

    def __init__(self) -> None:
        self.matrix = np.identity(3)
        self.inverse = np.identity(3)
        self.offset = np.zeros(3)

    def reset(self) -> None:
        """Reset to the identity transform."""
        self.matrix = np.identity(3)
        self.inverse = np.identity(3)
        self.offset = np.zeros(3)

    def _apply(self, linear: np.ndarray) -> None:
        """Compose a linear map after the current one and refresh the inverse.

        Raises:
            ValueError: If the resulting matrix is singular.
        """
        matrix = linear @ self.matrix
        try:
            inverse = np.linalg.inv(matrix)
        except np.linalg.LinAlgError as exc:
            raise ValueError("Transform matrix is not invertible") from exc
        self.matrix = matrix
        self.inverse = inverse
        self.offset = linear @ self.offset

    def scale(self, x: float, y: float, z: float) -> None:
        """Scale along the three axes.

        Raises:
            ValueError: If any factor is zero (the transform would be singular).
        """
        self._apply(np.diag((float(x), float(y), float(z))))

    def rotate(self, yaw: float, pitch: float, roll: float) -> None:
        """Rotate by roll (about z), then pitch (about x), then yaw (about y).

        Args:
            yaw: Rotation about the y axis in radians.
            pitch: Rotation about the x axis in radians.
            roll: Rotation about the z axis in radians.
        """
        self._apply(rotation_around_y(yaw) @ rotation_around_x(pitch) @ rotation_around_z(roll))

    def translate(self, offset) -> None:
        """Move by ``offset``; repeated calls accumulate."""
        self.offset = self.offset + as_vector(offset)

    def transform_point(self, point) -> Vector:
        """Map a local-space point to world space."""
        return self.matrix @ np.asarray(point, dtype=np.float64) + self.offset

    def untransform_point(self, point) -> Vector:
        """Map a world-space point to local space."""
        return self.inverse @ (np.asarray(point, dtype=np.float64) - self.offset)

    def transform_direction(self, direction) -> Vector:
        """Map a local-space direction to world space (ignores translation)."""
        return self.matrix @ np.asarray(direction, dtype=np.float64)

    def untransform_direction(self, direction) -> Vector:
        """Map a world-space direction to local space (ignores translation)."""
        return self.inverse @ np.asarray(direction, dtype=np.float64)

    def copy(self) -> Transform:
        """Return an independent copy of this transform."""
        other = Transform()
        other.matrix = self.matrix.copy()
        other.inverse = self.inverse.copy()
        other.offset = self.offset.copy()
        return other

    def __repr__(self) -> str:
        return (
            f"Transform(matrix={self.matrix.tolist()}, offset={self.offset.tolist()})"
        )
