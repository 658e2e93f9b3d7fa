"""Ray data structure and vector utilities for the recursive ray tracer.

This module provides the fundamental Ray dataclass and the vector and colour
helpers shared by geometry, shaders and the color evaluator. Vectors and
colours are plain 3-element NumPy float64 arrays, so arithmetic between them
always produces new arrays.

Example:
    >>> from whitted.core.ray import Ray, vec3, normalize
    >>> ray = Ray(origin=vec3(0.0, 0.0, -10.0), direction=vec3(0.0, 0.0, 1.0))
    >>> point = ray.at(5.0)  # Point 5 units along the ray
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

# Type alias for 3D vectors and RGB colours
Vector = npt.NDArray[np.float64]
Color = npt.NDArray[np.float64]

# Tolerance used when checking that a direction is unit length
UNIT_LENGTH_TOLERANCE = 1e-6


def vec3(x: float, y: float, z: float) -> Vector:
    """Create a 3D vector."""
    return np.array((x, y, z), dtype=np.float64)


def color(r: float, g: float, b: float) -> Color:
    """Create an RGB colour."""
    return np.array((r, g, b), dtype=np.float64)


def as_vector(value) -> Vector:
    """Convert a tuple, list or array into a float64 vector (copying)."""
    return np.array(value, dtype=np.float64).reshape(3)


BLACK = color(0.0, 0.0, 0.0)
BLACK.setflags(write=False)

WHITE = color(1.0, 1.0, 1.0)
WHITE.setflags(write=False)


@dataclass
class Ray:
    """A half-line query with an origin, a unit direction and a trace depth.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction of the ray. Must be unit length for world
            space rays; local-space rays built by scene nodes may be scaled.
        depth: Number of reflection/refraction bounces already taken.
            Primary rays start at 0.
    """

    origin: Vector
    direction: Vector
    depth: int = 0

    def at(self, t: float) -> Vector:
        """Compute the point origin + t * direction."""
        return self.origin + t * self.direction

    def spawn(self, origin: Vector, direction: Vector) -> Ray:
        """Create a child ray one bounce deeper than this one."""
        return Ray(origin=origin, direction=direction, depth=self.depth + 1)


def check_unit_direction(ray: Ray) -> None:
    """Raise if the ray direction is not unit length.

    Raises:
        ValueError: If |direction| differs from 1 by more than
            UNIT_LENGTH_TOLERANCE.
    """
    norm = length(ray.direction)
    if abs(norm - 1.0) > UNIT_LENGTH_TOLERANCE:
        raise ValueError(f"Ray direction must be unit length, got |d| = {norm}")


# =============================================================================
# Vector Utility Functions
# =============================================================================


def length(v: Vector) -> float:
    """Compute the Euclidean length of a vector."""
    return math.sqrt(float(np.dot(v, v)))


def length_squared(v: Vector) -> float:
    """Compute the squared length of a vector."""
    return float(np.dot(v, v))


def distance(a: Vector, b: Vector) -> float:
    """Compute the Euclidean distance between two points."""
    return length(a - b)


def normalize(v: Vector) -> Vector:
    """Normalize a vector to unit length.

    Args:
        v: The input vector.

    Returns:
        A unit vector in the same direction as v. A zero-length input
        is returned unchanged (as a copy).
    """
    norm = length(v)
    if norm == 0.0:
        return np.array(v, dtype=np.float64)
    return v / norm


def dot(a: Vector, b: Vector) -> float:
    """Compute the dot product of two vectors."""
    return float(np.dot(a, b))


def cross(a: Vector, b: Vector) -> Vector:
    """Compute the cross product of two vectors."""
    return np.cross(a, b)


def faceforward(incident: Vector, normal: Vector) -> Vector:
    """Orient a normal so it faces against the incident direction.

    Args:
        incident: The incoming ray direction.
        normal: A surface normal of either orientation.

    Returns:
        The normal, negated if it points along the incident direction.
    """
    if dot(incident, normal) < 0.0:
        return normal
    return -normal


def reflect(incident: Vector, normal: Vector) -> Vector:
    """Reflect an incident vector about a normal.

    Args:
        incident: The incoming direction vector (pointing toward the surface).
        normal: The surface normal (should be normalized).

    Returns:
        The reflected direction vector.
    """
    return incident - 2.0 * dot(incident, normal) * normal


def refract(incident: Vector, normal: Vector, eta: float) -> Vector:
    """Refract an incident vector through a surface.

    Computes the refracted direction using Snell's law. If total internal
    reflection occurs, returns a zero vector.

    Args:
        incident: The incoming direction vector (should be normalized).
        normal: The surface normal facing against the incident direction.
        eta: The ratio of refractive indices (n_incident / n_transmitted).

    Returns:
        The refracted direction vector, or zero vector if total internal
        reflection occurs.
    """
    cos_i = -dot(incident, normal)
    sin2_t = eta * eta * (1.0 - cos_i * cos_i)
    if sin2_t > 1.0:
        return vec3(0.0, 0.0, 0.0)
    cos_t = math.sqrt(1.0 - sin2_t)
    return eta * incident + (eta * cos_i - cos_t) * normal


def fresnel(incident: Vector, normal: Vector, ior: float) -> float:
    """Compute Fresnel reflectance using Schlick's approximation.

    Args:
        incident: The incoming direction (normalized).
        normal: The surface normal facing against the incident direction.
        ior: Ratio of refractive indices across the surface.

    Returns:
        The approximate reflectance in [0, 1].
    """
    r0 = ((1.0 - ior) / (1.0 + ior)) ** 2
    cosine = min(1.0, max(0.0, -dot(incident, normal)))
    return r0 + (1.0 - r0) * (1.0 - cosine) ** 5


def offset_origin(point: Vector, normal: Vector, bias: float) -> Vector:
    """Push a ray origin off a surface along a normal.

    Args:
        point: The intersection point.
        normal: Direction in which to move the origin (unit length).
        bias: Offset distance. Zero leaves the point unchanged.

    Returns:
        The offset origin point.
    """
    return point + bias * normal


def as_color(value) -> Color:
    """Convert a scalar grey level or an RGB triple into a colour."""
    return np.broadcast_to(np.asarray(value, dtype=np.float64), (3,)).copy()
