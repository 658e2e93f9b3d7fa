"""Sphere primitive with robust ray-sphere intersection.

This module provides a Sphere primitive whose intersection uses the robust
quadratic formula from Ray Tracing Gems to avoid floating-point artifacts.

The robust quadratic formula avoids catastrophic cancellation when b^2 is
nearly equal to 4ac by using a reformulated calculation that maintains
numerical stability.

Example:
    >>> from whitted.core.ray import Ray, vec3
    >>> from whitted.geometry.sphere import Sphere
    >>> sphere = Sphere(center=(0.0, 0.0, 0.0), radius=1.0)
    >>> info = sphere.intersect(Ray(vec3(0, 0, -10), vec3(0, 0, 1)))
    >>> info.distance
    9.0
"""

from __future__ import annotations

import math

import numpy as np

from whitted.core.ray import Ray, as_vector, dot, length
from whitted.geometry.base import EPSILON, Geometry, IntersectionInfo


def _solve_quadratic_robust(h: float, a: float, c: float, sqrt_d: float) -> tuple[float, float]:
    """Solve quadratic equation using robust formula from Ray Tracing Gems.

    Solves a*t^2 + 2*h*t + c = 0 using a numerically stable method.

    Args:
        h: Half of the linear coefficient.
        a: Quadratic coefficient.
        c: Constant term.
        sqrt_d: Square root of discriminant (h^2 - a*c).

    Returns:
        Tuple of (t0, t1) where t0 <= t1.
    """
    # q = -(h + sign(h) * sqrt(discriminant))
    sign_h = -1.0 if h < 0.0 else 1.0
    q = -(h + sign_h * sqrt_d)

    if abs(q) < 1e-12:
        # Tangent ray through the center plane; fall back to the standard formula
        t0 = (-h - sqrt_d) / a
        t1 = (-h + sqrt_d) / a
    else:
        t0 = q / a
        t1 = c / q

    if t0 > t1:
        t0, t1 = t1, t0

    return t0, t1


class Sphere(Geometry):
    """A sphere defined by center point and radius.

    Attributes:
        center: The center point of the sphere.
        radius: The radius of the sphere (positive).
    """

    def __init__(self, center=(0.0, 0.0, 0.0), radius: float = 1.0) -> None:
        if radius <= 0.0:
            raise ValueError(f"Sphere radius must be positive, got {radius}")
        self.center = as_vector(center)
        self.radius = float(radius)

    def intersect(self, ray: Ray) -> IntersectionInfo | None:
        """Test for ray-sphere intersection.

        The intersection is found by solving:
            |origin + t * direction - center|^2 = radius^2

        which expands to a*t^2 + 2*h*t + c = 0 with
            a = dot(direction, direction)
            h = dot(direction, oc)
            c = dot(oc, oc) - radius^2
            oc = origin - center

        The nearer root is used when it lies beyond EPSILON, otherwise the
        farther one (the ray starts inside the sphere).

        Texture coordinates are spherical: u follows the longitude around
        the y axis, v the latitude, both in [0, 1].
        """
        oc = ray.origin - self.center

        a = dot(ray.direction, ray.direction)
        h = dot(ray.direction, oc)
        c = dot(oc, oc) - self.radius * self.radius

        discriminant = h * h - a * c
        if discriminant < 0.0:
            return None

        t0, t1 = _solve_quadratic_robust(h, a, c, math.sqrt(discriminant))

        if t0 > EPSILON:
            t = t0
        elif t1 > EPSILON:
            t = t1
        else:
            return None

        point = ray.at(t)
        normal = (point - self.center) / self.radius
        u = (math.pi + math.atan2(normal[2], normal[0])) / (2.0 * math.pi)
        v = 1.0 - (math.pi / 2.0 + math.asin(float(np.clip(normal[1], -1.0, 1.0)))) / math.pi

        return IntersectionInfo(
            point=point,
            normal=normal,
            distance=t * length(ray.direction),
            u=u,
            v=v,
        )

    def __repr__(self) -> str:
        return f"Sphere(center={self.center.tolist()}, radius={self.radius})"
