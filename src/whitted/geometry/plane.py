"""Horizontal plane primitive, optionally limited to a square extent.

The plane lies at ``y = height`` in local space with normal +y. Rotate the
owning node's transform to orient it differently. Texture coordinates are
the local x and z of the hit point.
"""

from __future__ import annotations

from whitted.core.ray import Ray, length, vec3
from whitted.geometry.base import EPSILON, Geometry, IntersectionInfo


class Plane(Geometry):
    """An axis-aligned plane ``y = height`` with ``|x|, |z| <= limit``."""

    def __init__(self, limit: float = 1e99, height: float = 0.0) -> None:
        self.limit = float(limit)
        self.height = float(height)

    def intersect(self, ray: Ray) -> IntersectionInfo | None:
        dy = ray.direction[1]
        # Moving away from (or parallel to) the plane
        if ray.origin[1] > self.height and dy >= 0.0:
            return None
        if ray.origin[1] < self.height and dy <= 0.0:
            return None
        if dy == 0.0:
            return None

        t = (self.height - ray.origin[1]) / dy
        if t <= EPSILON:
            return None

        point = ray.at(t)
        if abs(point[0]) > self.limit or abs(point[2]) > self.limit:
            return None

        return IntersectionInfo(
            point=point,
            normal=vec3(0.0, 1.0, 0.0),
            distance=t * length(ray.direction),
            u=float(point[0]),
            v=float(point[2]),
        )

    def __repr__(self) -> str:
        return f"Plane(limit={self.limit}, height={self.height})"
