"""Axis-aligned cube primitive using a per-face slab test.

Each of the six faces is tested as a plane; a candidate is accepted when the
hit point lies inside the face's square. The reported normal points out of
the cube (+1 on the upper face of an axis, -1 on the lower face), and the
texture coordinates are the two in-face coordinates of the hit point.
"""

from __future__ import annotations

import numpy as np

from whitted.core.ray import Ray, as_vector, length
from whitted.geometry.base import EPSILON, Geometry, IntersectionInfo

# For each face axis, the two axes spanning the face (u, v order)
_FACE_AXES = ((2, 1), (0, 2), (0, 1))


class Cube(Geometry):
    """A cube centered at ``center`` extending ``half_side`` along each axis."""

    def __init__(self, center=(0.0, 0.0, 0.0), half_side: float = 1.0) -> None:
        if half_side <= 0.0:
            raise ValueError(f"Cube half_side must be positive, got {half_side}")
        self.center = as_vector(center)
        self.half_side = float(half_side)

    def intersect(self, ray: Ray) -> IntersectionInfo | None:
        best_t = np.inf
        best: IntersectionInfo | None = None
        lo = self.center - self.half_side
        hi = self.center + self.half_side

        for axis in range(3):
            d = ray.direction[axis]
            if d == 0.0:
                continue
            u_axis, v_axis = _FACE_AXES[axis]
            for level, side in ((lo[axis], -1.0), (hi[axis], 1.0)):
                t = (level - ray.origin[axis]) / d
                if t <= EPSILON or t >= best_t:
                    continue
                point = ray.at(t)
                if not (lo[u_axis] <= point[u_axis] <= hi[u_axis]):
                    continue
                if not (lo[v_axis] <= point[v_axis] <= hi[v_axis]):
                    continue

                normal = np.zeros(3)
                normal[axis] = side
                best_t = t
                best = IntersectionInfo(
                    point=point,
                    normal=normal,
                    distance=0.0,
                    u=float(point[u_axis] - lo[u_axis]),
                    v=float(point[v_axis] - lo[v_axis]),
                )

        if best is not None:
            best.distance = best_t * length(ray.direction)
        return best

    def __repr__(self) -> str:
        return f"Cube(center={self.center.tolist()}, half_side={self.half_side})"
