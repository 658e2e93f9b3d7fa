"""Intersection records and the geometry interface.

Every primitive intersects rays in its own local (object) space. Scene nodes
handle moving rays into that space and moving the results back out, so
primitives never see a world transform.

Local rays are built by untransforming a world ray, so their direction is
only unit length when the node's transform has no scaling. Primitives solve
in the ray's parametric form and do not assume a unit direction.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from whitted.core.ray import Ray, Vector

# Minimum parametric distance for a hit to count (avoids self-intersection
# with the surface the ray starts on)
EPSILON = 1e-6


@dataclass
class IntersectionInfo:
    """Record of a ray-surface intersection.

    Attributes:
        point: The point where the ray intersected the surface.
        normal: The surface normal at the intersection point. Not
            necessarily unit length after a node transform.
        distance: Distance along the ray from its origin to the point.
        u: First texture coordinate.
        v: Second texture coordinate.
    """

    point: Vector
    normal: Vector
    distance: float
    u: float = 0.0
    v: float = 0.0


class Geometry(ABC):
    """A primitive that can be intersected in local space."""

    @abstractmethod
    def intersect(self, ray: Ray) -> IntersectionInfo | None:
        """Find the nearest intersection in front of the ray origin.

        Args:
            ray: A ray in the primitive's local space.

        Returns:
            The nearest intersection with distance greater than EPSILON,
            or None if the ray misses.
        """
