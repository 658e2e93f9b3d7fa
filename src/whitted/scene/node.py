"""Scene nodes: a geometry placed in the world with a shader.

A node moves each incoming world ray into its geometry's object space,
intersects there, and moves the hit back out. The reported distance is
measured again in world space because a scaling transform changes lengths.

Example:
    >>> from whitted.core.transform import Transform
    >>> from whitted.geometry import Sphere
    >>> from whitted.materials import Lambert
    >>> from whitted.scene.node import SceneNode
    >>> T = Transform()
    >>> T.translate((-10.0, 60.0, 0.0))
    >>> node = SceneNode(Sphere(radius=30.0), Lambert(), T)
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from whitted.core.ray import Ray, distance
from whitted.core.transform import Transform
from whitted.geometry.base import Geometry, IntersectionInfo
from whitted.materials.base import Shader


@dataclass
class SceneNode:
    """One placed object.

    Attributes:
        geometry: The local-space primitive.
        shader: The shader invoked when this node is the nearest hit.
        transform: Local-to-world transform. Only change it between frames.
    """

    geometry: Geometry
    shader: Shader
    transform: Transform = field(default_factory=Transform)

    def __post_init__(self) -> None:
        if self.geometry is None:
            raise ValueError("SceneNode requires a geometry")
        if self.shader is None:
            raise ValueError("SceneNode requires a shader")

    def intersect(self, ray: Ray) -> IntersectionInfo | None:
        """Intersect a world-space ray with this node.

        Args:
            ray: The world-space ray.

        Returns:
            The hit with world-space point, normal and distance (u and v
            unchanged from the geometry), or None on a miss.
        """
        T = self.transform
        local_ray = Ray(
            origin=T.untransform_point(ray.origin),
            direction=T.untransform_direction(ray.direction),
            depth=ray.depth,
        )

        info = self.geometry.intersect(local_ray)
        if info is None:
            return None

        point = T.transform_point(info.point)
        return replace(
            info,
            point=point,
            normal=T.transform_direction(info.normal),
            distance=distance(ray.origin, point),
        )
