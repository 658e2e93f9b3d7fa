"""Scene-level ray queries: nearest hit and shadow visibility.

Both queries are linear scans over the scene's nodes in insertion order.

- find_closest() keeps the hit with the strictly smallest distance, so among
  hits at exactly the same distance the node added first wins.
- is_visible() returns as soon as any node blocks the segment between two
  points. A hit exactly at the far point does not block (the bound is
  exclusive).

Example:
    >>> from whitted.core.ray import Ray, vec3
    >>> from whitted.scene.intersection import find_closest, is_visible
    >>> hit = find_closest(scene, Ray(vec3(0, 0, -10), vec3(0, 0, 1)))
    >>> if hit is not None:
    ...     shader = scene[hit.handle].shader
"""

from __future__ import annotations

from dataclasses import dataclass

from whitted.core.ray import Ray, Vector, as_vector, check_unit_direction, distance
from whitted.geometry.base import IntersectionInfo
from whitted.scene.scene import NodeHandle, Scene

# Larger than any legitimate scene extent
NO_HIT_DISTANCE = 1e99


@dataclass
class SceneHit:
    """Record of a ray-scene intersection.

    Attributes:
        info: The world-space intersection data.
        handle: Handle of the node that was hit (owner of the shader to run).
    """

    info: IntersectionInfo
    handle: NodeHandle


def find_closest(scene: Scene, ray: Ray) -> SceneHit | None:
    """Find the nearest node hit by a world-space ray.

    Args:
        scene: The scene to search.
        ray: The world-space ray (unit direction).

    Returns:
        The closest hit and its node handle, or None if no node is hit
        within NO_HIT_DISTANCE.

    Raises:
        ValueError: If the ray direction is not unit length.
    """
    check_unit_direction(ray)

    closest_distance = NO_HIT_DISTANCE
    result: SceneHit | None = None

    for handle, node in enumerate(scene):
        info = node.intersect(ray)
        if info is not None and info.distance < closest_distance:
            closest_distance = info.distance
            result = SceneHit(info=info, handle=handle)

    return result


def is_visible(scene: Scene, a: Vector, b: Vector) -> bool:
    """Test whether the segment from a to b is unobstructed (shadow query).

    Args:
        scene: The scene to search.
        a: Start point (typically a shaded point, already offset).
        b: End point (typically a light position).

    Returns:
        False if any node is hit at a distance strictly less than |a - b|,
        True otherwise.
    """
    a = as_vector(a)
    b = as_vector(b)
    max_distance = distance(a, b)
    if max_distance == 0.0:
        return True

    ray = Ray(origin=a, direction=(b - a) / max_distance)

    for node in scene:
        info = node.intersect(ray)
        if info is not None and info.distance < max_distance:
            return False

    return True
