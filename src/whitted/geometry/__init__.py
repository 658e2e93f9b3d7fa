"""Geometry module for shape primitives.

This module provides geometric primitives and intersection records:

Components:
    base: IntersectionInfo record and the Geometry interface
    plane: Horizontal plane with optional square extent
    sphere: Sphere primitive with robust ray-sphere intersection
    cube: Axis-aligned cube (slab test)

All primitives intersect in local space; scene nodes apply the world
transform. Ray-object intersection follows the pattern:
    info = geometry.intersect(local_ray)  # IntersectionInfo or None
"""

from .base import EPSILON, Geometry, IntersectionInfo
from .cube import Cube
from .plane import Plane
from .sphere import Sphere

__all__ = [
    "EPSILON",
    "Geometry",
    "IntersectionInfo",
    "Plane",
    "Sphere",
    "Cube",
]
