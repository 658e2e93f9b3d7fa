"""Core rendering module.

This module contains the fundamental building blocks for ray tracing:

Components:
    ray: Ray data structure, colours and vector utilities
    transform: Affine transforms between object and world space
    settings: Render configuration (trace depth, antialiasing, bias)
    integrator: Recursive Whitted color evaluator
    framebuffer: Taichi-backed frame storage
    sampler: Per-pixel sampling of a frame with optional antialiasing

Shading runs in Python scope: shaders recurse through arbitrary scene
graphs, which Taichi kernels cannot express. Taichi holds the framebuffer
and drives the preview display.
"""

from .ray import (
    BLACK,
    WHITE,
    Color,
    Ray,
    Vector,
    as_color,
    as_vector,
    color,
    cross,
    distance,
    dot,
    faceforward,
    fresnel,
    length,
    length_squared,
    normalize,
    reflect,
    refract,
    vec3,
)
from .settings import MAX_TRACE_DEPTH, SHADOW_BIAS, RenderSettings
from .transform import Transform

# Note: integrator, framebuffer and sampler are NOT imported here to avoid
# circular imports with the materials and scene packages. Import them
# directly, e.g. from whitted.core.integrator import WhittedIntegrator

__all__ = [
    "Ray",
    "Vector",
    "Color",
    "BLACK",
    "WHITE",
    "vec3",
    "color",
    "as_vector",
    "as_color",
    "length",
    "length_squared",
    "distance",
    "normalize",
    "dot",
    "cross",
    "faceforward",
    "reflect",
    "refract",
    "fresnel",
    "Transform",
    "RenderSettings",
    "MAX_TRACE_DEPTH",
    "SHADOW_BIAS",
]
