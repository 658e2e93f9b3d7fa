"""Refraction shader for transparent surfaces (glass, water).

The geometric normal decides whether the ray is entering or leaving the
object: against the normal means entering (eta = 1 / ior), along it means
leaving (eta = ior). Total internal reflection yields black; there is no
reflected component, layer a Reflection shader with a Fresnel texture for
that.
"""

from __future__ import annotations

from whitted.core.ray import (
    BLACK,
    Color,
    Ray,
    as_color,
    dot,
    length_squared,
    normalize,
    offset_origin,
    refract,
)
from whitted.geometry.base import IntersectionInfo
from whitted.materials.base import Shader, ShadingContext


class Refraction(Shader):
    """Transparent surface.

    Attributes:
        ior: Index of refraction of the object's interior relative to the
            outside. Common values: Water=1.33, Glass=1.5, Diamond=2.4.
        multiplier: Colour the transmitted light is scaled by.
    """

    def __init__(self, ior: float = 1.5, multiplier=(1.0, 1.0, 1.0)) -> None:
        if ior <= 0.0:
            raise ValueError(f"Index of refraction must be positive, got {ior}")
        super().__init__()
        self.ior = float(ior)
        self.multiplier = as_color(multiplier)

    def shade(self, ray: Ray, info: IntersectionInfo, context: ShadingContext) -> Color:
        normal = normalize(info.normal)
        if dot(ray.direction, normal) < 0.0:
            eta = 1.0 / self.ior
        else:
            eta = self.ior
            normal = -normal

        refracted = refract(ray.direction, normal, eta)
        if length_squared(refracted) == 0.0:
            return BLACK

        # Start on the far side of the surface
        origin = offset_origin(info.point, -normal, context.shadow_bias)
        return context.trace(ray.spawn(origin, normalize(refracted))) * self.multiplier
