"""Perfect mirror shader."""

from __future__ import annotations

from whitted.core.ray import Color, Ray, as_color, faceforward, normalize, offset_origin, reflect
from whitted.geometry.base import IntersectionInfo
from whitted.materials.base import Shader, ShadingContext


class Reflection(Shader):
    """Mirror reflection scaled by ``multiplier``.

    The reflected ray starts slightly above the surface (by the context's
    shadow bias) and is traced recursively one bounce deeper.
    """

    def __init__(self, multiplier: float = 0.99) -> None:
        super().__init__()
        self.multiplier = as_color(multiplier)

    def shade(self, ray: Ray, info: IntersectionInfo, context: ShadingContext) -> Color:
        normal = faceforward(ray.direction, normalize(info.normal))
        origin = offset_origin(info.point, normal, context.shadow_bias)
        direction = normalize(reflect(ray.direction, normal))
        return context.trace(ray.spawn(origin, direction)) * self.multiplier
