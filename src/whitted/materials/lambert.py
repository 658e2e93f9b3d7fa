"""Lambertian (ideal diffuse) shader.

Light arriving from each point light is weighted by the cosine between the
surface normal and the direction to the light, and falls off with the square
of the distance:

    color = diffuse * (ambient + sum(light_color * intensity * cos / d^2))

Shadowed lights contribute nothing; the shadow test goes through the
context's visibility query.
"""

from __future__ import annotations

from whitted.core.ray import Color, Ray, faceforward, normalize
from whitted.geometry.base import IntersectionInfo
from whitted.materials.base import Shader, ShadingContext


class Lambert(Shader):
    """Ideal diffuse surface."""

    def shade(self, ray: Ray, info: IntersectionInfo, context: ShadingContext) -> Color:
        diffuse = self.diffuse_color(ray, info)
        normal = faceforward(ray.direction, normalize(info.normal))

        light = context.ambient_light.copy()
        for _, cosine, irradiance in context.illumination(info.point, normal):
            light = light + irradiance * cosine

        return diffuse * light
