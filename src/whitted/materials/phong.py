"""Phong shader: Lambertian diffuse plus a specular highlight.

The specular term uses the mirror direction of the incoming ray:

    specular = specular_color * irradiance * max(0, R . L)^exponent * multiplier

where R is the reflected view direction and L the direction to the light.
"""

from __future__ import annotations

import numpy as np

from whitted.core.ray import Color, Ray, as_vector, dot, faceforward, normalize, reflect
from whitted.geometry.base import IntersectionInfo
from whitted.materials.base import Shader, ShadingContext, Texture


class Phong(Shader):
    """Diffuse surface with a Phong specular lobe.

    Attributes:
        exponent: Shininess; larger values give tighter highlights.
        specular_multiplier: Scale of the specular term.
        specular_color: Colour of the highlight.
    """

    def __init__(
        self,
        color=(1.0, 1.0, 1.0),
        texture: Texture | None = None,
        exponent: float = 10.0,
        specular_multiplier: float = 0.25,
        specular_color=(1.0, 1.0, 1.0),
    ) -> None:
        super().__init__(color, texture)
        self.exponent = float(exponent)
        self.specular_multiplier = float(specular_multiplier)
        self.specular_color = as_vector(specular_color)

    def shade(self, ray: Ray, info: IntersectionInfo, context: ShadingContext) -> Color:
        diffuse = self.diffuse_color(ray, info)
        normal = faceforward(ray.direction, normalize(info.normal))
        reflected = reflect(ray.direction, normal)

        diffuse_light = context.ambient_light.copy()
        specular_light = np.zeros(3)
        for direction, cosine, irradiance in context.illumination(info.point, normal):
            diffuse_light = diffuse_light + irradiance * cosine
            highlight = max(0.0, dot(reflected, direction)) ** self.exponent
            specular_light = specular_light + irradiance * (highlight * self.specular_multiplier)

        return diffuse * diffuse_light + self.specular_color * specular_light
