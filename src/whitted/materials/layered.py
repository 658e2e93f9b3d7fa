"""Layered shader: blends several shaders bottom to top.

Each layer is a shader with an opacity, given either as a constant blend
colour or as a texture (e.g. a Fresnel texture for view-dependent
reflections). Layers are composited in insertion order:

    result = layer_color * opacity + result * (1 - opacity)

Example:
    >>> from whitted.materials import Lambert, Layered, Reflection
    >>> floor = Layered()
    >>> floor.add_layer(Lambert(color=(0.5, 0.5, 0.5)), (1.0, 1.0, 1.0))
    >>> floor.add_layer(Reflection(1.0), (0.01, 0.01, 0.01))
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from whitted.core.ray import Color, Ray, as_vector
from whitted.geometry.base import IntersectionInfo
from whitted.materials.base import Shader, ShadingContext, Texture

# Maximum number of layers in one Layered shader
MAX_LAYERS = 32


@dataclass
class Layer:
    """One layer of a Layered shader.

    Attributes:
        shader: The shader computing this layer's colour.
        blend: Constant opacity per channel, used when texture is None.
        texture: Optional texture providing the opacity.
    """

    shader: Shader
    blend: Color
    texture: Texture | None = None


class Layered(Shader):
    """Composite of up to MAX_LAYERS shaders."""

    def __init__(self) -> None:
        super().__init__()
        self.layers: list[Layer] = []

    def add_layer(self, shader: Shader, blend=(1.0, 1.0, 1.0), texture: Texture | None = None) -> None:
        """Append a layer on top of the existing ones.

        Raises:
            ValueError: If the shader already has MAX_LAYERS layers.
        """
        if len(self.layers) >= MAX_LAYERS:
            raise ValueError(f"Maximum number of layers ({MAX_LAYERS}) exceeded")
        self.layers.append(Layer(shader=shader, blend=as_vector(blend), texture=texture))

    def shade(self, ray: Ray, info: IntersectionInfo, context: ShadingContext) -> Color:
        result = np.zeros(3)
        for layer in self.layers:
            from_layer = layer.shader.shade(ray, info, context)
            if layer.texture is not None:
                opacity = layer.texture.sample(ray, info)
            else:
                opacity = layer.blend
            result = from_layer * opacity + result * (1.0 - opacity)
        return result
