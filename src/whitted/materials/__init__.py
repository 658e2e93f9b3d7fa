"""Materials module: shaders, textures and lights.

This module implements the shading models evaluated at ray hits:

Components:
    base: Shader and Texture interfaces, PointLight, ShadingContext
    lambert: Ideal diffuse shading with shadowed point lights
    phong: Diffuse plus Phong specular highlight
    reflection: Perfect mirror (recursive reflection ray)
    refraction: Transparent surfaces (recursive refraction ray)
    layered: Blend of several shaders with constant or textured opacity
    textures: Checker, bitmap and Fresnel textures

Shaders spawn new rays only through the ShadingContext they receive, so the
recursion depth and the shadow queries stay under the color evaluator's
control.
"""

from .base import PointLight, Shader, ShadingContext, Texture
from .lambert import Lambert
from .layered import MAX_LAYERS, Layer, Layered
from .phong import Phong
from .reflection import Reflection
from .refraction import Refraction
from .textures import BitmapTexture, CheckerTexture, Fresnel, load_bitmap

__all__ = [
    # Interfaces
    "Shader",
    "Texture",
    "ShadingContext",
    "PointLight",
    # Shaders
    "Lambert",
    "Phong",
    "Reflection",
    "Refraction",
    "Layered",
    "Layer",
    "MAX_LAYERS",
    # Textures
    "CheckerTexture",
    "BitmapTexture",
    "Fresnel",
    "load_bitmap",
]
