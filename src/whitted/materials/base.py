"""Shader and texture interfaces, lights, and the shading context.

Shaders compute the colour seen along a ray at an intersection. They never
reach for global state: everything they may call back into is handed to them
in a ShadingContext built by the color evaluator:

- ``trace(ray)`` evaluates a reflection or refraction ray recursively
- ``is_visible(a, b)`` answers a shadow query between two points
- ``lights`` and ``ambient_light`` describe the scene lighting
- ``shadow_bias`` is the origin offset used for every spawned ray

Example:
    >>> from whitted.materials.base import Shader
    >>> class Flat(Shader):
    ...     def shade(self, ray, info, context):
    ...         return self.diffuse_color(ray, info)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field

from whitted.core.ray import (
    BLACK,
    WHITE,
    Color,
    Ray,
    Vector,
    as_vector,
    distance,
    dot,
    offset_origin,
)
from whitted.geometry.base import IntersectionInfo

# Callback types exposed to shaders
TraceFunction = Callable[[Ray], Color]
VisibilityFunction = Callable[[Vector, Vector], bool]


@dataclass
class PointLight:
    """An omnidirectional light with inverse-square falloff.

    Attributes:
        position: World-space position of the light.
        color: RGB colour of the emitted light.
        intensity: Scalar power; irradiance at distance d is
            color * intensity / d^2.
    """

    position: Vector
    color: Color = field(default_factory=lambda: WHITE.copy())
    intensity: float = 1.0

    def __post_init__(self) -> None:
        self.position = as_vector(self.position)
        self.color = as_vector(self.color)
        if self.intensity < 0.0:
            raise ValueError(f"Light intensity must be non-negative, got {self.intensity}")


@dataclass(frozen=True)
class ShadingContext:
    """Services and scene lighting available to shaders during a render."""

    trace: TraceFunction
    is_visible: VisibilityFunction
    lights: Sequence[PointLight] = ()
    ambient_light: Color = field(default_factory=lambda: BLACK)
    shadow_bias: float = 0.0

    def illumination(self, point: Vector, normal: Vector) -> Iterator[tuple[Vector, float, Color]]:
        """Yield the unoccluded lights reaching a surface point.

        Lights behind the surface (relative to ``normal``) are skipped
        without casting a shadow ray.

        Args:
            point: The shaded point.
            normal: Unit normal facing the viewer.

        Yields:
            Tuples of (direction_to_light, cosine, irradiance) where
            irradiance is the light colour scaled by intensity / d^2.
        """
        origin = offset_origin(point, normal, self.shadow_bias)
        for light in self.lights:
            to_light = light.position - point
            dist = distance(light.position, point)
            if dist == 0.0:
                continue
            direction = to_light / dist
            cosine = dot(direction, normal)
            if cosine <= 0.0:
                continue
            if not self.is_visible(origin, light.position):
                continue
            yield direction, cosine, light.color * (light.intensity / (dist * dist))


class Texture(ABC):
    """A colour source evaluated at an intersection."""

    @abstractmethod
    def sample(self, ray: Ray, info: IntersectionInfo) -> Color:
        """Return the texture colour at the intersection."""


class Shader(ABC):
    """Base class for all shading models.

    Attributes:
        color: Flat surface colour used when no texture is set.
        texture: Optional texture overriding ``color``.
    """

    def __init__(self, color=(1.0, 1.0, 1.0), texture: Texture | None = None) -> None:
        self.color = as_vector(color)
        self.texture = texture

    def diffuse_color(self, ray: Ray, info: IntersectionInfo) -> Color:
        """Surface colour at the intersection (texture if present)."""
        if self.texture is not None:
            return self.texture.sample(ray, info)
        return self.color

    @abstractmethod
    def shade(self, ray: Ray, info: IntersectionInfo, context: ShadingContext) -> Color:
        """Compute the colour seen along ``ray`` at ``info``.

        Args:
            ray: The incoming world-space ray.
            info: World-space intersection data for the hit.
            context: Recursive trace, visibility test and lighting.

        Returns:
            The RGB colour. Any ray spawned here must have depth ray.depth + 1.
        """
