"""Whitted integrator: recursive color evaluation of rays.

This module implements the color evaluator at the heart of the ray tracer.
A ray is traced against the scene; on a hit the node's shader computes the
colour, calling back into the integrator for reflection and refraction rays
and into the visibility query for shadow rays. Those callbacks reach the
shader through a ShadingContext, so there is no global scene or global
trace function.

Key features:
    - Depth-limited recursion (the only termination criterion)
    - Environment fallback for rays that hit nothing
    - Shadow queries exposed to shaders alongside the recursive trace

Example:
    >>> from whitted.core.integrator import WhittedIntegrator
    >>> from whitted.core.ray import Ray, vec3
    >>> integrator = WhittedIntegrator(scene, environment=env, lights=lights)
    >>> color = integrator.evaluate(Ray(vec3(0, 0, -10), vec3(0, 0, 1)))
"""

from __future__ import annotations

from collections.abc import Sequence

from whitted.core.ray import BLACK, Color, Ray, Vector, as_color
from whitted.core.settings import RenderSettings
from whitted.materials.base import PointLight, ShadingContext
from whitted.scene.environment import Environment
from whitted.scene.intersection import find_closest, is_visible
from whitted.scene.scene import Scene


class WhittedIntegrator:
    """Recursive color evaluator over a frozen scene.

    Attributes:
        scene: The scene; frozen when the integrator is created.
        environment: Background for rays that miss, or None.
        settings: Trace depth limit and shadow bias.
        context: The ShadingContext handed to every shader call.
    """

    def __init__(
        self,
        scene: Scene,
        environment: Environment | None = None,
        lights: Sequence[PointLight] = (),
        ambient_light=(0.0, 0.0, 0.0),
        settings: RenderSettings | None = None,
    ) -> None:
        self.scene = scene.freeze()
        self.environment = environment
        self.settings = settings if settings is not None else RenderSettings()
        self.context = ShadingContext(
            trace=self.evaluate,
            is_visible=self.is_visible,
            lights=tuple(lights),
            ambient_light=as_color(ambient_light),
            shadow_bias=self.settings.shadow_bias,
        )

    def evaluate(self, ray: Ray) -> Color:
        """Compute the colour seen along a world-space ray.

        Args:
            ray: The ray to trace. Its depth counts bounces already taken.

        Returns:
            Black if the ray is deeper than max_trace_depth. Otherwise the
            hit node's shaded colour, or the environment colour (black
            without a loaded environment) if nothing is hit.

        Raises:
            ValueError: If the ray direction is not unit length.
        """
        if ray.depth > self.settings.max_trace_depth:
            return BLACK

        hit = find_closest(self.scene, ray)

        if hit is None:
            if self.environment is not None and self.environment.is_loaded():
                return self.environment.sample(ray.direction)
            return BLACK

        shader = self.scene[hit.handle].shader
        return shader.shade(ray, hit.info, self.context)

    def is_visible(self, a: Vector, b: Vector) -> bool:
        """Shadow query between two points over this integrator's scene."""
        return is_visible(self.scene, a, b)
