"""Frame sampler: evaluates every pixel of a frame into the framebuffer.

Each pixel is sampled either once, at its top-left corner, or (with
antialiasing) at five fixed sub-pixel offsets whose colours are averaged.
The offsets are a fixed pattern rather than random jitter, so rendering the
same scene twice gives identical framebuffers.

No pixel depends on another: the row-major loop could be split per scanline
without changing the result.

Example:
    >>> from whitted.core.framebuffer import Framebuffer
    >>> from whitted.core.sampler import FrameSampler
    >>> sampler = FrameSampler(integrator, camera, Framebuffer(640, 480))
    >>> framebuffer = sampler.render()
    >>> sampler.last_frame_ms
"""

from __future__ import annotations

import logging
import time
from typing import Protocol

import numpy as np

from whitted.core.framebuffer import Framebuffer
from whitted.core.ray import Color, Ray
from whitted.core.settings import RenderSettings

logger = logging.getLogger(__name__)

# Sub-pixel sample positions for antialiasing; the first is the only one
# used when antialiasing is off
AA_OFFSETS = (
    (0.0, 0.0),
    (0.6, 0.0),
    (0.3, 0.3),
    (0.0, 0.6),
    (0.6, 0.6),
)


class RayGenerator(Protocol):
    """The camera operations the sampler needs."""

    def begin_frame(self) -> None: ...

    def generate_ray(self, x: float, y: float) -> Ray: ...


class ColorEvaluator(Protocol):
    """The integrator operation the sampler needs."""

    def evaluate(self, ray: Ray) -> Color: ...


class FrameSampler:
    """Renders frames of a camera view into a framebuffer.

    Attributes:
        integrator: Color evaluator for primary rays.
        camera: Source of primary rays.
        framebuffer: Destination buffer, overwritten by each render().
        antialiasing: Whether to take len(AA_OFFSETS) samples per pixel.
        last_frame_ms: Duration of the most recent render() in milliseconds.
    """

    def __init__(
        self,
        integrator: ColorEvaluator,
        camera: RayGenerator,
        framebuffer: Framebuffer,
        settings: RenderSettings | None = None,
    ) -> None:
        settings = settings if settings is not None else RenderSettings()
        self.integrator = integrator
        self.camera = camera
        self.framebuffer = framebuffer
        self.antialiasing = settings.antialiasing
        self.last_frame_ms = 0.0

    def trace_at(self, x: float, y: float) -> Color:
        """Evaluate the primary ray through a continuous pixel coordinate."""
        return self.integrator.evaluate(self.camera.generate_ray(x, y))

    def sample_pixel(self, x: int, y: int) -> Color:
        """Compute the colour of one pixel.

        Without antialiasing this is the single sample at the first offset,
        returned as is. With antialiasing the samples at all offsets are
        summed and divided by their count.
        """
        dx, dy = AA_OFFSETS[0]
        first = self.trace_at(x + dx, y + dy)
        if not self.antialiasing:
            return first

        total = np.array(first, dtype=np.float64)
        for dx, dy in AA_OFFSETS[1:]:
            total = total + self.trace_at(x + dx, y + dy)
        return total / len(AA_OFFSETS)

    def render(self, frame_width: int | None = None, frame_height: int | None = None) -> Framebuffer:
        """Render one frame.

        Calls the camera's begin_frame() once, then samples every pixel
        row by row and writes the result into the framebuffer. A frame
        smaller than the framebuffer is written to its top-left corner and
        the rest of the buffer is cleared to black.

        Args:
            frame_width: Width to render; defaults to the framebuffer width.
            frame_height: Height to render; defaults to the framebuffer height.

        Returns:
            The framebuffer, updated in place.

        Raises:
            ValueError: If the requested size exceeds the framebuffer.
        """
        width = self.framebuffer.width if frame_width is None else frame_width
        height = self.framebuffer.height if frame_height is None else frame_height
        if not (0 < width <= self.framebuffer.width and 0 < height <= self.framebuffer.height):
            raise ValueError(
                f"Frame size ({width}x{height}) exceeds the framebuffer "
                f"({self.framebuffer.width}x{self.framebuffer.height})"
            )

        start = time.perf_counter()
        self.camera.begin_frame()

        # Pixels outside a partial frame are reset to black
        if (width, height) != (self.framebuffer.width, self.framebuffer.height):
            self.framebuffer.clear()

        image = np.zeros((height, width, 3), dtype=np.float64)
        for y in range(height):
            for x in range(width):
                image[y, x] = self.sample_pixel(x, y)

        self.framebuffer.write(image)

        self.last_frame_ms = (time.perf_counter() - start) * 1000.0
        logger.info("Frame took %d ms", self.last_frame_ms)
        return self.framebuffer

    def __repr__(self) -> str:
        return (
            f"FrameSampler(width={self.framebuffer.width}, height={self.framebuffer.height}, "
            f"antialiasing={self.antialiasing})"
        )
