"""Render settings shared by the color evaluator, shaders and frame sampler."""

from dataclasses import dataclass

# Rays deeper than this evaluate to black
MAX_TRACE_DEPTH = 10

# Distance new ray origins are pushed off the surface they start on
SHADOW_BIAS = 1e-6


@dataclass
class RenderSettings:
    """Configuration for a render pass.

    Attributes:
        max_trace_depth: Maximum number of recursive bounces. A ray whose
            depth exceeds this value evaluates to black.
        antialiasing: Whether the frame sampler takes five fixed sub-pixel
            samples per pixel instead of one.
        shadow_bias: Offset applied by shaders along the face-forward normal
            when spawning reflection, refraction and shadow rays. Zero
            disables the offset.
    """

    max_trace_depth: int = MAX_TRACE_DEPTH
    antialiasing: bool = False
    shadow_bias: float = SHADOW_BIAS

    def __post_init__(self) -> None:
        if self.max_trace_depth < 0:
            raise ValueError(f"max_trace_depth must be non-negative, got {self.max_trace_depth}")
        if self.shadow_bias < 0.0:
            raise ValueError(f"shadow_bias must be non-negative, got {self.shadow_bias}")
