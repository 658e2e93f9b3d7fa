"""Encoding of framebuffer colours for the preview window.

Framebuffer colours are linear and unbounded: a bright light or a stack of
reflections can push a channel well past 1. Before a frame is shown every
pixel is optionally tone mapped, clamped to [0, 1] and gamma-encoded. The
whole pass runs in one Taichi kernel that reads the framebuffer field
directly and writes the (x, y) indexed field a GGUI canvas expects, so the
frame never goes through NumPy.

Example:
    >>> from whitted.preview.display import encode_framebuffer
    >>> display = ti.Vector.field(3, ti.f32, shape=(640, 480))
    >>> encode_framebuffer(sampler.render(), display, tone_map="reinhard")
"""

from typing import TYPE_CHECKING

import taichi as ti

if TYPE_CHECKING:
    from whitted.core.framebuffer import Framebuffer

# Tone mapping curves understood by the encode kernel
TONE_MAPS = {"none": 0, "reinhard": 1, "exposure": 2}

DEFAULT_GAMMA = 2.2


@ti.kernel
def _encode(
    src: ti.template(),
    dst: ti.template(),
    curve: ti.i32,
    exposure: ti.f32,
    inv_gamma: ti.f32,
):
    height = src.shape[0]
    for i, j in src:
        c = ti.max(src[i, j], 0.0)
        if curve == 1:
            c = c / (1.0 + c)
        elif curve == 2:
            c = 1.0 - ti.exp(-c * exposure)
        c = ti.math.clamp(c, 0.0, 1.0)
        # Row 0 of the framebuffer is the top of the image
        dst[j, height - 1 - i] = c**inv_gamma


def encode_framebuffer(
    framebuffer: "Framebuffer",
    display: ti.MatrixField,
    tone_map: str = "none",
    gamma: float = DEFAULT_GAMMA,
    exposure: float = 1.0,
) -> None:
    """Write the display encoding of a framebuffer into a canvas field.

    Args:
        framebuffer: Source of linear colours.
        display: Vector field of shape (width, height), indexed from the
            bottom-left corner.
        tone_map: "none" (clamp only), "reinhard" for c / (1 + c), or
            "exposure" for 1 - exp(-c * exposure).
        gamma: Display gamma; 1 leaves the clamped values as they are.
        exposure: Scale used by the "exposure" curve.

    Raises:
        ValueError: If the tone map is unknown, gamma is not positive, or
            the display field does not match the framebuffer.
    """
    if tone_map not in TONE_MAPS:
        raise ValueError(
            f"Unknown tone mapping method: {tone_map} (expected one of {', '.join(TONE_MAPS)})"
        )
    if gamma <= 0.0:
        raise ValueError(f"Gamma must be positive, got {gamma}")
    if display.shape != (framebuffer.width, framebuffer.height):
        raise ValueError(
            f"Display field {display.shape} doesn't match framebuffer "
            f"{framebuffer.width}x{framebuffer.height}"
        )
    _encode(framebuffer.pixels, display, TONE_MAPS[tone_map], exposure, 1.0 / gamma)
