"""Preview module for showing rendered frames.

Components:
    display: Device-side tone mapping and gamma encoding of a framebuffer
    interactive: Taichi GGUI preview window
"""

from .display import DEFAULT_GAMMA, TONE_MAPS, encode_framebuffer
from .interactive import InteractivePreview

__all__ = [
    "DEFAULT_GAMMA",
    "TONE_MAPS",
    "encode_framebuffer",
    "InteractivePreview",
]
