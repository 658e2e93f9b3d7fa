"""Camera module for view and ray generation.

Components:
    pinhole: Pinhole (perspective) camera placed by position and Euler angles

Camera responsibilities:
    - Cache the screen geometry once per frame (begin_frame)
    - Turn continuous pixel coordinates into world-space unit rays
      (generate_ray); sub-pixel offsets for antialiasing are chosen by the
      frame sampler, not the camera
"""

from .pinhole import PinholeCamera

__all__ = [
    "PinholeCamera",
]
