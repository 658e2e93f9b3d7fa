"""Preview window for rendered frames, built on Taichi GGUI.

Each shown frame is encoded on the device (see ``display.encode_framebuffer``)
into a canvas field and presented. The window is opened on the first frame,
so a preview can be constructed, and its encoding tested, without a display.

Example:
    >>> from whitted.preview.interactive import InteractivePreview
    >>>
    >>> preview = InteractivePreview(640, 480, tone_map="reinhard")
    >>> preview.show_framebuffer(sampler.render())
    >>> preview.wait_for_exit()
"""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING

import taichi as ti

from whitted.preview.display import DEFAULT_GAMMA, TONE_MAPS, encode_framebuffer

if TYPE_CHECKING:
    from whitted.core.framebuffer import Framebuffer


class InteractivePreview:
    """A window showing the latest rendered frame.

    Attributes:
        width: Frame width in pixels.
        height: Frame height in pixels.
        tone_map: Tone mapping curve applied to every shown frame.
        gamma: Display gamma.
        exposure: Scale of the "exposure" curve.
        display_image: Encoded frame, a (width, height) Vector field.
    """

    def __init__(
        self,
        width: int,
        height: int,
        *,
        title: str = "Whitted Ray Tracer",
        tone_map: str = "none",
        gamma: float = DEFAULT_GAMMA,
        exposure: float = 1.0,
    ) -> None:
        if tone_map not in TONE_MAPS:
            raise ValueError(f"Unknown tone mapping method: {tone_map}")
        self.width = width
        self.height = height
        self.title = title
        self.tone_map = tone_map
        self.gamma = gamma
        self.exposure = exposure
        self.display_image = ti.Vector.field(3, dtype=ti.f32, shape=(width, height))
        self._window: ti.ui.Window | None = None

    def _open(self) -> ti.ui.Window:
        if self._window is None:
            self._window = ti.ui.Window(name=self.title, res=(self.width, self.height), vsync=True)
        return self._window

    @property
    def is_open(self) -> bool:
        """Whether the window has been opened and not closed since."""
        return self._window is not None and self._window.running

    def load_framebuffer(self, framebuffer: Framebuffer) -> None:
        """Encode a framebuffer into the display field without presenting it.

        Raises:
            ValueError: If the framebuffer size differs from the window size.
        """
        if (framebuffer.width, framebuffer.height) != (self.width, self.height):
            raise ValueError(
                f"Framebuffer size {framebuffer.width}x{framebuffer.height} doesn't match "
                f"window size {self.width}x{self.height}"
            )
        encode_framebuffer(
            framebuffer,
            self.display_image,
            tone_map=self.tone_map,
            gamma=self.gamma,
            exposure=self.exposure,
        )

    def present(self) -> None:
        """Draw the display field once, opening the window if needed."""
        window = self._open()
        window.get_canvas().set_image(self.display_image)
        window.show()

    def show_framebuffer(self, framebuffer: Framebuffer) -> None:
        """Encode a framebuffer and present it."""
        self.load_framebuffer(framebuffer)
        self.present()

    def wait_for_exit(self) -> None:
        """Keep presenting the last frame until the user closes the window."""
        window = self._open()
        while window.running:
            self.present()

    def close(self) -> None:
        if self._window is not None:
            self._window.running = False

    @staticmethod
    def is_display_available() -> bool:
        """Whether a window can be opened here.

        Windows and macOS always have a desktop; elsewhere an X11 or Wayland
        display must be set.
        """
        if sys.platform in ("win32", "darwin"):
            return True
        return bool(os.environ.get("DISPLAY") or os.environ.get("WAYLAND_DISPLAY"))
