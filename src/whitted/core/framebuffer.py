"""Framebuffer: the rendered colours of one frame, stored in a Taichi field.

The buffer is allocated once at a fixed resolution (bounded by
VFB_MAX_SIZE) and overwritten by every render pass. Pixels are indexed
row-major, ``pixels[y, x]``, with y = 0 the top row.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from whitted.core.framebuffer import Framebuffer
    >>> framebuffer = Framebuffer(640, 480)
    >>> image = framebuffer.to_numpy()  # shape (480, 640, 3)
"""

import numpy as np
import numpy.typing as npt
import taichi as ti
import taichi.math as tm

# Maximum supported frame dimension (width and height)
VFB_MAX_SIZE = 1920


@ti.kernel
def _write_region(
    pixels: ti.template(),
    image: ti.types.ndarray(dtype=ti.f32, ndim=3),
    rows: ti.i32,
    cols: ti.i32,
):
    """Copy a (rows, cols, 3) array into the top-left corner of the field."""
    for i, j in ti.ndrange(rows, cols):
        pixels[i, j] = tm.vec3(image[i, j, 0], image[i, j, 1], image[i, j, 2])


class Framebuffer:
    """Fixed-size 2D grid of RGB colours.

    Attributes:
        pixels: Taichi Vector.field of shape (height, width) with 3 components.
    """

    def __init__(self, width: int, height: int) -> None:
        """Allocate the buffer.

        Args:
            width: Frame width in pixels (1 to VFB_MAX_SIZE).
            height: Frame height in pixels (1 to VFB_MAX_SIZE).

        Raises:
            ValueError: If a dimension is outside [1, VFB_MAX_SIZE].
        """
        if not (0 < width <= VFB_MAX_SIZE and 0 < height <= VFB_MAX_SIZE):
            raise ValueError(
                f"Frame dimensions ({width}x{height}) must be between 1 and "
                f"{VFB_MAX_SIZE} ({VFB_MAX_SIZE}x{VFB_MAX_SIZE} maximum)"
            )
        self._width = width
        self._height = height
        self.pixels = ti.Vector.field(3, dtype=ti.f32, shape=(height, width))

    @property
    def width(self) -> int:
        """Get the frame width."""
        return self._width

    @property
    def height(self) -> int:
        """Get the frame height."""
        return self._height

    def clear(self) -> None:
        """Set every pixel to black."""
        self.pixels.fill(0.0)

    def write(self, image: npt.NDArray[np.floating]) -> None:
        """Store a rendered image, starting at the top-left pixel.

        Args:
            image: Array of shape (rows, cols, 3) with rows <= height and
                cols <= width.

        Raises:
            ValueError: If the image does not fit.
        """
        if image.ndim != 3 or image.shape[2] != 3:
            raise ValueError(f"Expected an image of shape (rows, cols, 3), got {image.shape}")
        rows, cols = image.shape[:2]
        if rows > self._height or cols > self._width:
            raise ValueError(
                f"Image ({cols}x{rows}) does not fit the framebuffer "
                f"({self._width}x{self._height})"
            )
        _write_region(self.pixels, np.ascontiguousarray(image, dtype=np.float32), rows, cols)

    def get_pixel(self, x: int, y: int) -> tuple[float, float, float]:
        """Read one pixel as an (R, G, B) tuple."""
        value = self.pixels[y, x]
        return (float(value[0]), float(value[1]), float(value[2]))

    def to_numpy(self) -> npt.NDArray[np.float32]:
        """Copy the buffer into a (height, width, 3) float32 array."""
        return self.pixels.to_numpy()

    def __repr__(self) -> str:
        return f"Framebuffer(width={self._width}, height={self._height})"
