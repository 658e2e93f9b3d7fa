"""Tests for the preview module.

Covers:
- Device-side encoding of a framebuffer (flip, clamp, tone map, gamma)
- The preview window's display field, without opening a window
"""

import math

import numpy as np
import pytest


def _framebuffer(image):
    from whitted.core.framebuffer import Framebuffer

    image = np.asarray(image, dtype=np.float64)
    fb = Framebuffer(image.shape[1], image.shape[0])
    fb.write(image)
    return fb


def _display_field(fb):
    import taichi as ti

    return ti.Vector.field(3, dtype=ti.f32, shape=(fb.width, fb.height))


class TestEncodeFramebuffer:
    """Tests for the framebuffer to canvas encoding."""

    def test_flips_rows(self):
        """Test the top framebuffer row lands at the top of the canvas field."""
        from whitted.preview.display import encode_framebuffer

        image = np.zeros((2, 3, 3))
        image[0, 2] = (1.0, 0.5, 0.25)
        fb = _framebuffer(image)
        display = _display_field(fb)
        encode_framebuffer(fb, display, gamma=1.0)

        shown = display.to_numpy()
        assert np.allclose(shown[2, 1], (1.0, 0.5, 0.25))
        assert np.allclose(shown[2, 0], 0.0)

    def test_clamps_without_tone_map(self):
        """Test out-of-range colours are clamped to [0, 1]."""
        from whitted.preview.display import encode_framebuffer

        fb = _framebuffer([[[2.0, 0.5, -1.0]]])
        display = _display_field(fb)
        encode_framebuffer(fb, display, gamma=1.0)
        assert np.allclose(display.to_numpy()[0, 0], (1.0, 0.5, 0.0))

    def test_gamma(self):
        """Test 0.25 encodes to 0.5 with gamma 2."""
        from whitted.preview.display import encode_framebuffer

        fb = _framebuffer([[[0.25, 0.25, 0.25]]])
        display = _display_field(fb)
        encode_framebuffer(fb, display, gamma=2.0)
        assert np.allclose(display.to_numpy()[0, 0], 0.5, atol=1e-6)

    def test_reinhard(self):
        """Test Reinhard maps c to c / (1 + c) and negatives to zero."""
        from whitted.preview.display import encode_framebuffer

        fb = _framebuffer([[[1.0, 3.0, -2.0]]])
        display = _display_field(fb)
        encode_framebuffer(fb, display, tone_map="reinhard", gamma=1.0)
        assert np.allclose(display.to_numpy()[0, 0], (0.5, 0.75, 0.0), atol=1e-6)

    def test_exposure(self):
        """Test the exposure curve maps c to 1 - exp(-c * exposure)."""
        from whitted.preview.display import encode_framebuffer

        fb = _framebuffer([[[1.0, 0.0, 50.0]]])
        display = _display_field(fb)
        encode_framebuffer(fb, display, tone_map="exposure", gamma=1.0, exposure=2.0)
        expected = (1.0 - math.exp(-2.0), 0.0, 1.0)
        assert np.allclose(display.to_numpy()[0, 0], expected, atol=1e-6)

    def test_bright_framebuffer_stays_in_range(self):
        """Test every curve keeps the encoded frame inside [0, 1]."""
        from whitted.preview.display import TONE_MAPS, encode_framebuffer

        fb = _framebuffer(np.linspace(-1.0, 50.0, 48).reshape(4, 4, 3))
        display = _display_field(fb)
        for method in TONE_MAPS:
            encode_framebuffer(fb, display, tone_map=method)
            shown = display.to_numpy()
            assert np.all(shown >= 0.0)
            assert np.all(shown <= 1.0)

    def test_framebuffer_untouched(self):
        """Test encoding leaves the linear framebuffer values alone."""
        from whitted.preview.display import encode_framebuffer

        fb = _framebuffer(np.full((2, 2, 3), 2.0))
        encode_framebuffer(fb, _display_field(fb), tone_map="reinhard")
        assert np.all(fb.to_numpy() == 2.0)

    def test_unknown_tone_map(self):
        """Test an unknown curve is rejected."""
        from whitted.preview.display import encode_framebuffer

        fb = _framebuffer(np.zeros((1, 1, 3)))
        with pytest.raises(ValueError, match="Unknown tone mapping"):
            encode_framebuffer(fb, _display_field(fb), tone_map="filmic")

    def test_invalid_gamma(self):
        """Test a non-positive gamma is rejected."""
        from whitted.preview.display import encode_framebuffer

        fb = _framebuffer(np.zeros((1, 1, 3)))
        with pytest.raises(ValueError, match="Gamma"):
            encode_framebuffer(fb, _display_field(fb), gamma=0.0)

    def test_field_size_mismatch(self):
        """Test the canvas field must match the framebuffer."""
        import taichi as ti

        from whitted.preview.display import encode_framebuffer

        fb = _framebuffer(np.zeros((2, 3, 3)))
        wrong = ti.Vector.field(3, dtype=ti.f32, shape=(2, 3))
        with pytest.raises(ValueError, match="doesn't match"):
            encode_framebuffer(fb, wrong)


class TestInteractivePreview:
    """Tests for the preview window (no window is opened)."""

    def test_display_field_shape(self):
        """Test the display field is indexed (x, y) and no window is opened."""
        from whitted.preview.interactive import InteractivePreview

        preview = InteractivePreview(8, 4)
        assert preview.display_image.shape == (8, 4)
        assert not preview.is_open

    def test_unknown_tone_map(self):
        """Test the tone map is checked up front."""
        from whitted.preview.interactive import InteractivePreview

        with pytest.raises(ValueError, match="Unknown tone mapping"):
            InteractivePreview(2, 2, tone_map="filmic")

    def test_load_framebuffer_uses_settings(self):
        """Test the preview's tone map and gamma are applied."""
        from whitted.preview.interactive import InteractivePreview

        fb = _framebuffer([[[1.0, 1.0, 1.0]]])
        preview = InteractivePreview(1, 1, tone_map="reinhard", gamma=1.0)
        preview.load_framebuffer(fb)
        assert np.allclose(preview.display_image.to_numpy()[0, 0], 0.5, atol=1e-6)

    def test_framebuffer_size_mismatch(self):
        """Test framebuffers must match the window size."""
        from whitted.core.framebuffer import Framebuffer
        from whitted.preview.interactive import InteractivePreview

        preview = InteractivePreview(4, 4)
        with pytest.raises(ValueError, match="doesn't match"):
            preview.load_framebuffer(Framebuffer(4, 3))

    def test_close_without_window(self):
        """Test closing a preview that never opened is harmless."""
        from whitted.preview.interactive import InteractivePreview

        preview = InteractivePreview(2, 2)
        preview.close()
        assert not preview.is_open

    def test_is_display_available_returns_bool(self):
        """Test headless detection returns a bool."""
        from whitted.preview.interactive import InteractivePreview

        assert isinstance(InteractivePreview.is_display_available(), bool)
