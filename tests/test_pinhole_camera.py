"""Unit tests for the pinhole camera module.

Tests cover:
- Camera validation
- Ray generation for center and corner pixels
- Diagonal field of view
- Yaw, pitch and roll orientation
- begin_frame() requirement
"""

import math

import numpy as np
import pytest


class TestCameraSetup:
    """Tests for camera configuration."""

    def test_invalid_fov(self):
        """Test field of view must be in (0, 180)."""
        from whitted.camera.pinhole import PinholeCamera

        with pytest.raises(ValueError, match="Field of view"):
            PinholeCamera(fov=180.0)

    def test_invalid_resolution(self):
        """Test resolution must be positive."""
        from whitted.camera.pinhole import PinholeCamera

        with pytest.raises(ValueError, match="resolution"):
            PinholeCamera(width=0, height=480)

    def test_aspect_ratio(self):
        """Test aspect ratio is width / height."""
        from whitted.camera.pinhole import PinholeCamera

        assert PinholeCamera(width=640, height=480).aspect_ratio == pytest.approx(4.0 / 3.0)

    def test_generate_before_begin_frame(self):
        """Test rays cannot be generated before begin_frame()."""
        from whitted.camera.pinhole import PinholeCamera

        camera = PinholeCamera()
        with pytest.raises(RuntimeError, match="begin_frame"):
            camera.generate_ray(0.0, 0.0)
        with pytest.raises(RuntimeError, match="begin_frame"):
            camera.get_camera_info()


class TestRayGeneration:
    """Tests for primary rays of an unrotated camera."""

    def test_center_ray_looks_along_z(self):
        """Test the image center ray is +z."""
        from whitted.camera.pinhole import PinholeCamera

        camera = PinholeCamera(position=(1.0, 2.0, 3.0), width=640, height=480)
        camera.begin_frame()
        ray = camera.generate_ray(320.0, 240.0)
        assert np.allclose(ray.origin, (1.0, 2.0, 3.0))
        assert np.allclose(ray.direction, (0.0, 0.0, 1.0))
        assert ray.depth == 0

    def test_unit_directions(self):
        """Test every generated direction is unit length."""
        from whitted.camera.pinhole import PinholeCamera

        camera = PinholeCamera(yaw=0.3, pitch=-0.2, roll=0.1, width=64, height=48)
        camera.begin_frame()
        for x, y in ((0, 0), (63.6, 0), (10.3, 47.9), (32, 24)):
            ray = camera.generate_ray(x, y)
            assert np.linalg.norm(ray.direction) == pytest.approx(1.0)

    def test_upper_left_corner(self):
        """Test pixel (0, 0) is the upper-left corner: -x and +y."""
        from whitted.camera.pinhole import PinholeCamera

        camera = PinholeCamera(width=640, height=480)
        camera.begin_frame()
        d = camera.generate_ray(0.0, 0.0).direction
        assert d[0] < 0.0
        assert d[1] > 0.0

    def test_diagonal_fov(self):
        """Test the corner ray makes fov / 2 with the view axis."""
        from whitted.camera.pinhole import PinholeCamera

        for fov in (60.0, 90.0, 120.0):
            camera = PinholeCamera(fov=fov, width=640, height=480)
            camera.begin_frame()
            d = camera.generate_ray(640.0, 480.0).direction
            assert math.degrees(math.acos(d[2])) == pytest.approx(fov / 2.0)

    def test_corner_info(self):
        """Test cached corners span the screen at unit depth."""
        from whitted.camera.pinhole import PinholeCamera

        camera = PinholeCamera(width=640, height=480)
        camera.begin_frame()
        info = camera.get_camera_info()
        assert info["upper_left"] == pytest.approx((-0.8, 0.6, 1.0))
        assert info["upper_right"] == pytest.approx((0.8, 0.6, 1.0))
        assert info["lower_left"] == pytest.approx((-0.8, -0.6, 1.0))


class TestCameraOrientation:
    """Tests for yaw, pitch and roll."""

    def _center(self, **kwargs):
        from whitted.camera.pinhole import PinholeCamera

        camera = PinholeCamera(width=100, height=100, **kwargs)
        camera.begin_frame()
        return camera.generate_ray(50.0, 50.0).direction

    def test_yaw_turns_toward_x(self):
        """Test positive yaw turns the view toward +x."""
        d = self._center(yaw=math.radians(90))
        assert np.allclose(d, (1.0, 0.0, 0.0), atol=1e-9)

    def test_positive_pitch_looks_up(self):
        """Test positive pitch tilts the view upward."""
        d = self._center(pitch=math.radians(15))
        assert d[1] == pytest.approx(math.sin(math.radians(15)))

    def test_demo_pose_looks_down_and_left(self):
        """Test the demo camera pose looks down and to the left."""
        d = self._center(yaw=math.radians(-10), pitch=math.radians(-15))
        assert d[0] < 0.0
        assert d[1] < 0.0
        assert d[2] > 0.0

    def test_roll_rotates_up_vector(self):
        """Test a 90-degree roll moves the top of the screen to -x."""
        from whitted.camera.pinhole import PinholeCamera

        camera = PinholeCamera(roll=math.radians(90), width=100, height=100)
        camera.begin_frame()
        top_center = camera.generate_ray(50.0, 0.0).direction
        assert top_center[0] < 0.0
        assert abs(top_center[1]) < 1e-9

    def test_moving_requires_new_frame(self):
        """Test pose changes take effect at the next begin_frame()."""
        from whitted.camera.pinhole import PinholeCamera

        camera = PinholeCamera(width=100, height=100)
        camera.begin_frame()
        camera.position = (0.0, 10.0, 0.0)
        assert camera.generate_ray(50.0, 50.0).origin[1] == 0.0
        camera.begin_frame()
        assert camera.generate_ray(50.0, 50.0).origin[1] == 10.0
