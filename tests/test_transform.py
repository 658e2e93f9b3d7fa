"""Unit tests for node transforms.

Tests cover:
- Identity, translation, scaling and rotation
- Composition in call order
- Point and direction round trips
- Singular transforms
"""

import math

import numpy as np
import pytest


class TestTransformBasics:
    """Tests for single transform operations."""

    def test_identity(self):
        """Test a new transform leaves points unchanged."""
        from whitted.core.transform import Transform

        T = Transform()
        p = T.transform_point((1.0, 2.0, 3.0))
        assert np.allclose(p, (1.0, 2.0, 3.0))

    def test_translate_is_cumulative(self):
        """Test repeated translations add up."""
        from whitted.core.transform import Transform

        T = Transform()
        T.translate((1.0, 0.0, 0.0))
        T.translate((0.0, 2.0, 0.0))
        assert np.allclose(T.transform_point((0.0, 0.0, 0.0)), (1.0, 2.0, 0.0))

    def test_translate_ignored_for_directions(self):
        """Test directions are not affected by translation."""
        from whitted.core.transform import Transform

        T = Transform()
        T.translate((5.0, 5.0, 5.0))
        assert np.allclose(T.transform_direction((0.0, 0.0, 1.0)), (0.0, 0.0, 1.0))

    def test_scale(self):
        """Test per-axis scaling."""
        from whitted.core.transform import Transform

        T = Transform()
        T.scale(2.0, 3.0, 4.0)
        assert np.allclose(T.transform_point((1.0, 1.0, 1.0)), (2.0, 3.0, 4.0))

    def test_rotate_yaw(self):
        """Test a 90-degree yaw turns +z toward +x."""
        from whitted.core.transform import Transform

        T = Transform()
        T.rotate(math.radians(90), 0.0, 0.0)
        assert np.allclose(T.transform_direction((0.0, 0.0, 1.0)), (1.0, 0.0, 0.0), atol=1e-12)

    def test_rotate_roll(self):
        """Test a 90-degree roll turns +x toward +y."""
        from whitted.core.transform import Transform

        T = Transform()
        T.rotate(0.0, 0.0, math.radians(90))
        assert np.allclose(T.transform_direction((1.0, 0.0, 0.0)), (0.0, 1.0, 0.0), atol=1e-12)

    def test_reset(self):
        """Test reset restores the identity."""
        from whitted.core.transform import Transform

        T = Transform()
        T.scale(2.0, 2.0, 2.0)
        T.translate((1.0, 1.0, 1.0))
        T.reset()
        assert np.allclose(T.transform_point((1.0, 2.0, 3.0)), (1.0, 2.0, 3.0))


class TestTransformComposition:
    """Tests for composing several operations."""

    def test_scale_then_translate(self):
        """Test scaling applies before a later translation."""
        from whitted.core.transform import Transform

        T = Transform()
        T.scale(2.0, 2.0, 2.0)
        T.translate((10.0, 0.0, 0.0))
        assert np.allclose(T.transform_point((1.0, 0.0, 0.0)), (12.0, 0.0, 0.0))

    def test_translate_then_scale(self):
        """Test a later scale also scales the earlier offset."""
        from whitted.core.transform import Transform

        T = Transform()
        T.translate((10.0, 0.0, 0.0))
        T.scale(2.0, 2.0, 2.0)
        assert np.allclose(T.transform_point((1.0, 0.0, 0.0)), (22.0, 0.0, 0.0))

    def test_point_round_trip(self):
        """Test untransform_point inverts transform_point."""
        from whitted.core.transform import Transform

        T = Transform()
        T.scale(1.0, 2.0, 0.5)
        T.rotate(math.radians(30), 0.0, math.radians(60))
        T.translate((40.0, 16.0, 30.0))
        p = np.array((3.0, -7.0, 11.0))
        assert np.allclose(T.untransform_point(T.transform_point(p)), p)

    def test_direction_round_trip(self):
        """Test untransform_direction inverts transform_direction."""
        from whitted.core.transform import Transform

        T = Transform()
        T.rotate(0.3, 0.2, 0.1)
        T.scale(3.0, 1.0, 1.0)
        d = np.array((0.0, 0.6, 0.8))
        assert np.allclose(T.untransform_direction(T.transform_direction(d)), d)

    def test_copy_is_independent(self):
        """Test copies do not share state."""
        from whitted.core.transform import Transform

        T = Transform()
        U = T.copy()
        U.translate((1.0, 0.0, 0.0))
        assert np.allclose(T.offset, 0.0)


class TestTransformErrors:
    """Tests for invalid transforms."""

    def test_zero_scale_rejected(self):
        """Test a singular scale raises and leaves the transform usable."""
        from whitted.core.transform import Transform

        T = Transform()
        with pytest.raises(ValueError, match="not invertible"):
            T.scale(0.0, 1.0, 1.0)
        assert np.allclose(T.matrix, np.identity(3))
