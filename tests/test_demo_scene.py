"""Tests for the demo scene factory.

Covers:
- Scene layout, handles and camera pose
- Procedural fallback and asset loading
- Cube animation between frames
"""

import math

import numpy as np
import pytest
from PIL import Image


def _write_assets(root):
    from whitted.scene.environment import FACE_NAMES

    pixels = np.full((4, 4, 3), 128, dtype=np.uint8)
    Image.fromarray(pixels).save(root / "floor.bmp")
    forest = root / "env" / "forest"
    forest.mkdir(parents=True)
    for name in FACE_NAMES:
        Image.fromarray(pixels).save(forest / f"{name}.bmp")


class TestDemoScene:
    """Tests for create_demo_scene()."""

    def test_default_layout(self):
        """Test the three nodes, handles and lighting."""
        from whitted.geometry import Cube, Plane, Sphere
        from whitted.materials import Lambert, Layered, Refraction
        from whitted.scene.demo import create_demo_scene

        demo = create_demo_scene()
        scene = demo.scene
        assert len(scene) == 3
        assert isinstance(scene[0].geometry, Plane)
        assert isinstance(scene[0].shader, Layered)
        assert isinstance(scene[demo.sphere_handle].geometry, Sphere)
        assert isinstance(scene[demo.sphere_handle].shader, Refraction)
        assert isinstance(scene[demo.cube_handle].geometry, Cube)
        assert isinstance(scene[demo.cube_handle].shader, Lambert)
        assert not scene.frozen

        (light,) = demo.lights
        assert np.allclose(light.position, (100.0, 200.0, -80.0))
        assert light.intensity == 50000.0
        assert np.allclose(demo.ambient_light, 0.5)
        assert demo.environment is None

    def test_node_placement(self):
        """Test the sphere and cube transforms."""
        from whitted.scene.demo import create_demo_scene

        demo = create_demo_scene()
        sphere = demo.scene[demo.sphere_handle]
        cube = demo.scene[demo.cube_handle]
        assert np.allclose(sphere.transform.transform_point((0, 0, 0)), (-10.0, 60.0, 0.0))
        assert np.allclose(cube.transform.transform_point((0, 0, 0)), (40.0, 16.0, 30.0))

    def test_camera_pose(self):
        """Test the camera position, angles and resolution."""
        from whitted.scene.demo import create_demo_scene

        demo = create_demo_scene(width=320, height=240)
        camera = demo.camera
        assert camera.position == (0.0, 60.0, -120.0)
        assert camera.yaw == pytest.approx(math.radians(-10))
        assert camera.pitch == pytest.approx(math.radians(-15))
        assert (camera.width, camera.height) == (320, 240)

    def test_custom_params(self):
        """Test lighting parameters are applied."""
        from whitted.scene.demo import DemoSceneParams, create_demo_scene

        params = DemoSceneParams(light_intensity=10.0, ambient=0.0)
        demo = create_demo_scene(params=params)
        assert demo.lights[0].intensity == 10.0
        assert np.all(demo.ambient_light == 0.0)

    def test_step_animation(self):
        """Test each step moves the cube 10 units toward -x."""
        from whitted.scene.demo import create_demo_scene

        demo = create_demo_scene()
        demo.step_animation()
        demo.step_animation()
        cube = demo.scene[demo.cube_handle]
        assert np.allclose(cube.transform.transform_point((0, 0, 0)), (20.0, 16.0, 30.0))

    def test_assets(self, tmp_path):
        """Test an asset folder enables the cube map and bitmap floor."""
        from whitted.materials import BitmapTexture
        from whitted.scene.demo import create_demo_scene

        _write_assets(tmp_path)
        demo = create_demo_scene(assets_dir=tmp_path)
        assert demo.environment is not None
        assert demo.environment.is_loaded()
        floor_lambert = demo.scene[0].shader.layers[0].shader
        assert isinstance(floor_lambert.texture, BitmapTexture)

    def test_missing_assets(self, tmp_path):
        """Test a folder without the assets raises FileNotFoundError."""
        from whitted.scene.demo import create_demo_scene

        with pytest.raises(FileNotFoundError):
            create_demo_scene(assets_dir=tmp_path)
