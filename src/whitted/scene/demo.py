"""Demo scene configuration.

This module provides a factory for the scene rendered by the example
script: a glass-like sphere and a checkered cube standing on a slightly
reflective floor, lit by one warm point light.

The scene consists of:
- Floor: plane of half-extent 80, tiled Lambert with a 1% mirror layer
- Sphere: radius 30 at (-10, 60, 0), refractive (ior 1.33, 95% transmission)
- Cube: half-side 15, rotated (30°, 0°, 60°) and moved to (40, 16, 30)
- Camera: at (0, 60, -120), turned 10° left and tilted 15° down

With an asset folder the floor uses ``floor.bmp`` and the background is the
cube map in ``env/forest``; without one the floor is a procedural checker
and rays that miss everything are black.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from whitted.scene.demo import create_demo_scene
    >>>
    >>> demo = create_demo_scene(width=320, height=240)
    >>> demo.camera.begin_frame()
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from pathlib import Path

from whitted.camera.pinhole import PinholeCamera
from whitted.core.ray import Color, as_color
from whitted.core.transform import Transform
from whitted.geometry import Cube, Plane, Sphere
from whitted.materials import (
    BitmapTexture,
    CheckerTexture,
    Lambert,
    Layered,
    PointLight,
    Reflection,
    Refraction,
)
from whitted.scene.environment import CubemapEnvironment, Environment
from whitted.scene.scene import NodeHandle, Scene

logger = logging.getLogger(__name__)


@dataclass
class DemoSceneParams:
    """Lighting parameters of the demo scene.

    Attributes:
        light_position: World position of the point light.
        light_color: RGB colour of the light.
        light_intensity: Scalar light power (inverse-square falloff).
        ambient: Grey level of the ambient light.

    Example:
        >>> params = DemoSceneParams()
        >>> params.light_intensity
        50000.0
    """

    light_position: tuple[float, float, float] = (100.0, 200.0, -80.0)
    light_color: tuple[float, float, float] = (1.0, 1.0, 0.9)
    light_intensity: float = 50000.0
    ambient: float = 0.5


# =============================================================================
# Demo Scene Constants
# =============================================================================

FLOOR_LIMIT = 80.0
FLOOR_TEXTURE_SCALING = 1.0 / 100.0
FLOOR_REFLECTION_BLEND = 0.01

SPHERE_RADIUS = 30.0
SPHERE_POSITION = (-10.0, 60.0, 0.0)
SPHERE_IOR = 1.33
SPHERE_TRANSMISSION = 0.95

CUBE_HALF_SIDE = 15.0
CUBE_ROTATION = (math.radians(30), 0.0, math.radians(60))
CUBE_POSITION = (40.0, 16.0, 30.0)

# Per-frame movement of the cube in the animated demo
CUBE_STEP = (-10.0, 0.0, 0.0)

CAMERA_POSITION = (0.0, 60.0, -120.0)
CAMERA_YAW = math.radians(-10)
CAMERA_PITCH = math.radians(-15)

CHECKER_COLORS = ((1.0, 0.5, 0.5), (0.5, 1.0, 1.0))
FLOOR_CHECKER_COLORS = ((0.8, 0.8, 0.8), (0.3, 0.3, 0.3))
FLOOR_CHECKER_SCALING = 1.0 / 20.0

ENVIRONMENT_FOLDER = Path("env") / "forest"
FLOOR_BITMAP = "floor.bmp"


@dataclass
class DemoScene:
    """Everything needed to render the demo.

    Attributes:
        scene: The (unfrozen) scene.
        camera: Camera configured for the demo view.
        environment: Cube-map background, or None without assets.
        lights: The point lights.
        ambient_light: Ambient light colour.
        sphere_handle: Handle of the refractive sphere node.
        cube_handle: Handle of the checkered cube node.
    """

    scene: Scene
    camera: PinholeCamera
    environment: Environment | None
    lights: list[PointLight]
    ambient_light: Color
    sphere_handle: NodeHandle
    cube_handle: NodeHandle

    def step_animation(self) -> None:
        """Move the cube by CUBE_STEP (call between frames)."""
        self.scene[self.cube_handle].transform.translate(CUBE_STEP)


def create_demo_scene(
    params: DemoSceneParams | None = None,
    assets_dir: str | Path | None = None,
    width: int = 640,
    height: int = 480,
) -> DemoScene:
    """Create the demo scene.

    Args:
        params: Optional lighting parameters. If None, uses DemoSceneParams().
        assets_dir: Folder containing ``floor.bmp`` and ``env/forest``. If
            None, procedural textures are used and there is no environment.
        width: Frame width for the camera.
        height: Frame height for the camera.

    Returns:
        The assembled DemoScene.

    Raises:
        FileNotFoundError: If assets_dir is given but an asset is missing.
    """
    if params is None:
        params = DemoSceneParams()

    environment: Environment | None = None
    if assets_dir is not None:
        assets = Path(assets_dir)
        cubemap = CubemapEnvironment()
        cubemap.load_maps(assets / ENVIRONMENT_FOLDER)
        environment = cubemap
        floor_texture = BitmapTexture(assets / FLOOR_BITMAP, scaling=FLOOR_TEXTURE_SCALING)
        logger.info("Using demo assets from %s", assets)
    else:
        floor_texture = CheckerTexture(*FLOOR_CHECKER_COLORS, scaling=FLOOR_CHECKER_SCALING)
        logger.debug("No asset folder given, using procedural floor")

    scene = Scene()

    floor_shader = Layered()
    floor_shader.add_layer(Lambert(texture=floor_texture), (1.0, 1.0, 1.0))
    floor_shader.add_layer(Reflection(1.0), as_color(FLOOR_REFLECTION_BLEND))
    scene.add(Plane(limit=FLOOR_LIMIT), floor_shader)

    sphere_transform = Transform()
    sphere_transform.translate(SPHERE_POSITION)
    sphere_handle = scene.add(
        Sphere(radius=SPHERE_RADIUS),
        Refraction(SPHERE_IOR, SPHERE_TRANSMISSION),
        sphere_transform,
    )

    cube_transform = Transform()
    cube_transform.rotate(*CUBE_ROTATION)
    cube_transform.translate(CUBE_POSITION)
    cube_handle = scene.add(
        Cube(half_side=CUBE_HALF_SIDE),
        Lambert(texture=CheckerTexture(*CHECKER_COLORS)),
        cube_transform,
    )

    camera = PinholeCamera(
        position=CAMERA_POSITION,
        yaw=CAMERA_YAW,
        pitch=CAMERA_PITCH,
        width=width,
        height=height,
    )

    light = PointLight(
        position=params.light_position,
        color=params.light_color,
        intensity=params.light_intensity,
    )

    return DemoScene(
        scene=scene,
        camera=camera,
        environment=environment,
        lights=[light],
        ambient_light=as_color(params.ambient),
        sphere_handle=sphere_handle,
        cube_handle=cube_handle,
    )
