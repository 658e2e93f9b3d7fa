"""Scene module for scene representation and ray-scene queries.

Components:
    node: A geometry placed in the world with a shader
    scene: Ordered, freezable collection of nodes
    intersection: Nearest-hit and shadow visibility queries
    environment: Background colours for rays that hit nothing
    demo: Factory for the demo scene
"""

from .demo import DemoScene, DemoSceneParams, create_demo_scene
from .environment import CubemapEnvironment, Environment, SolidEnvironment
from .intersection import NO_HIT_DISTANCE, SceneHit, find_closest, is_visible
from .node import SceneNode
from .scene import NodeHandle, Scene

__all__ = [
    "SceneNode",
    "Scene",
    "NodeHandle",
    "SceneHit",
    "NO_HIT_DISTANCE",
    "find_closest",
    "is_visible",
    "Environment",
    "SolidEnvironment",
    "CubemapEnvironment",
    "DemoScene",
    "DemoSceneParams",
    "create_demo_scene",
]
