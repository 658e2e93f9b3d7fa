"""Scene container: the ordered sequence of nodes.

Nodes are added during scene construction and addressed by their handle
(insertion index). Once a scene is frozen, which the color evaluator does
when it takes the scene, no further nodes may be added. Node transforms can
still be changed between frames.

Example:
    >>> from whitted.geometry import Plane, Sphere
    >>> from whitted.materials import Lambert
    >>> from whitted.scene.scene import Scene
    >>> scene = Scene()
    >>> floor = scene.add(Plane(limit=80.0), Lambert(color=(0.5, 0.5, 0.5)))
    >>> ball = scene.add(Sphere(radius=30.0), Lambert())
    >>> scene.freeze()
"""

from __future__ import annotations

from collections.abc import Iterator

from whitted.core.transform import Transform
from whitted.geometry.base import Geometry
from whitted.materials.base import Shader
from whitted.scene.node import SceneNode

# Node handle: index into the scene's node sequence
NodeHandle = int


class Scene:
    """An ordered, freezable sequence of scene nodes."""

    def __init__(self) -> None:
        self._nodes: list[SceneNode] = []
        self._frozen = False

    @property
    def frozen(self) -> bool:
        """Whether nodes can no longer be added."""
        return self._frozen

    @property
    def nodes(self) -> tuple[SceneNode, ...]:
        """The nodes in insertion order."""
        return tuple(self._nodes)

    def add_node(self, node: SceneNode) -> NodeHandle:
        """Append a node.

        Returns:
            The handle of the added node.

        Raises:
            RuntimeError: If the scene is frozen.
        """
        if self._frozen:
            raise RuntimeError("Cannot add nodes to a frozen scene")
        self._nodes.append(node)
        return len(self._nodes) - 1

    def add(
        self,
        geometry: Geometry,
        shader: Shader,
        transform: Transform | None = None,
    ) -> NodeHandle:
        """Create a node from its parts and append it.

        Returns:
            The handle of the added node.
        """
        if transform is None:
            transform = Transform()
        return self.add_node(SceneNode(geometry, shader, transform))

    def freeze(self) -> Scene:
        """Stop accepting new nodes. Idempotent; returns the scene."""
        self._frozen = True
        return self

    def __getitem__(self, handle: NodeHandle) -> SceneNode:
        return self._nodes[handle]

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[SceneNode]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"Scene(nodes={len(self._nodes)}, frozen={self._frozen})"
