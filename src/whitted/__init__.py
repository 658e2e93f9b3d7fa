"""Recursive (Whitted-style) ray tracer.

This package renders scenes of spheres, cubes and planes with mirror
reflection, refraction and shadowed point-light shading, with:
- Per-node affine transforms between object and world space
- Layered shaders with checker, bitmap and Fresnel textures
- Cube-map environments for rays that escape the scene
- Fixed five-sample antialiasing
- Taichi-backed framebuffer and GGUI preview window

Subpackages:
    core: Rays and vector helpers, transforms, the color evaluator,
        the framebuffer and the frame sampler
    geometry: Shape primitives and intersection records
    materials: Shaders, textures and point lights
    scene: Scene nodes, ray-scene queries, environments and the demo scene
    camera: Pinhole camera with ray generation
    preview: Display processing and the preview window
"""

__version__ = "0.1.0"
