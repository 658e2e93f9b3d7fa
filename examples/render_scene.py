#!/usr/bin/env python3
"""Render the demo scene.

This script builds the demo scene (refractive sphere, checkered cube and
reflective floor), renders one or more frames with the Whitted color
evaluator and shows them in a preview window. Between frames the cube moves
10 units toward -x.

Usage:
    python examples/render_scene.py [options]

Options:
    --width WIDTH         Image width in pixels (default: 640)
    --height HEIGHT       Image height in pixels (default: 480)
    --antialiasing        Take five sub-pixel samples per pixel
    --frames FRAMES       Number of frames to render (default: 1)
    --assets DIR          Folder with floor.bmp and env/forest cube map
    --max-depth DEPTH     Maximum trace depth (default: 10)
    --tone-map METHOD     none, reinhard or exposure (default: none)
    --no-window           Render without opening a preview window
    --quiet               Suppress progress output

Example:
    python examples/render_scene.py --width 320 --height 240 --antialiasing
"""

from __future__ import annotations

import argparse
import logging
import sys

import taichi as ti


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render the demo scene.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--width",
        type=int,
        default=640,
        help="Image width in pixels (default: 640)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=480,
        help="Image height in pixels (default: 480)",
    )
    parser.add_argument(
        "--antialiasing",
        action="store_true",
        help="Take five sub-pixel samples per pixel",
    )
    parser.add_argument(
        "--frames",
        type=int,
        default=1,
        help="Number of frames to render (default: 1)",
    )
    parser.add_argument(
        "--assets",
        type=str,
        default=None,
        help="Folder with floor.bmp and env/forest (default: procedural textures)",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=10,
        help="Maximum trace depth (default: 10)",
    )
    parser.add_argument(
        "--tone-map",
        choices=("none", "reinhard", "exposure"),
        default="none",
        help="Tone mapping applied before display (default: none)",
    )
    parser.add_argument(
        "--no-window",
        action="store_true",
        help="Render without opening a preview window",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args()


def render_scene(
    width: int = 640,
    height: int = 480,
    antialiasing: bool = False,
    frames: int = 1,
    assets: str | None = None,
    max_depth: int = 10,
    tone_map: str = "none",
    show_window: bool = True,
    quiet: bool = False,
) -> float:
    """Render the demo scene, optionally showing each frame.

    Returns:
        Duration of the last frame in milliseconds.
    """
    # Lazy imports to allow Taichi initialization first
    from whitted.core.framebuffer import Framebuffer
    from whitted.core.integrator import WhittedIntegrator
    from whitted.core.sampler import FrameSampler
    from whitted.core.settings import RenderSettings
    from whitted.preview.interactive import InteractivePreview
    from whitted.scene.demo import create_demo_scene

    if not quiet:
        print(f"Creating demo scene ({width}x{height})...")

    settings = RenderSettings(max_trace_depth=max_depth, antialiasing=antialiasing)
    demo = create_demo_scene(assets_dir=assets, width=width, height=height)
    integrator = WhittedIntegrator(
        demo.scene,
        environment=demo.environment,
        lights=demo.lights,
        ambient_light=demo.ambient_light,
        settings=settings,
    )
    sampler = FrameSampler(integrator, demo.camera, Framebuffer(width, height), settings)

    preview = None
    if show_window:
        if InteractivePreview.is_display_available():
            preview = InteractivePreview(width, height, tone_map=tone_map)
        elif not quiet:
            print("No display available, rendering without a window")

    for frame in range(frames):
        demo.step_animation()
        framebuffer = sampler.render()
        if not quiet:
            print(f"Frame {frame + 1}/{frames} took {sampler.last_frame_ms:.0f} ms")

        if preview is not None:
            preview.show_framebuffer(framebuffer)

    if preview is not None:
        preview.wait_for_exit()

    if not quiet:
        print("Exited cleanly")

    return sampler.last_frame_ms


def main() -> int:
    """Main entry point."""
    args = parse_args()

    if not args.quiet:
        logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    # Use GPU if available, fall back to CPU
    try:
        ti.init(arch=ti.gpu)
        if not args.quiet:
            print("Using GPU backend")
    except Exception:
        ti.init(arch=ti.cpu)
        if not args.quiet:
            print("Using CPU backend")

    try:
        render_scene(
            width=args.width,
            height=args.height,
            antialiasing=args.antialiasing,
            frames=args.frames,
            assets=args.assets,
            max_depth=args.max_depth,
            tone_map=args.tone_map,
            show_window=not args.no_window,
            quiet=args.quiet,
        )
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
