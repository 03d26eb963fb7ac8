"""Command that renders the built-in scene and saves it as a PNG image."""

from __future__ import annotations

import argparse
import random
import struct
import zlib
from pathlib import Path

from lumina.camera import Camera
from lumina.color import Color
from lumina.lights import PointLightSource
from lumina.material import Material
from lumina.renderengine import RenderEngine
from lumina.shapes import Triangle
from lumina.vector3d import Vector3D
from lumina.world import World

_PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def build_scene(width: int, height: int) -> RenderEngine:
    """Create the two-triangle scene and an engine rendering it at width x height."""
    camera = Camera(
        Vector3D(0, 0, 10), Vector3D(0, 0, 0), Vector3D(0, 1, 0), 45, width, height
    )

    world = World()
    world.ambient = Color.gray(1)
    world.background = Color(1, 1, 1)

    dont_move = Vector3D(0, 0, 0)
    step_x = Vector3D(0.5, 0, 0)

    lower = Material(
        world, color=Color(0.1, 0.7, 0.0), ka=0.1, kd=0.1, ks=1, n=1, kr=0.8, kt=0.4
    )
    world.add_object(
        Triangle(Vector3D(-10, 1, -12), Vector3D(1, 5, -24), Vector3D(-8, 5, -21), lower, step_x)
    )

    upper = Material(world, color=Color(0.7, 0.4, 0.9), ka=0.4, kd=0.5, ks=0.1, n=32)
    world.add_object(
        Triangle(Vector3D(1, 4, -5), Vector3D(1, 7, -24), Vector3D(-8, 8, -21), upper, dont_move)
    )

    world.add_light(PointLightSource(world, Vector3D(0, 10, 0), Color(1, 1, 1)))
    return RenderEngine(world, camera)


def _chunk(tag: bytes, data: bytes) -> bytes:
    return (
        struct.pack(">I", len(data))
        + tag
        + data
        + struct.pack(">I", zlib.crc32(tag + data) & 0xFFFFFFFF)
    )


def write_png(path: str | Path, width: int, height: int, pixels: bytes) -> None:
    """Write 8-bit RGB *pixels*, rows top to bottom, as a PNG file."""
    if width <= 0 or height <= 0:
        raise ValueError(f"image size must be positive, got {width}x{height}")
    stride = width * 3
    if len(pixels) != stride * height:
        raise ValueError(
            f"expected {stride * height} bytes of RGB data, got {len(pixels)}"
        )
    raw = b"".join(
        b"\x00" + bytes(pixels[row * stride:(row + 1) * stride]) for row in range(height)
    )
    header = struct.pack(">IIBBBBB", width, height, 8, 2, 0, 0, 0)
    data = (
        _PNG_SIGNATURE
        + _chunk(b"IHDR", header)
        + _chunk(b"IDAT", zlib.compress(raw))
        + _chunk(b"IEND", b"")
    )
    Path(path).write_bytes(data)


def main(argv: list[str] | None = None) -> int:
    """Render the scene and save it; returns the exit status."""
    parser = argparse.ArgumentParser(description="Ray trace the built-in scene to a PNG.")
    parser.add_argument("--width", type=int, default=1920, help="image width in pixels")
    parser.add_argument("--height", type=int, default=1080, help="image height in pixels")
    parser.add_argument("--output", default="motionblurz.png", help="PNG file to write")
    parser.add_argument("--seed", type=int, default=None, help="seed for random sampling")
    args = parser.parse_args(argv)

    if args.width <= 0 or args.height <= 0:
        parser.error("width and height must be positive")

    engine = build_scene(args.width, args.height)
    if args.seed is not None:
        engine.rng = random.Random(args.seed)
        for obj in engine.world.objects:
            obj.material.rng = random.Random(args.seed)

    bitmap = engine.render()
    write_png(args.output, args.width, args.height, bitmap)
    return 0