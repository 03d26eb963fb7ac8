import struct
import zlib

import pytest

from lumina.cli import build_scene, main, write_png
from lumina.color import Color
from lumina.shapes import Triangle

SIGNATURE = b"\x89PNG\r\n\x1a\n"


def _chunks(data):
    assert data[:8] == SIGNATURE
    pos = 8
    chunks = []
    while pos < len(data):
        (length,) = struct.unpack(">I", data[pos:pos + 4])
        tag = data[pos + 4:pos + 8]
        body = data[pos + 8:pos + 8 + length]
        (crc,) = struct.unpack(">I", data[pos + 8 + length:pos + 12 + length])
        assert crc == zlib.crc32(tag + body) & 0xFFFFFFFF
        chunks.append((tag, body))
        pos += 12 + length
    return chunks


def test_write_png_round_trip(tmp_path):
    width, height = 3, 2
    pixels = bytes(range(width * height * 3))
    path = tmp_path / "out.png"
    write_png(path, width, height, pixels)
    chunks = _chunks(path.read_bytes())
    tags = [tag for tag, _ in chunks]
    assert tags == [b"IHDR", b"IDAT", b"IEND"]
    assert struct.unpack(">IIBBBBB", chunks[0][1]) == (width, height, 8, 2, 0, 0, 0)
    raw = zlib.decompress(chunks[1][1])
    stride = width * 3
    rows = [raw[r * (stride + 1):(r + 1) * (stride + 1)] for r in range(height)]
    assert all(row[0] == 0 for row in rows)
    assert b"".join(row[1:] for row in rows) == pixels


def test_write_png_rejects_wrong_length(tmp_path):
    with pytest.raises(ValueError):
        write_png(tmp_path / "bad.png", 2, 2, bytes(5))


def test_write_png_rejects_empty_size(tmp_path):
    with pytest.raises(ValueError):
        write_png(tmp_path / "bad.png", 0, 2, b"")


def test_build_scene_contents():
    engine = build_scene(8, 6)
    assert (engine.camera.width, engine.camera.height) == (8, 6)
    assert len(engine.world.objects) == 2
    assert all(isinstance(obj, Triangle) for obj in engine.world.objects)
    assert len(engine.world.lights) == 1
    assert engine.world.background == Color(1, 1, 1)
    assert engine.world.ambient == Color.gray(1)
    assert engine.world.objects[0].material.color == Color(0.1, 0.7, 0.0)
    assert engine.world.objects[1].material.n == 32


def test_main_writes_png(tmp_path):
    path = tmp_path / "scene.png"
    status = main(["--width", "4", "--height", "3", "--output", str(path), "--seed", "1"])
    assert status == 0
    chunks = _chunks(path.read_bytes())
    width, height = struct.unpack(">II", chunks[0][1][:8])
    assert (width, height) == (4, 3)
    raw = zlib.decompress(chunks[1][1])
    assert len(raw) == height * (width * 3 + 1)


def test_main_is_deterministic_with_seed(tmp_path):
    first = tmp_path / "a.png"
    second = tmp_path / "b.png"
    main(["--width", "4", "--height", "3", "--output", str(first), "--seed", "9"])
    main(["--width", "4", "--height", "3", "--output", str(second), "--seed", "9"])
    assert first.read_bytes() == second.read_bytes()


def test_main_rejects_non_positive_size(tmp_path):
    with pytest.raises(SystemExit):
        main(["--width", "0", "--height", "3", "--output", str(tmp_path / "x.png")])