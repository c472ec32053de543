import logging

import numpy as np
import pytest
from PIL import Image

from wallframes.layout import PlacedFrame, Wall
from wallframes.render import frame_color, rasterize, render_preview, save_png

WALL = Wall(40, 30)
FRAMES = [PlacedFrame(2, 3, 10, 5), PlacedFrame(20, 10, 6, 8, margin=2)]


def test_frame_color_steps_with_index():
    assert frame_color(0) == (100, 50, 150)
    assert frame_color(1) == (120, 65, 160)
    assert frame_color(5) == (200, 125, 200)


def test_frame_color_wraps_to_one_byte():
    # 100 + 10*20 = 300 -> 44, 50 + 10*15 = 200, 150 + 10*10 = 250
    assert frame_color(10) == (44, 200, 250)
    assert frame_color(11) == (64, 215, 4)
    assert frame_color(256) == frame_color(0)


def test_rasterize_buffer_layout():
    buf = rasterize(WALL, FRAMES)
    assert buf.shape == (30, 40, 3)
    assert buf.dtype == np.uint8
    assert tuple(buf[0, 0]) == (255, 255, 255)
    assert tuple(buf[3, 2]) == frame_color(0)
    assert tuple(buf[7, 11]) == frame_color(0)
    # right/bottom edges are exclusive
    assert tuple(buf[8, 2]) == (255, 255, 255)
    assert tuple(buf[3, 12]) == (255, 255, 255)
    assert tuple(buf[17, 25]) == frame_color(1)


def test_rasterize_counts_painted_pixels():
    buf = rasterize(WALL, FRAMES)
    painted = np.any(buf != 255, axis=2).sum()
    assert painted == 10 * 5 + 6 * 8


def test_rasterize_empty_layout_is_white():
    assert (rasterize(WALL, []) == 255).all()


def test_save_png_writes_image(tmp_path):
    out = tmp_path / "wall.png"
    assert save_png(WALL, FRAMES, str(out)) == str(out)
    with Image.open(out) as im:
        assert im.format == "PNG"
        assert im.size == (40, 30)
        assert im.convert("RGB").getpixel((21, 11)) == frame_color(1)


def test_save_png_creates_parent_dirs(tmp_path):
    out = tmp_path / "nested" / "dir" / "wall.png"
    assert save_png(WALL, FRAMES, str(out)) == str(out)
    assert out.exists()


def test_save_png_failure_is_logged_not_raised(tmp_path, caplog):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    with caplog.at_level(logging.ERROR, logger="wallframes"):
        assert save_png(WALL, FRAMES, str(blocker / "wall.png")) is None
    assert any("Error writing" in r.getMessage() for r in caplog.records)


def test_render_preview_saves_figure(tmp_path):
    out = tmp_path / "preview.png"
    assert render_preview(WALL, FRAMES, str(out), title="demo") == str(out)
    assert out.stat().st_size > 0


def test_render_preview_failure_returns_none(tmp_path, caplog):
    blocker = tmp_path / "blocker"
    blocker.write_text("x")
    with caplog.at_level(logging.ERROR, logger="wallframes"):
        assert render_preview(WALL, FRAMES, str(blocker / "p.png")) is None
    assert any("preview" in r.getMessage() for r in caplog.records)
