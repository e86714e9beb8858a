"""Tests for the Pillow preview renderer."""

from PIL import Image

from pathline.output.preview import render_preview, save_preview
from pathline.scene import Scene


class TestRenderPreview:
    def test_canvas_size(self, line_config):
        image = render_preview(Scene(line_config).frame_state(0), line_config)
        assert image.size == (200, 100)

    def test_marker_hidden_before_arrival(self, line_config):
        image = render_preview(Scene(line_config).frame_state(10), line_config)
        assert image.getpixel((100, 70))[:3] == (0, 0, 0)

    def test_marker_drawn_after_appear(self, line_config):
        image = render_preview(Scene(line_config).frame_state(100), line_config)
        assert image.getpixel((100, 70))[:3] == (26, 26, 26)

    def test_drawn_dots_are_bright(self, line_config):
        # flow time 0 puts a dot exactly at the path start
        image = render_preview(Scene(line_config).frame_state(0), line_config)
        assert image.getpixel((10, 50))[:3] == (255, 255, 255)


def test_save_preview(tmp_path, line_config):
    out = save_preview(Scene(line_config).frame_state(120), line_config, tmp_path / "sub" / "f.png")
    with Image.open(out) as img:
        assert img.size == (200, 100)
