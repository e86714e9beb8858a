"""Rasterize a single frame with Pillow for quick visual checks."""

import logging
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from pathline.config import Config
from pathline.geometry import DrawPath, build_path, dot_positions
from pathline.models import FrameState, MarkerState

logger = logging.getLogger(__name__)

BACKGROUND = (0, 0, 0, 255)
GUIDE_COLOR = (255, 255, 255, 38)  # static path at ~15% opacity
DOT_COLOR = (255, 255, 255, 255)
MARKER_FILL = (26, 26, 26)
MARKER_OUTLINE = (255, 255, 255)
TEXT_COLOR = (255, 255, 255, 255)

MARKER_RADIUS = 25
LABEL_OFFSET_X = 45


def _dot(draw: ImageDraw.ImageDraw, x: float, y: float, r: float, fill: tuple) -> None:
    draw.ellipse((x - r, y - r, x + r, y + r), fill=fill)


def _draw_dots(draw: ImageDraw.ImageDraw, path: DrawPath, positions: list[float], radius: float, fill: tuple) -> None:
    length = path.length
    if length <= 0:
        return
    for s in positions:
        p = path.point_at(s / length)
        _dot(draw, p.x, p.y, radius, fill)


def _text_size(draw: ImageDraw.ImageDraw, text: str, font) -> tuple[int, int]:
    left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
    return right - left, bottom - top


def _draw_marker(layer: Image.Image, marker: MarkerState, font) -> None:
    draw = ImageDraw.Draw(layer)
    x, y = marker.position.x, marker.position.y
    r = MARKER_RADIUS * marker.reveal.scale
    alpha = round(255 * marker.reveal.opacity)

    if r > 0 and alpha > 0:
        draw.ellipse(
            (x - r, y - r, x + r, y + r),
            fill=MARKER_FILL + (alpha,),
            outline=MARKER_OUTLINE + (alpha,),
            width=2,
        )
        if marker.icon:
            w, h = _text_size(draw, marker.icon, font)
            draw.text((x - w / 2, y - h / 2), marker.icon, font=font, fill=(255, 255, 255, alpha))

    # label opacity is always full; typing alone reveals it
    if marker.reveal.visible_text:
        _, h = _text_size(draw, marker.reveal.visible_text, font)
        draw.text((x + LABEL_OFFSET_X, y - h / 2), marker.reveal.visible_text, font=font, fill=TEXT_COLOR)


def render_preview(state: FrameState, config: Config) -> Image.Image:
    """Draw the guide, the flowing drawn path and every reached checkpoint."""
    path = build_path(config.path)
    stroke = config.stroke
    dot_radius = stroke.width / 2
    font = ImageFont.load_default()

    image = Image.new("RGBA", (config.width, config.height), BACKGROUND)

    guide = Image.new("RGBA", image.size, (0, 0, 0, 0))
    _draw_dots(
        ImageDraw.Draw(guide), path,
        dot_positions(path.length, stroke.dot_gap + stroke.dot_size, 0.0),
        dot_radius, GUIDE_COLOR,
    )
    image = Image.alpha_composite(image, guide)

    flow = Image.new("RGBA", image.size, (0, 0, 0, 0))
    _draw_dots(
        ImageDraw.Draw(flow), path,
        dot_positions(state.drawn_length, stroke.dot_gap + stroke.dot_size, state.flow_offset),
        dot_radius, DOT_COLOR,
    )
    image = Image.alpha_composite(image, flow)

    for marker in state.visible_markers:
        layer = Image.new("RGBA", image.size, (0, 0, 0, 0))
        _draw_marker(layer, marker, font)
        image = Image.alpha_composite(image, layer)

    return image


def save_preview(state: FrameState, config: Config, output_path: Path) -> Path:
    image = render_preview(state, config)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    image.convert("RGB").save(output_path)
    logger.info(
        "Frame %s preview -> %s (progress %.3f, %d markers)",
        state.frame, output_path, state.render.visible_progress, len(state.visible_markers),
    )
    return output_path
