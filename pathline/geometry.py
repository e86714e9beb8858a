"""Path geometry: map progress along the path to canvas coordinates."""

import abc
import math

from pathline.config import ArcPathConfig, LinePathConfig
from pathline.models import Point


class DrawPath(abc.ABC):
    """A fixed parametric curve, progress 0 at the start and 1 at the end."""

    @abc.abstractmethod
    def point_at(self, progress: float) -> Point:
        """Point at ``progress``. Total over the reals; callers clamp if they need to."""
        ...

    @property
    @abc.abstractmethod
    def length(self) -> float:
        ...


class ArcPath(DrawPath):
    def __init__(self, cx: float, cy: float, radius: float, start_angle: float, angle_span: float) -> None:
        self.cx = cx
        self.cy = cy
        self.radius = radius
        self.start_angle = start_angle
        self.angle_span = angle_span

    def point_at(self, progress: float) -> Point:
        angle = self.start_angle + progress * self.angle_span
        return Point(
            x=self.cx + self.radius * math.cos(angle),
            y=self.cy + self.radius * math.sin(angle),
        )

    @property
    def length(self) -> float:
        return abs(self.angle_span) * self.radius


class LinePath(DrawPath):
    """Horizontal line from x0 to x1 at height y."""

    def __init__(self, x0: float, x1: float, y: float) -> None:
        self.x0 = x0
        self.x1 = x1
        self.y = y

    def point_at(self, progress: float) -> Point:
        return Point(x=self.x0 + progress * (self.x1 - self.x0), y=self.y)

    @property
    def length(self) -> float:
        return abs(self.x1 - self.x0)


def build_path(config: ArcPathConfig | LinePathConfig) -> DrawPath:
    if isinstance(config, ArcPathConfig):
        return ArcPath(config.cx, config.cy, config.radius, config.start_angle, config.angle_span)
    if isinstance(config, LinePathConfig):
        return LinePath(config.x0, config.x1, config.y)
    raise ValueError(f"Unknown path config: {config!r}")


# --- Stroke helpers ---


def drawn_length(progress: float, path_length: float) -> float:
    return progress * path_length


def mask_offset(progress: float, path_length: float) -> float:
    """Dash offset of a solid reveal mask: full length hides everything, 0 shows it all."""
    return path_length * (1.0 - progress)


def flow_offset(flow_time: float, multiplier: float) -> float:
    # negative offsets move the dots forward along the path
    return -flow_time * multiplier


def dash_pattern(drawn: float, dot_size: float, gap: float, total: float) -> list[float]:
    """Dash array that strokes ``drawn`` units of a dotted line and hides the rest."""
    pattern = dot_size + gap
    if pattern <= 0:
        return [drawn, total]
    full = math.floor(drawn / pattern)
    remainder = drawn - full * pattern
    dashes: list[float] = []
    for _ in range(full):
        dashes.extend((dot_size, gap))
    dashes.extend((remainder, total))
    return dashes


def dot_positions(drawn: float, gap: float, offset: float) -> list[float]:
    """Arc-length positions of round dots spaced ``gap`` apart, shifted by a dash offset.

    Only dots inside ``[0, drawn]`` are returned.
    """
    if gap <= 0 or drawn < 0:
        return []
    # a negative dash offset pushes the pattern forward along the path
    start = (-offset) % gap
    positions = []
    s = start
    while s <= drawn:
        positions.append(s)
        s += gap
    return positions
