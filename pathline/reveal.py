"""Per-checkpoint reveal: marker ease-in and label typing."""

import math
from typing import Callable

from pathline.config import TimingConfig
from pathline.models import RevealPhase, RevealState


def _clamp01(t: float) -> float:
    return min(1.0, max(0.0, t))


def cubic_bezier(x1: float, y1: float, x2: float, y2: float) -> Callable[[float], float]:
    """CSS-style timing function through (0,0), (x1,y1), (x2,y2), (1,1)."""
    cx = 3.0 * x1
    bx = 3.0 * (x2 - x1) - cx
    ax = 1.0 - cx - bx
    cy = 3.0 * y1
    by = 3.0 * (y2 - y1) - cy
    ay = 1.0 - cy - by

    def sample_x(s: float) -> float:
        return ((ax * s + bx) * s + cx) * s

    def sample_y(s: float) -> float:
        return ((ay * s + by) * s + cy) * s

    def slope_x(s: float) -> float:
        return (3.0 * ax * s + 2.0 * bx) * s + cx

    def solve(x: float) -> float:
        # Newton first, bisection when the slope is too flat to trust
        s = x
        for _ in range(8):
            err = sample_x(s) - x
            if abs(err) < 1e-7:
                return s
            d = slope_x(s)
            if abs(d) < 1e-6:
                break
            s -= err / d
        lo, hi = 0.0, 1.0
        s = x
        while hi - lo > 1e-7:
            if sample_x(s) < x:
                lo = s
            else:
                hi = s
            s = (lo + hi) / 2.0
        return s

    def ease(t: float) -> float:
        if t <= 0.0:
            return 0.0
        if t >= 1.0:
            return 1.0
        return sample_y(solve(t))

    return ease


def ease_out(fn: Callable[[float], float]) -> Callable[[float], float]:
    """Mirror an ease-in curve into an ease-out: 1 - f(1 - t)."""
    return lambda t: 1.0 - fn(1.0 - t)


_ease = cubic_bezier(0.42, 0.0, 1.0, 1.0)

EASINGS: dict[str, Callable[[float], float]] = {
    "ease": ease_out(_ease),
    "linear": lambda t: t,
    "quad": ease_out(lambda t: t * t),
    "cubic": ease_out(lambda t: t * t * t),
}


def appear_fraction(active_frame: float, timing: TimingConfig) -> float:
    t = _clamp01(active_frame / timing.circle_appear_duration)
    if t <= 0.0:
        return 0.0
    if t >= 1.0:
        return 1.0
    return EASINGS[timing.appear_easing](t)


def typing_start(timing: TimingConfig) -> int:
    """Active frame at which the first character may appear."""
    return timing.circle_appear_duration + timing.text_start_delay


def visible_char_count(active_frame: float, text: str, timing: TimingConfig) -> int:
    length = len(text)
    if length == 0:
        return 0
    elapsed = active_frame - typing_start(timing)
    if elapsed <= 0:
        return 0
    duration = length * timing.type_speed
    if elapsed >= duration:
        return length
    return min(length, math.floor(elapsed * length / duration))


def reveal(active_frame: float, text: str, timing: TimingConfig) -> RevealState:
    """Reveal state of a checkpoint ``active_frame`` frames after the path reached it.

    Negative active frames mean the path has not arrived yet; such checkpoints
    are not drawn at all.
    """
    if active_frame < 0:
        return RevealState(phase=RevealPhase.NOT_YET_REACHED, active_frame=active_frame)

    appear = appear_fraction(active_frame, timing)
    chars = visible_char_count(active_frame, text, timing)
    done_typing = active_frame >= typing_start(timing) + len(text) * timing.type_speed
    phase = RevealPhase.SETTLED if appear >= 1.0 and done_typing else RevealPhase.REVEALING

    return RevealState(
        phase=phase,
        active_frame=active_frame,
        appear_fraction=appear,
        visible_char_count=chars,
        visible_text=text[:chars],
    )
