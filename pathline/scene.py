"""Per-frame pipeline: timeline -> resolver -> geometry + reveal."""

import logging
from typing import Iterator

from pathline.config import Config
from pathline.geometry import build_path, drawn_length, flow_offset, mask_offset
from pathline.models import CompiledTimeline, FrameState, MarkerState
from pathline.resolver import resolve_frame
from pathline.reveal import reveal
from pathline.timeline import cached_timeline

logger = logging.getLogger(__name__)

DEFAULT_ICON = "default"


def resolve_icon(icon: str | None, icons: dict[str, str]) -> str:
    """Look up a rendering descriptor, falling back to the default entry."""
    if icon is not None and icon in icons:
        return icons[icon]
    return icons.get(DEFAULT_ICON, "")


class Scene:
    """Evaluates frames for one config. Holds no per-frame state."""

    def __init__(self, config: Config) -> None:
        self.config = config
        self.path = build_path(config.path)

    @property
    def timeline(self) -> CompiledTimeline:
        return cached_timeline(self.config.checkpoints, self.config.timing)

    @property
    def final_frame(self) -> int:
        return self.timeline.final_frame

    def frame_state(self, frame: float) -> FrameState:
        timing = self.config.timing
        timeline = self.timeline
        render = resolve_frame(frame, timeline)
        length = self.path.length

        markers = []
        for evt in timeline.events:
            cp = evt.checkpoint
            markers.append(MarkerState(
                checkpoint_id=cp.id,
                text=cp.text,
                icon=resolve_icon(cp.icon, self.config.icons),
                position=self.path.point_at(cp.path_progress),
                arrival_frame=evt.arrival_frame,
                reveal=reveal(frame - evt.arrival_frame, cp.text, timing),
            ))

        return FrameState(
            frame=frame,
            render=render,
            path_length=length,
            drawn_length=drawn_length(render.visible_progress, length),
            mask_offset=mask_offset(render.visible_progress, length),
            flow_offset=flow_offset(render.flow_time, timing.flow_speed_multiplier),
            head=self.path.point_at(render.visible_progress),
            markers=markers,
        )

    def frames(self, start: int = 0, stop: int | None = None) -> Iterator[FrameState]:
        """Yield states for frames ``start`` up to (not including) ``stop``.

        ``stop`` defaults to one past the timeline's final frame.
        """
        if stop is None:
            stop = self.final_frame + 1
        logger.debug("Evaluating frames %d..%d", start, stop)
        for frame in range(start, stop):
            yield self.frame_state(frame)
