"""Resolve a frame number against a compiled timeline."""

import bisect

from pathline.models import CompiledTimeline, RenderState
from pathline.timeline import round_half_up


def _fraction(elapsed: float, span: float) -> float:
    if span <= 0:
        return 1.0
    return min(1.0, max(0.0, elapsed / span))


def resolve_frame(frame: float, timeline: CompiledTimeline) -> RenderState:
    """Return drawn progress and flow time for ``frame``.

    The frame belongs to the first event whose resume frame lies after it:
    before that event's arrival the path is travelling toward it, otherwise
    the path is paused on it. Frames past the last resume draw the final leg
    to progress 1. Flow time is the frame minus every pause already sat
    through, and holds still during a pause.
    """
    i = bisect.bisect_right(timeline.resume_frames, frame)

    if i < len(timeline.events):
        evt = timeline.events[i]
        paused_before = timeline.pauses_before[i]
        if frame < evt.arrival_frame:
            t = _fraction(frame - evt.start_move_frame, evt.arrival_frame - evt.start_move_frame)
            progress = evt.start_progress + (evt.end_progress - evt.start_progress) * t
            return RenderState(visible_progress=progress, flow_time=frame - paused_before)
        return RenderState(
            visible_progress=evt.end_progress,
            flow_time=evt.arrival_frame - paused_before,
        )

    if timeline.events:
        last = timeline.events[-1]
        last_progress = last.end_progress
        last_resume = last.resume_frame
    else:
        last_progress = 0.0
        last_resume = 0

    flow_time = frame - timeline.total_pause
    remaining = 1.0 - last_progress
    final_leg = round_half_up(remaining * timeline.frames_per_full_path)
    since_resume = frame - last_resume
    if since_resume < final_leg:
        progress = last_progress + remaining * _fraction(since_resume, final_leg)
    else:
        progress = 1.0
    return RenderState(visible_progress=progress, flow_time=flow_time)
