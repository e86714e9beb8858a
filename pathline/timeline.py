"""Compile a checkpoint list into travel/pause timeline events."""

import logging
import math
from functools import lru_cache
from typing import Iterable, Sequence

from pathline.config import TimingConfig
from pathline.models import Checkpoint, CompiledTimeline, TimelineEvent

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round x.5 toward +infinity (Python's round() is banker's rounding)."""
    return math.floor(value + 0.5)


def pause_duration(text: str, timing: TimingConfig) -> int:
    """Frames the path stays still so the marker can appear and its label can type out."""
    return (
        timing.circle_appear_duration
        + timing.text_start_delay
        + len(text) * timing.type_speed
        + timing.hold_duration
    )


def compile_timeline(checkpoints: Iterable[Checkpoint], timing: TimingConfig) -> CompiledTimeline:
    """Schedule travel and pause segments for each checkpoint.

    Checkpoints are played in ascending ``path_progress`` order. Ties keep their
    input order, so two checkpoints at the same spot pause back to back with
    zero travel between them.
    """
    ordered = sorted(checkpoints, key=lambda cp: cp.path_progress)

    events: list[TimelineEvent] = []
    resume_frames: list[int] = []
    pauses_before: list[int] = [0]
    current_frame = 0
    current_progress = 0.0

    for cp in ordered:
        distance = max(0.0, cp.path_progress - current_progress)
        arrival = current_frame + round_half_up(distance * timing.frames_per_full_path)
        pause = pause_duration(cp.text, timing)
        resume = arrival + pause

        events.append(TimelineEvent(
            checkpoint=cp,
            start_move_frame=current_frame,
            arrival_frame=arrival,
            pause_duration=pause,
            resume_frame=resume,
            start_progress=current_progress,
            end_progress=cp.path_progress,
        ))
        resume_frames.append(resume)
        pauses_before.append(pauses_before[-1] + pause)

        current_frame = resume
        current_progress = cp.path_progress

    final_leg = round_half_up((1.0 - current_progress) * timing.frames_per_full_path)
    final_frame = current_frame + final_leg

    logger.debug(
        "Compiled %d checkpoints: final frame %d, total pause %d",
        len(events), final_frame, pauses_before[-1],
    )
    return CompiledTimeline(
        events=tuple(events),
        final_frame=final_frame,
        frames_per_full_path=timing.frames_per_full_path,
        resume_frames=tuple(resume_frames),
        pauses_before=tuple(pauses_before),
    )


@lru_cache(maxsize=32)
def _cached(checkpoints: tuple[Checkpoint, ...], timing: TimingConfig) -> CompiledTimeline:
    logger.debug("Timeline cache miss (%d checkpoints)", len(checkpoints))
    return compile_timeline(checkpoints, timing)


def cached_timeline(checkpoints: Sequence[Checkpoint], timing: TimingConfig) -> CompiledTimeline:
    """Memoized compile keyed by the whole checkpoint list and timing.

    Any change to the list produces a new key, so a stale timeline is never
    patched in place.
    """
    return _cached(tuple(checkpoints), timing)


def evenly_spaced(labels: Sequence[str], icons: Sequence[str | None] | None = None) -> list[Checkpoint]:
    """Place one checkpoint per label at (i + 1) / (n + 1) along the path."""
    n = len(labels)
    if icons is not None and len(icons) != n:
        raise ValueError(f"Got {len(icons)} icons for {n} labels")
    return [
        Checkpoint(
            id=i + 1,
            path_progress=(i + 1) / (n + 1),
            text=label,
            icon=icons[i] if icons is not None else None,
        )
        for i, label in enumerate(labels)
    ]


def duration_seconds(timeline: CompiledTimeline, fps: int) -> float:
    return timeline.final_frame / fps
