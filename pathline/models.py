"""Pydantic models for pathline."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class RevealPhase(str, Enum):
    NOT_YET_REACHED = "not_yet_reached"
    REVEALING = "revealing"
    SETTLED = "settled"


# --- Input models ---


class Checkpoint(BaseModel):
    """A labeled stop along the path at a fixed progress fraction."""
    model_config = ConfigDict(frozen=True)

    id: int
    path_progress: float = Field(ge=0.0, le=1.0)
    text: str
    icon: str | None = None


# --- Compiled timeline ---


class TimelineEvent(BaseModel):
    """Travel to one checkpoint followed by the pause spent revealing it."""
    model_config = ConfigDict(frozen=True)

    checkpoint: Checkpoint
    start_move_frame: int
    arrival_frame: int
    pause_duration: int
    resume_frame: int
    start_progress: float
    end_progress: float


class CompiledTimeline(BaseModel):
    """Events in ascending path order plus lookup columns for the resolver.

    ``resume_frames[i]`` mirrors ``events[i].resume_frame`` and
    ``pauses_before[i]`` is the sum of pause durations of events ``0..i-1``;
    ``pauses_before`` carries one extra trailing entry holding the total.
    """
    model_config = ConfigDict(frozen=True)

    events: tuple[TimelineEvent, ...] = ()
    final_frame: int
    frames_per_full_path: float
    resume_frames: tuple[int, ...] = ()
    pauses_before: tuple[int, ...] = (0,)

    @property
    def total_pause(self) -> int:
        return self.pauses_before[-1]


# --- Per-frame output models ---


class RenderState(BaseModel):
    model_config = ConfigDict(frozen=True)

    visible_progress: float
    flow_time: float


class RevealState(BaseModel):
    """Reveal animation of one checkpoint at one frame."""
    model_config = ConfigDict(frozen=True)

    phase: RevealPhase
    active_frame: float
    appear_fraction: float = 0.0
    visible_char_count: int = 0
    visible_text: str = ""

    @property
    def has_appeared(self) -> bool:
        return self.phase != RevealPhase.NOT_YET_REACHED

    @property
    def scale(self) -> float:
        return self.appear_fraction

    @property
    def opacity(self) -> float:
        return self.appear_fraction


class Point(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float
    y: float


class MarkerState(BaseModel):
    checkpoint_id: int
    text: str
    icon: str  # resolved glyph/descriptor from the icon mapping
    position: Point
    arrival_frame: int
    reveal: RevealState


class FrameState(BaseModel):
    """Everything a renderer needs to draw one frame."""
    frame: float
    render: RenderState
    path_length: float
    drawn_length: float
    mask_offset: float
    flow_offset: float
    head: Point
    markers: list[MarkerState] = Field(default_factory=list)

    @property
    def visible_markers(self) -> list[MarkerState]:
        return [m for m in self.markers if m.reveal.has_appeared]
