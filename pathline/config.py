"""Configuration loading for pathline."""

import math
from pathlib import Path
from typing import Annotated, Any, Literal, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, model_validator

from pathline.models import Checkpoint


class TimingConfig(BaseModel):
    """Frame durations that drive every schedule and reveal formula.

    Appear, delay, hold and type speed are whole frames so every scheduled frame is an integer.
    """
    model_config = ConfigDict(frozen=True)

    circle_appear_duration: int = Field(12, gt=0)
    text_start_delay: int = Field(6, ge=0)
    hold_duration: int = Field(15, ge=0)
    type_speed: int = Field(2, gt=0)  # frames per character
    frames_per_full_path: float = Field(150, gt=0)
    flow_speed_multiplier: float = Field(1.5, gt=0)
    appear_easing: Literal["ease", "linear", "quad", "cubic"] = "ease"


class ArcPathConfig(BaseModel):
    kind: Literal["arc"] = "arc"
    cx: float = 1450
    cy: float = 540
    radius: float = Field(400, gt=0)
    # top -> left -> bottom in screen coordinates
    start_angle: float = 1.5 * math.pi
    angle_span: float = -math.pi


class LinePathConfig(BaseModel):
    kind: Literal["line"] = "line"
    x0: float = 0
    x1: float = 1920
    y: float = 620


PathConfig = Annotated[Union[ArcPathConfig, LinePathConfig], Field(discriminator="kind")]


class StrokeConfig(BaseModel):
    width: float = Field(4, gt=0)
    dot_gap: float = Field(20, gt=0)
    dot_size: float = Field(0, ge=0)  # 0 draws round dots from the line cap


def _default_checkpoints() -> list[Checkpoint]:
    return [
        Checkpoint(id=1, path_progress=0.15, text="Project Initialization", icon="check"),
        Checkpoint(id=2, path_progress=0.35, text="Data Ingestion", icon="database"),
        Checkpoint(id=3, path_progress=0.55, text="AI Processing", icon="cpu"),
        Checkpoint(id=4, path_progress=0.75, text="Quality Assurance", icon="shield"),
        Checkpoint(id=5, path_progress=0.9, text="Final Deployment", icon="rocket"),
    ]


def _default_icons() -> dict[str, str]:
    return {
        "check": "OK",
        "database": "DB",
        "cpu": "AI",
        "shield": "QA",
        "rocket": "GO",
        "default": "*",
    }


class Config(BaseModel):
    fps: int = Field(30, gt=0)
    width: int = Field(1920, gt=0)
    height: int = Field(1080, gt=0)
    timing: TimingConfig = Field(default_factory=TimingConfig)
    path: PathConfig = Field(default_factory=ArcPathConfig)
    stroke: StrokeConfig = Field(default_factory=StrokeConfig)
    icons: dict[str, str] = Field(default_factory=_default_icons)
    checkpoints: list[Checkpoint] = Field(default_factory=_default_checkpoints)

    @model_validator(mode="after")
    def _unique_checkpoint_ids(self) -> "Config":
        seen: set[int] = set()
        for cp in self.checkpoints:
            if cp.id in seen:
                raise ValueError(f"duplicate checkpoint id: {cp.id}")
            seen.add(cp.id)
        return self


def _project_root() -> Path:
    """Return the pathline project root directory."""
    return Path(__file__).parent.parent


def load_config(config_path: Path | None = None) -> Config:
    """Load config from YAML file. Falls back to defaults if the default file is missing.

    An explicitly requested path that does not exist raises FileNotFoundError.
    Malformed YAML, or a document that is not a mapping, raises ValueError.
    """
    if config_path is None:
        config_path = _project_root() / "config.yaml"
        if not config_path.exists():
            return Config()
    elif not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        raw: Any = yaml.safe_load(config_path.read_text()) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Malformed YAML in {config_path}: {e}") from e
    if not isinstance(raw, dict):
        raise ValueError(f"{config_path}: expected a mapping at top level, got {type(raw).__name__}")
    return Config(**raw)
