"""Shared test fixtures for pathline tests."""

import pytest

from pathline.config import Config, LinePathConfig, TimingConfig
from pathline.models import Checkpoint
from pathline.timeline import compile_timeline


@pytest.fixture()
def timing():
    """Default timing: appear 12, delay 6, hold 15, 2 frames/char, 150 frames per path."""
    return TimingConfig()


@pytest.fixture()
def single_checkpoint():
    return [Checkpoint(id=1, path_progress=0.5, text="AB")]


@pytest.fixture()
def single_timeline(single_checkpoint, timing):
    """Arrives at 75, pauses 37, resumes at 112, finishes at 187."""
    return compile_timeline(single_checkpoint, timing)


@pytest.fixture()
def demo_checkpoints():
    return Config().checkpoints


@pytest.fixture()
def line_config(single_checkpoint):
    """Small horizontal canvas with the single "AB" checkpoint at its middle."""
    return Config(
        width=200,
        height=100,
        path=LinePathConfig(x0=10, x1=190, y=50),
        checkpoints=single_checkpoint,
    )
