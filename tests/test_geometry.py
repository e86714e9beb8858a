"""Tests for path geometry and stroke helpers."""

import math

import pytest

from pathline.config import ArcPathConfig, LinePathConfig
from pathline.geometry import (
    ArcPath,
    LinePath,
    build_path,
    dash_pattern,
    dot_positions,
    drawn_length,
    flow_offset,
    mask_offset,
)


class TestArcPath:
    @pytest.fixture()
    def arc(self):
        return build_path(ArcPathConfig())

    def test_top_left_bottom(self, arc):
        start, middle, end = arc.point_at(0), arc.point_at(0.5), arc.point_at(1)
        assert (start.x, start.y) == pytest.approx((1450, 140))
        assert (middle.x, middle.y) == pytest.approx((1050, 540))
        assert (end.x, end.y) == pytest.approx((1450, 940))

    def test_length(self, arc):
        assert arc.length == pytest.approx(400 * math.pi)

    def test_stays_on_circle(self, arc):
        for p in (0.1, 0.33, 0.8, 1.4):
            pt = arc.point_at(p)
            assert math.hypot(pt.x - 1450, pt.y - 540) == pytest.approx(400)

    def test_clockwise_span(self):
        arc = ArcPath(0, 0, 10, 0.0, math.pi / 2)
        pt = arc.point_at(1)
        assert (pt.x, pt.y) == pytest.approx((0, 10))


class TestLinePath:
    def test_interpolates(self):
        line = build_path(LinePathConfig())
        assert isinstance(line, LinePath)
        mid = line.point_at(0.5)
        assert (mid.x, mid.y) == (960, 620)
        assert line.length == 1920

    def test_no_clamping(self):
        line = LinePath(0, 100, 5)
        assert line.point_at(1.5).x == 150
        assert line.point_at(-0.5).x == -50


def test_build_path_rejects_unknown():
    with pytest.raises(ValueError):
        build_path(object())


class TestStrokeHelpers:
    def test_drawn_and_mask(self):
        assert drawn_length(0.25, 100) == 25
        assert mask_offset(0.25, 100) == 75
        assert mask_offset(1.0, 100) == 0

    def test_flow_offset_moves_forward(self):
        assert flow_offset(10, 1.5) == -15
        assert flow_offset(0, 1.5) == 0

    def test_dash_pattern(self):
        assert dash_pattern(60, 10, 15, 1000) == [10, 15, 10, 15, 10, 1000]
        assert dash_pattern(0, 10, 15, 1000) == [0, 1000]

    def test_dot_positions(self):
        assert dot_positions(50, 20, 0) == [0, 20, 40]
        assert dot_positions(50, 20, -5) == [5, 25, 45]
        assert dot_positions(50, 20, -25) == [5, 25, 45]
        assert dot_positions(-1, 20, 0) == []
