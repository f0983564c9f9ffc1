"""Tests for wheel geometry."""

import math
import re

import pytest

from papilio.domain.geometry import (
    GeometryConfig,
    Point,
    Span,
    arc_path,
    label_anchor,
    layout_wheel,
    polar_to_cartesian,
    progress_arc,
    check_gap,
    segment_span,
    segment_spans,
)

_NUMBER = re.compile(r"-?\d+(?:\.\d+)?")


def _close(p: Point, x: float, y: float) -> bool:
    return math.isclose(p.x, x, abs_tol=1e-9) and math.isclose(p.y, y, abs_tol=1e-9)


class TestPolarToCartesian:
    def test_zero_is_top(self) -> None:
        assert _close(polar_to_cartesian(100, 100, 50, 0), 100, 50)

    def test_ninety_is_right(self) -> None:
        assert _close(polar_to_cartesian(100, 100, 50, 90), 150, 100)

    def test_one_eighty_is_bottom(self) -> None:
        assert _close(polar_to_cartesian(100, 100, 50, 180), 100, 150)

    def test_two_seventy_is_left(self) -> None:
        assert _close(polar_to_cartesian(100, 100, 50, 270), 50, 100)


class TestSegmentSpan:
    def test_first_segment(self) -> None:
        assert segment_span(0, 12, 2) == Span(1.0, 29.0)

    def test_last_segment(self) -> None:
        assert segment_span(11, 12, 2) == Span(331.0, 359.0)

    def test_no_gap(self) -> None:
        assert segment_span(3, 12, 0) == Span(90.0, 120.0)

    @pytest.mark.parametrize("gap", [0.0, 1.5, 2.0, 10.0])
    def test_spans_and_gaps_tile_circle(self, gap: float) -> None:
        spans = segment_spans(12, gap)
        drawn = sum(s.sweep for s in spans)
        assert math.isclose(drawn, 360 - 12 * gap)
        assert math.isclose(drawn + 12 * gap, 360)

    def test_neighbours_separated_by_gap(self) -> None:
        spans = segment_spans(12, 3)
        for left, right in zip(spans, spans[1:]):
            assert math.isclose(right.start - left.end, 3)
        # wrap-around gap between last and first
        assert math.isclose(spans[0].start + 360 - spans[-1].end, 3)

    @pytest.mark.parametrize(
        "index,count,gap",
        [(12, 12, 2), (-1, 12, 2), (0, 0, 2), (0, 12, 30), (0, 12, -1)],
    )
    def test_invalid_arguments(self, index: int, count: int, gap: float) -> None:
        with pytest.raises(ValueError):
            segment_span(index, count, gap)

    @pytest.mark.parametrize("gap", [30, 45, 360])
    def test_check_gap_rejects_full_width(self, gap: float) -> None:
        with pytest.raises(ValueError, match="gap must be in"):
            check_gap(12, gap)

    def test_check_gap_accepts_narrow(self) -> None:
        check_gap(12, 29.9)

class TestArcPath:
    def test_structure(self) -> None:
        path = arc_path(200, 200, 70, 180, 1, 29)
        assert re.fullmatch(
            r"M \S+ \S+ A 180 180 0 0 1 \S+ \S+ L \S+ \S+ A 70 70 0 0 0 \S+ \S+ Z", path
        )

    def test_starts_on_outer_radius_at_a0(self) -> None:
        path = arc_path(200, 200, 70, 180, 0, 30)
        assert path.startswith("M 200 20 ")

    def test_ends_on_inner_radius_at_a0(self) -> None:
        path = arc_path(200, 200, 70, 180, 0, 30)
        assert path.endswith("A 70 70 0 0 0 200 130 Z")

    def test_large_arc_flag(self) -> None:
        small = arc_path(0, 0, 10, 20, 0, 180)
        large = arc_path(0, 0, 10, 20, 0, 200)
        assert " 0 0 1 " in small
        assert " 0 1 1 " in large
        assert " 0 1 0 " in large

    def test_deterministic(self) -> None:
        assert arc_path(200, 200, 70, 180, 31, 59) == arc_path(200, 200, 70, 180, 31, 59)

    def test_no_negative_zero(self) -> None:
        assert "-0 " not in arc_path(0, 0, 10, 20, 0, 90)


class TestProgressArc:
    def test_half(self) -> None:
        arc = progress_arc(Span(0, 30), 50, cx=0, cy=0, radius=190)
        assert arc.start_angle == 0
        assert math.isclose(arc.end_angle, 15)
        assert arc.radius == 190

    def test_full(self) -> None:
        arc = progress_arc(Span(1, 29), 100, cx=0, cy=0, radius=190)
        assert arc.end_angle == 29

    def test_zero_percent_is_not_degenerate(self) -> None:
        arc = progress_arc(Span(1, 29), 0, cx=0, cy=0, radius=190, epsilon=0.01)
        assert arc.end_angle > arc.start_angle
        assert math.isclose(arc.end_angle, 1.01)

    def test_over_hundred_clamped_to_span(self) -> None:
        arc = progress_arc(Span(1, 29), 150, cx=0, cy=0, radius=190)
        assert arc.end_angle == 29
        assert arc.percent == 100

    def test_negative_clamped(self) -> None:
        arc = progress_arc(Span(1, 29), -5, cx=0, cy=0, radius=190)
        assert arc.percent == 0
        assert arc.end_angle > 1

    def test_path_is_open_arc(self) -> None:
        arc = progress_arc(Span(0, 90), 100, cx=100, cy=100, radius=50)
        assert arc.path == "M 100 50 A 50 50 0 0 1 150 100"


class TestLabelAnchor:
    def test_mid_radius_mid_angle(self) -> None:
        p = label_anchor(100, 100, 20, 60, Span(80, 100))
        assert _close(p, 140, 100)


class TestGeometryConfig:
    def test_defaults(self) -> None:
        cfg = GeometryConfig()
        assert cfg.center == Point(200, 200)
        assert cfg.inner_radius < cfg.outer_radius

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"inner_radius": 200, "outer_radius": 100},
            {"inner_radius": 100, "outer_radius": 100},
            {"inner_radius": -1},
            {"gap": -1},
            {"epsilon": 0},
        ],
    )
    def test_invalid(self, kwargs: dict[str, float]) -> None:
        with pytest.raises(ValueError):
            GeometryConfig(**kwargs)


class TestLayoutWheel:
    def test_one_segment_per_percent(self) -> None:
        layout = layout_wheel([0] * 12)
        assert [s.index for s in layout.segments] == list(range(12))

    def test_progress_tracks_percent(self) -> None:
        percents = [0, 25, 50, 75, 100, 0, 0, 0, 0, 0, 0, 0]
        layout = layout_wheel(percents, GeometryConfig(gap=0))
        for seg, pct in zip(layout.segments, percents):
            expected = seg.span.start + 30 * pct / 100
            assert math.isclose(seg.progress.end_angle, max(expected, seg.span.start + 0.01))

    def test_progress_outside_outer_radius(self) -> None:
        cfg = GeometryConfig(outer_radius=150, progress_offset=8)
        layout = layout_wheel([50] * 12, cfg)
        assert all(s.progress.radius == 158 for s in layout.segments)

    def test_deterministic(self) -> None:
        assert layout_wheel([10] * 12) == layout_wheel([10] * 12)

    def test_layout_is_immutable(self) -> None:
        layout = layout_wheel([10] * 12)
        assert isinstance(layout.segments, tuple)
        assert hash(layout) == hash(layout_wheel([10] * 12))

    def test_paths_use_finite_numbers(self) -> None:
        layout = layout_wheel([33] * 12)
        for seg in layout.segments:
            for token in _NUMBER.findall(seg.path + seg.progress.path):
                assert math.isfinite(float(token))

    def test_empty_percents_rejected(self) -> None:
        with pytest.raises(ValueError):
            layout_wheel([])
