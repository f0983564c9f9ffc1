"""Wheel geometry — segment spans, annular-wedge paths, progress arcs.

Pure functions with no knowledge of any display technology. Angles are
in degrees, measured clockwise from straight up (0 deg = 12 o'clock).
Path data follows the SVG path mini-language (``M``, ``A``, ``L``, ``Z``),
which canvas and most vector renderers can also consume.

INVARIANT: For ``N`` segments with gap ``g``, the drawn spans sum to
``360 - N*g`` and, together with the gaps, tile the circle exactly once.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

FULL_TURN = 360.0


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Span:
    """Angular extent ``[start, end]`` of one segment, in degrees."""

    start: float
    end: float

    @property
    def sweep(self) -> float:
        return self.end - self.start

    @property
    def mid(self) -> float:
        return (self.start + self.end) / 2


@dataclass(frozen=True)
class GeometryConfig:
    """Drawing parameters for the wheel.

    Attributes:
        size: Width/height of the square canvas; the center is ``size / 2``.
        gap: Angular gap between neighbouring segments, in degrees.
        inner_radius: Radius of the hole in the middle of the wheel.
        outer_radius: Outer edge of the segments.
        progress_offset: How far outside ``outer_radius`` progress arcs sit.
        epsilon: Minimum sweep of a progress arc, in degrees.
    """

    size: float = 400.0
    gap: float = 2.0
    inner_radius: float = 70.0
    outer_radius: float = 180.0
    progress_offset: float = 10.0
    epsilon: float = 0.01

    def __post_init__(self) -> None:
        if self.inner_radius < 0 or self.inner_radius >= self.outer_radius:
            msg = f"inner_radius must be in [0, outer_radius): {self.inner_radius}"
            raise ValueError(msg)
        if self.gap < 0:
            msg = f"gap must be non-negative: {self.gap}"
            raise ValueError(msg)
        if self.epsilon <= 0:
            msg = f"epsilon must be positive: {self.epsilon}"
            raise ValueError(msg)

    @property
    def center(self) -> Point:
        return Point(self.size / 2, self.size / 2)


@dataclass(frozen=True)
class ProgressArc:
    start_angle: float
    end_angle: float
    radius: float
    percent: float
    path: str


@dataclass(frozen=True)
class SegmentGeometry:
    index: int
    span: Span
    path: str
    progress: ProgressArc
    label_anchor: Point


@dataclass(frozen=True)
class WheelLayout:
    config: GeometryConfig
    segments: tuple[SegmentGeometry, ...] = ()


# ---------------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------------


def _fmt(value: float) -> str:
    """Format a coordinate compactly (3 decimals, no trailing zeros, no -0)."""
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def _pt(p: Point) -> str:
    return f"{_fmt(p.x)} {_fmt(p.y)}"


def polar_to_cartesian(cx: float, cy: float, radius: float, angle_deg: float) -> Point:
    """Map a clockwise-from-top angle and radius to canvas coordinates."""
    rad = math.radians(angle_deg - 90.0)
    return Point(cx + radius * math.cos(rad), cy + radius * math.sin(rad))


def check_gap(count: int, gap: float) -> None:
    """Raise ValueError unless *gap* leaves every one of *count* segments a sweep."""
    width = FULL_TURN / count
    if gap < 0 or gap >= width:
        msg = f"gap must be in [0, {width:g}): {gap:g}"
        raise ValueError(msg)


def segment_span(index: int, count: int, gap: float) -> Span:
    """Angular span of segment *index* out of *count*, with *gap* removed.

    Half the gap is trimmed from each side so neighbouring segments are
    separated by exactly *gap* degrees.
    """
    if count < 1:
        msg = f"count must be at least 1: {count}"
        raise ValueError(msg)
    if not 0 <= index < count:
        msg = f"index {index} out of range for {count} segments"
        raise ValueError(msg)
    check_gap(count, gap)
    width = FULL_TURN / count
    return Span(index * width + gap / 2, (index + 1) * width - gap / 2)


def segment_spans(count: int, gap: float) -> list[Span]:
    return [segment_span(i, count, gap) for i in range(count)]


def _large_arc(a0: float, a1: float) -> int:
    return 1 if a1 - a0 > 180.0 else 0


def arc_path(
    cx: float,
    cy: float,
    inner_radius: float,
    outer_radius: float,
    a0: float,
    a1: float,
) -> str:
    """Closed annular-wedge outline between *a0* and *a1*.

    Outer arc clockwise from a0 to a1, straight edge inward, inner arc
    counter-clockwise back to a0, then close.
    """
    large = _large_arc(a0, a1)
    outer_start = polar_to_cartesian(cx, cy, outer_radius, a0)
    outer_end = polar_to_cartesian(cx, cy, outer_radius, a1)
    inner_end = polar_to_cartesian(cx, cy, inner_radius, a1)
    inner_start = polar_to_cartesian(cx, cy, inner_radius, a0)
    ro = _fmt(outer_radius)
    ri = _fmt(inner_radius)
    return (
        f"M {_pt(outer_start)} "
        f"A {ro} {ro} 0 {large} 1 {_pt(outer_end)} "
        f"L {_pt(inner_end)} "
        f"A {ri} {ri} 0 {large} 0 {_pt(inner_start)} "
        "Z"
    )


def progress_arc(
    span: Span,
    percent: float,
    *,
    cx: float,
    cy: float,
    radius: float,
    epsilon: float = 0.01,
) -> ProgressArc:
    """Open arc covering *percent* of *span*, drawn at *radius*.

    The end angle is clamped to ``[start + epsilon, end]`` so a 0% arc is
    never zero-length and a >100% value never overruns the segment.
    """
    pct = min(max(percent, 0.0), 100.0)
    a0 = span.start
    a1 = a0 + span.sweep * pct / 100.0
    a1 = min(max(a1, a0 + epsilon), span.end)
    start = polar_to_cartesian(cx, cy, radius, a0)
    end = polar_to_cartesian(cx, cy, radius, a1)
    r = _fmt(radius)
    path = f"M {_pt(start)} A {r} {r} 0 {_large_arc(a0, a1)} 1 {_pt(end)}"
    return ProgressArc(start_angle=a0, end_angle=a1, radius=radius, percent=pct, path=path)


def label_anchor(
    cx: float,
    cy: float,
    inner_radius: float,
    outer_radius: float,
    span: Span,
) -> Point:
    """Point at the middle of the wedge, for placing a label."""
    return polar_to_cartesian(cx, cy, (inner_radius + outer_radius) / 2, span.mid)


# ---------------------------------------------------------------------------
# Whole-wheel layout
# ---------------------------------------------------------------------------


def layout_wheel(
    percents: Sequence[float],
    config: GeometryConfig | None = None,
) -> WheelLayout:
    """Compute every segment's wedge, progress arc, and label anchor.

    One segment per entry in *percents*, in order, clockwise from the top.
    """
    config = config or GeometryConfig()
    count = len(percents)
    center = config.center
    spans = segment_spans(count, config.gap)
    segments: list[SegmentGeometry] = []
    for i, (span, pct) in enumerate(zip(spans, percents, strict=True)):
        segments.append(
            SegmentGeometry(
                index=i,
                span=span,
                path=arc_path(
                    center.x,
                    center.y,
                    config.inner_radius,
                    config.outer_radius,
                    span.start,
                    span.end,
                ),
                progress=progress_arc(
                    span,
                    pct,
                    cx=center.x,
                    cy=center.y,
                    radius=config.outer_radius + config.progress_offset,
                    epsilon=config.epsilon,
                ),
                label_anchor=label_anchor(
                    center.x, center.y, config.inner_radius, config.outer_radius, span
                ),
            )
        )
    return WheelLayout(config=config, segments=tuple(segments))
