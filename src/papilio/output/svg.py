"""Standalone SVG rendering of the wheel snapshot.

Consumes the ``data`` payload of a ``wheel`` ServiceResult: the geometry
is already computed, the ``svg/wheel.svg.j2`` template only draws it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from papilio.infrastructure.templates import build_template_environment
from papilio.output.console import hue_style

WHEEL_TEMPLATE = "wheel.svg.j2"

_TRACK_COLOR = "#e5e7eb"


def render_wheel_svg(data: dict[str, Any], *, data_dir: Path | None = None) -> str:
    """Render the wheel as an SVG document string.

    *data_dir* enables template overrides from ``<data_dir>/templates/``.
    """
    env = build_template_environment("svg", data_dir=data_dir)
    env.filters["hue"] = hue_style
    size = float(data.get("size", 400))
    return env.get_template(WHEEL_TEMPLATE).render(
        size=f"{size:g}",
        center=f"{size / 2:g}",
        segments=data.get("segments", []),
        active=data.get("active"),
        points=data.get("points", 0),
        track_color=_TRACK_COLOR,
    )
