"""Panel lifecycle — which domain's detail panel is open.

Two states. OPEN -> OPEN is allowed: selecting another domain while a
panel is open switches the panel directly, so at most one panel is ever
open.
"""

from __future__ import annotations

from enum import StrEnum


class PanelState(StrEnum):
    """Panel visibility state."""

    CLOSED = "closed"
    OPEN = "open"


class CloseReason(StrEnum):
    """What dismissed the panel."""

    EXPLICIT = "explicit"
    ESCAPE = "escape"
    OUTSIDE_CLICK = "outside_click"


PANEL_TRANSITIONS: dict[str, list[str]] = {
    "closed": ["open"],
    "open": ["open", "closed"],
}


def is_valid_transition(current: str, target: str) -> bool:
    """Check if moving the panel from *current* to *target* is allowed."""
    return target in PANEL_TRANSITIONS.get(current, [])
