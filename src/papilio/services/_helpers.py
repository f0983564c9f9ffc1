"""Shared service-layer helper functions."""

from __future__ import annotations

from datetime import UTC, datetime


def now_utc() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)
