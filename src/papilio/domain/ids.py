"""Task ID generation.

Primary strategy: random UUID4 (OS randomness source).
Fallback: ``{base36 milliseconds}-{8 hex}`` from the clock plus the
``random`` module, used only when the OS randomness source is unavailable.

INVARIANT: IDs are permanent. Once generated, an ID never changes.
"""

from __future__ import annotations

import logging
import random
import time
import uuid
from collections.abc import Callable

logger = logging.getLogger(__name__)

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits: list[str] = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def fallback_id() -> str:
    """Time + random ID for environments without a strong random source."""
    millis = time.time_ns() // 1_000_000
    return f"{_to_base36(millis)}-{random.getrandbits(32):08x}"


def generate_id(uuid_factory: Callable[[], uuid.UUID] = uuid.uuid4) -> str:
    """Generate a unique task ID.

    Uses *uuid_factory* (``uuid4`` by default). ``os.urandom`` raises
    ``NotImplementedError`` when no randomness source exists; in that
    case the time+random fallback is used.
    """
    try:
        return str(uuid_factory())
    except (NotImplementedError, OSError):
        logger.debug("Random UUID unavailable, using time+random fallback id")
        return fallback_id()
