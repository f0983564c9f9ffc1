"""ServiceResult and ServiceError — the interaction-surface contract.

INVARIANT: Every WheelService operation returns ServiceResult. Store-level
no-ops (empty text, unknown id) are ``ok=True`` with
``data["changed"] = False``; they are not errors.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Universal return type for interaction-surface operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"submit_task"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
