"""Task and stats models.

A Task belongs to exactly one Domain (via ``domain_slug``). The persisted
form uses camelCase keys (``createdAt``, ``domainSlug``); Python code uses
the snake_case attribute names. Both spellings validate.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, StrictBool, field_validator


def normalize_text(text: str) -> str:
    """Trim surrounding whitespace from task text.

    Lone surrogates (how undecodable command-line bytes arrive) are
    replaced with U+FFFD so the text always encodes as UTF-8.
    """
    try:
        raw = text.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        raw = text.encode("utf-8", "surrogatepass")
    return raw.decode("utf-8", "replace").strip()


class Task(BaseModel):
    """A single checklist item owned by one domain."""

    model_config = {"frozen": True, "populate_by_name": True}

    id: str = Field(min_length=1)
    text: str
    completed: StrictBool
    created_at: datetime = Field(alias="createdAt")
    domain_slug: str = Field(alias="domainSlug")

    @field_validator("text")
    @classmethod
    def _text_non_empty(cls, value: str) -> str:
        value = normalize_text(value)
        if not value:
            raise ValueError("task text must not be empty")
        return value

    def to_record(self) -> dict[str, Any]:
        """Serialize to the persisted JSON record shape."""
        return self.model_dump(mode="json", by_alias=True)

    def toggled(self) -> Task:
        return self.model_copy(update={"completed": not self.completed})


class TaskStats(BaseModel):
    """Per-domain completion summary."""

    model_config = {"frozen": True}

    total: int = 0
    completed: int = 0
    percent: int = 0


def compute_percent(completed: int, total: int) -> int:
    """Whole-number completion percent, 0 for an empty domain.

    Rounds half up (``1/200 -> 1``, ``101/200 -> 51``) using integer
    arithmetic, so no float ties go to even.
    """
    if total <= 0:
        return 0
    return (completed * 200 + total) // (2 * total)


def compute_stats(tasks: list[Task]) -> TaskStats:
    total = len(tasks)
    done = sum(1 for t in tasks if t.completed)
    return TaskStats(total=total, completed=done, percent=compute_percent(done, total))
