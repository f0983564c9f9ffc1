"""TaskStore — the task collection and its derived completion counter.

INVARIANT: ``points`` always equals the number of completed tasks. It is
computed from the collection on every read and never stored, so it
cannot drift from the tasks it counts.

Every mutation re-persists the full collection synchronously and only
takes effect in memory once the save succeeds. Invalid
input (blank text, unknown domain, unknown id) is a silent no-op.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from typing import Any

from pydantic import ValidationError

from papilio.domain.catalog import is_known_slug
from papilio.domain.ids import generate_id
from papilio.domain.tasks import Task, TaskStats, compute_stats, normalize_text
from papilio.infrastructure.storage import KeyValueStore
from papilio.services._helpers import now_utc

logger = logging.getLogger(__name__)

TASKS_KEY = "tasks"


def parse_records(raw: Any) -> list[Task]:
    """Validate a persisted blob into tasks, dropping malformed entries.

    A blob that is not a list yields an empty collection. Entries that
    fail validation, reference an unknown domain, or repeat an earlier
    id are skipped.
    """
    if raw is None:
        return []
    if not isinstance(raw, list):
        logger.warning("Ignoring persisted tasks: expected a list, got %s", type(raw).__name__)
        return []

    tasks: list[Task] = []
    seen: set[str] = set()
    for i, record in enumerate(raw):
        if not isinstance(record, dict):
            logger.debug("Dropping task record %d: not an object", i)
            continue
        try:
            task = Task.model_validate(record)
        except ValidationError as exc:
            logger.debug("Dropping task record %d: %s", i, exc.errors()[0]["msg"])
            continue
        if not is_known_slug(task.domain_slug):
            logger.debug("Dropping task %s: unknown domain %r", task.id, task.domain_slug)
            continue
        if task.id in seen:
            logger.debug("Dropping duplicate task id %s", task.id)
            continue
        seen.add(task.id)
        tasks.append(task)
    return tasks


class TaskStore:
    """Owns the task list; newest tasks first."""

    def __init__(
        self,
        storage: KeyValueStore,
        *,
        id_factory: Callable[[], str] = generate_id,
        clock: Callable[[], datetime] = now_utc,
    ) -> None:
        self._storage = storage
        self._id_factory = id_factory
        self._clock = clock
        self._tasks: list[Task] = []

    def __len__(self) -> int:
        return len(self._tasks)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def load(self) -> None:
        """Replace the in-memory collection with the persisted one."""
        raw = self._storage.load(TASKS_KEY, default=[])
        self._tasks = parse_records(raw)
        logger.debug("Loaded %d tasks", len(self._tasks))

    def _commit(self, tasks: list[Task]) -> None:
        """Persist *tasks*, then adopt them. A failed save changes nothing."""
        self._storage.save(TASKS_KEY, [t.to_record() for t in tasks])
        self._tasks = tasks

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add(self, domain_slug: str, text: str) -> Task | None:
        """Create a task at the head of the list, or return None (no-op)."""
        text = normalize_text(text)
        if not text or not is_known_slug(domain_slug):
            return None
        task = Task(
            id=self._id_factory(),
            text=text,
            completed=False,
            created_at=self._clock(),
            domain_slug=domain_slug,
        )
        self._commit([task, *self._tasks])
        logger.debug("Added task %s to %s", task.id, domain_slug)
        return task

    def toggle(self, task_id: str) -> Task | None:
        """Flip a task's ``completed`` flag. Returns the updated task."""
        index = self._index_of(task_id)
        if index is None:
            return None
        task = self._tasks[index].toggled()
        tasks = list(self._tasks)
        tasks[index] = task
        self._commit(tasks)
        return task

    def remove(self, task_id: str) -> Task | None:
        """Delete a task. Returns the removed task."""
        index = self._index_of(task_id)
        if index is None:
            return None
        task = self._tasks[index]
        self._commit([t for i, t in enumerate(self._tasks) if i != index])
        return task

    def clear_completed(self, domain_slug: str | None = None) -> int:
        """Remove completed tasks (all domains, or one). Returns the count."""
        keep = [
            t
            for t in self._tasks
            if not t.completed or (domain_slug is not None and t.domain_slug != domain_slug)
        ]
        removed = len(self._tasks) - len(keep)
        if removed:
            self._commit(keep)
        return removed

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def points(self) -> int:
        """Completion counter: the number of completed tasks."""
        return sum(1 for t in self._tasks if t.completed)

    def get(self, task_id: str) -> Task | None:
        index = self._index_of(task_id)
        return None if index is None else self._tasks[index]

    def all_tasks(self) -> list[Task]:
        return list(self._tasks)

    def tasks_for(self, domain_slug: str) -> list[Task]:
        return [t for t in self._tasks if t.domain_slug == domain_slug]

    def stats_for(self, domain_slug: str) -> TaskStats:
        return compute_stats(self.tasks_for(domain_slug))

    def _index_of(self, task_id: str) -> int | None:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return None
