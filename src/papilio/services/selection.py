"""SelectionController — which domain's panel is open.

States: CLOSED, or OPEN on exactly one domain. Selecting a domain while
another is open switches directly. The compose draft (text typed but not
yet submitted) belongs to the open panel and is discarded whenever the
panel switches or closes; submitted tasks already live in the TaskStore.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from papilio.domain.catalog import Domain, by_slug, is_known_slug
from papilio.domain.panel import CloseReason, PanelState, is_valid_transition

if TYPE_CHECKING:
    from papilio.domain.tasks import Task
    from papilio.services.task_store import TaskStore

logger = logging.getLogger(__name__)


class SelectionController:
    """Two-state panel machine that forwards submissions to a TaskStore."""

    def __init__(self, store: TaskStore) -> None:
        self._store = store
        self._active: Domain | None = None
        self._draft = ""
        self.focus_requested = False

    @property
    def state(self) -> PanelState:
        return PanelState.CLOSED if self._active is None else PanelState.OPEN

    @property
    def is_open(self) -> bool:
        return self._active is not None

    @property
    def active_domain(self) -> Domain | None:
        return self._active

    @property
    def draft(self) -> str:
        return self._draft

    @draft.setter
    def draft(self, text: str) -> None:
        # Typing into a closed panel has nowhere to go.
        if self._active is not None:
            self._draft = text

    def select(self, slug: str) -> bool:
        """Open the panel on *slug*. Returns False for an unknown slug."""
        if not is_known_slug(slug):
            return False
        if not is_valid_transition(self.state, PanelState.OPEN):
            return False
        previous = self._active
        self._active = by_slug(slug)
        self._draft = ""
        self.focus_requested = True
        logger.debug(
            "Panel open on %s%s",
            slug,
            f" (was {previous.slug})" if previous is not None else "",
        )
        return True

    def close(self, reason: CloseReason = CloseReason.EXPLICIT) -> bool:
        """Close the panel and discard the draft. Returns False if already closed."""
        if not is_valid_transition(self.state, PanelState.CLOSED):
            return False
        logger.debug("Panel closed (%s) on %s", reason, self._active.slug if self._active else "")
        self._active = None
        self._draft = ""
        self.focus_requested = False
        return True

    def submit(self, text: str | None = None) -> Task | None:
        """Commit *text* (or the current draft) as a task in the open domain.

        Returns None when the panel is closed or the text is blank. The
        draft is cleared only when a task was created.
        """
        if self._active is None:
            return None
        task = self._store.add(self._active.slug, self._draft if text is None else text)
        if task is not None:
            self._draft = ""
        return task
