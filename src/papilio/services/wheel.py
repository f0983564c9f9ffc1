"""WheelService — the interaction surface over store, panel, and geometry.

Pipeline for every mutation: SELECT/SUBMIT -> STORE (persists) -> RESPOND.
Read views recompute stats and geometry from the current store state, so
the rendering layer only ever sees derived snapshots.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from papilio.domain.catalog import all_domains, is_known_slug
from papilio.domain.geometry import GeometryConfig, layout_wheel
from papilio.domain.panel import CloseReason
from papilio.services.result import ServiceError, ServiceResult
from papilio.services.selection import SelectionController

if TYPE_CHECKING:
    from papilio.domain.tasks import Task
    from papilio.services.task_store import TaskStore


def _task_data(task: Task) -> dict[str, Any]:
    return {
        "id": task.id,
        "text": task.text,
        "completed": task.completed,
        "domain": task.domain_slug,
        "created": task.created_at.isoformat(),
    }


def _unknown_domain(op: str, slug: str) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(
            code="UNKNOWN_DOMAIN",
            message=f"Unknown domain: {slug!r}",
            detail={"known": [d.slug for d in all_domains()]},
        ),
    )


class WheelService:
    """Drives one SelectionController and TaskStore pair."""

    def __init__(
        self,
        store: TaskStore,
        *,
        geometry: GeometryConfig | None = None,
        controller: SelectionController | None = None,
    ) -> None:
        self._store = store
        self._geometry = geometry or GeometryConfig()
        self.controller = controller or SelectionController(store)

    # ------------------------------------------------------------------
    # Panel
    # ------------------------------------------------------------------

    def select_domain(self, slug: str) -> ServiceResult:
        """Open (or switch) the panel to *slug*."""
        if not self.controller.select(slug):
            return _unknown_domain("select_domain", slug)
        return ServiceResult(ok=True, op="select_domain", data=self._panel_data())

    def close_panel(self, reason: CloseReason = CloseReason.EXPLICIT) -> ServiceResult:
        changed = self.controller.close(reason)
        return ServiceResult(
            ok=True,
            op="close_panel",
            data={"changed": changed, "reason": str(reason), **self._panel_data()},
        )

    def compose(self, text: str) -> ServiceResult:
        """Replace the open panel's draft text."""
        self.controller.draft = text
        return ServiceResult(
            ok=True,
            op="compose",
            data={"draft": self.controller.draft, **self._panel_data()},
        )

    def submit_task(self, text: str | None = None) -> ServiceResult:
        """Add *text* (or the draft) to the open domain. Fails when no panel is open."""
        domain = self.controller.active_domain
        if domain is None:
            return ServiceResult(
                ok=False,
                op="submit_task",
                error=ServiceError(code="PANEL_CLOSED", message="No domain panel is open"),
            )
        task = self.controller.submit(text)
        return self._mutation("submit_task", task, domain=domain.slug)

    # ------------------------------------------------------------------
    # Task mutations
    # ------------------------------------------------------------------

    def add_task(self, slug: str, text: str) -> ServiceResult:
        """Add a task without going through the panel."""
        if not is_known_slug(slug):
            return _unknown_domain("add_task", slug)
        return self._mutation("add_task", self._store.add(slug, text), domain=slug)

    def toggle_task(self, task_id: str) -> ServiceResult:
        return self._mutation("toggle_task", self._store.toggle(task_id), id=task_id)

    def delete_task(self, task_id: str) -> ServiceResult:
        return self._mutation("delete_task", self._store.remove(task_id), id=task_id)

    def clear_completed(self, slug: str | None = None) -> ServiceResult:
        if slug is not None and not is_known_slug(slug):
            return _unknown_domain("clear_completed", slug)
        removed = self._store.clear_completed(slug)
        return ServiceResult(
            ok=True,
            op="clear_completed",
            data={"changed": removed > 0, "removed": removed, "points": self._store.points},
        )

    def _mutation(self, op: str, task: Task | None, **context: Any) -> ServiceResult:
        if task is None:
            return ServiceResult(
                ok=True,
                op=op,
                data={"changed": False, **context, "points": self._store.points},
                warnings=["Nothing to do"],
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={"changed": True, **_task_data(task), "points": self._store.points},
        )

    # ------------------------------------------------------------------
    # Read views
    # ------------------------------------------------------------------

    def list_domains(self) -> ServiceResult:
        items = []
        for domain in all_domains():
            stats = self._store.stats_for(domain.slug)
            items.append(
                {
                    "id": domain.slug,
                    "label": domain.label,
                    "order": domain.order,
                    "hue": domain.hue,
                    **stats.model_dump(),
                }
            )
        return ServiceResult(
            ok=True,
            op="list_domains",
            data={"items": items, "count": len(items), "points": self._store.points},
        )

    def domain_tasks(self, slug: str | None = None) -> ServiceResult:
        """Tasks for one domain, or every task when *slug* is None."""
        if slug is None:
            tasks = self._store.all_tasks()
            data: dict[str, Any] = {}
        elif not is_known_slug(slug):
            return _unknown_domain("list_tasks", slug)
        else:
            tasks = self._store.tasks_for(slug)
            data = {"domain": slug, **self._store.stats_for(slug).model_dump()}
        items = [_task_data(t) for t in tasks]
        return ServiceResult(
            ok=True,
            op="list_tasks",
            data={"items": items, "count": len(items), **data, "points": self._store.points},
        )

    def wheel(self) -> ServiceResult:
        """Stats and geometry for every segment, in catalog order."""
        domains = all_domains()
        stats = [self._store.stats_for(d.slug) for d in domains]
        layout = layout_wheel([s.percent for s in stats], self._geometry)
        segments = []
        for domain, stat, seg in zip(domains, stats, layout.segments, strict=True):
            segments.append(
                {
                    "id": domain.slug,
                    "label": domain.label,
                    "hue": domain.hue,
                    **stat.model_dump(),
                    "start": round(seg.span.start, 3),
                    "end": round(seg.span.end, 3),
                    "path": seg.path,
                    "progress_path": seg.progress.path,
                    "label_x": round(seg.label_anchor.x, 3),
                    "label_y": round(seg.label_anchor.y, 3),
                }
            )
        return ServiceResult(
            ok=True,
            op="wheel",
            data={
                "segments": segments,
                "points": self._store.points,
                "active": self._panel_data()["active"],
                "size": self._geometry.size,
            },
        )

    def _panel_data(self) -> dict[str, Any]:
        domain = self.controller.active_domain
        return {
            "state": str(self.controller.state),
            "active": domain.slug if domain else None,
        }
