"""Command group: task checklist operations."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from papilio.commands._base import PapilioGroup

if TYPE_CHECKING:
    from papilio.commands._context import AppContext


@click.group(
    cls=PapilioGroup,
    examples="""\
  papilio task add finances "Pay bills"
  papilio task list finances
  papilio task toggle 3f2b9c1e-...
  papilio task delete 3f2b9c1e-...
  papilio task clear-completed health""",
)
def task() -> None:
    """Add, complete, and remove domain tasks."""


@task.command()
@click.argument("slug")
@click.argument("text", nargs=-1, required=True)
@click.pass_obj
def add(app: AppContext, slug: str, text: tuple[str, ...]) -> None:
    """Add a task to the SLUG domain."""
    app.emit(app.service.add_task(slug, " ".join(text)))


@task.command()
@click.argument("task_id")
@click.pass_obj
def toggle(app: AppContext, task_id: str) -> None:
    """Mark a task done, or not done."""
    app.emit(app.service.toggle_task(task_id))


@task.command()
@click.argument("task_id")
@click.pass_obj
def delete(app: AppContext, task_id: str) -> None:
    """Delete a task."""
    app.emit(app.service.delete_task(task_id))


@task.command("list")
@click.argument("slug", required=False)
@click.pass_obj
def list_cmd(app: AppContext, slug: str | None) -> None:
    """List tasks, newest first (all domains, or just SLUG)."""
    app.emit(app.service.domain_tasks(slug))


@task.command("clear-completed")
@click.argument("slug", required=False)
@click.pass_obj
def clear_completed(app: AppContext, slug: str | None) -> None:
    """Remove completed tasks (all domains, or just SLUG)."""
    app.emit(app.service.clear_completed(slug))
