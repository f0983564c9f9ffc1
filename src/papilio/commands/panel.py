"""Command: interactive panel session over one SelectionController.

Reads one instruction per line. The open panel, its draft, and the
selection survive between lines for the lifetime of the session; tasks
are persisted as they are submitted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from papilio.commands._base import PapilioCommand
from papilio.domain.panel import CloseReason

if TYPE_CHECKING:
    from papilio.commands._context import AppContext
    from papilio.services.result import ServiceResult
    from papilio.services.wheel import WheelService

PANEL_HELP = """\
  open SLUG      open (or switch to) a domain panel
  type TEXT      set the compose text of the open panel
  add [TEXT]     add TEXT (or the compose text) to the open domain
  toggle ID      mark a task done / not done
  delete ID      delete a task
  list           tasks of the open domain (all tasks when closed)
  wheel          progress around the wheel
  close          close the panel (also: esc, outside)
  quit           end the session"""

_CLOSE_WORDS: dict[str, CloseReason] = {
    "close": CloseReason.EXPLICIT,
    "esc": CloseReason.ESCAPE,
    "outside": CloseReason.OUTSIDE_CLICK,
}


def _dispatch(svc: WheelService, verb: str, arg: str) -> ServiceResult | None:
    """Run one panel instruction. Returns None for an unknown verb."""
    if verb in ("open", "select"):
        return svc.select_domain(arg)
    if verb == "type":
        return svc.compose(arg)
    if verb in ("add", "submit"):
        return svc.submit_task(arg or None)
    if verb == "toggle":
        return svc.toggle_task(arg)
    if verb == "delete":
        return svc.delete_task(arg)
    if verb == "list":
        active = svc.controller.active_domain
        return svc.domain_tasks(active.slug if active else None)
    if verb == "wheel":
        return svc.wheel()
    if verb in _CLOSE_WORDS:
        return svc.close_panel(_CLOSE_WORDS[verb])
    return None


def _prompt(app: AppContext) -> str:
    active = app.service.controller.active_domain
    base = app.settings.panel.prompt
    return f"{base}[{active.slug}]" if active else base


@click.command(
    cls=PapilioCommand,
    examples="""\
  papilio panel
  printf 'open finances\\nadd Pay bills\\nquit\\n' | papilio panel""",
)
@click.pass_obj
def panel(app: AppContext) -> None:
    """Open an interactive panel session."""
    svc = app.service
    while True:
        try:
            line = click.prompt(_prompt(app), default="", show_default=False, prompt_suffix="> ")
        except click.Abort:
            break
        verb, _, arg = line.strip().partition(" ")
        verb = verb.lower()
        arg = arg.strip()
        if not verb:
            continue
        if verb in ("quit", "exit"):
            break
        if verb == "help":
            click.echo(PANEL_HELP)
            continue
        result = _dispatch(svc, verb, arg)
        if result is None:
            click.echo(f"Unknown instruction: {verb!r} (try 'help')", err=True)
            continue
        app.show(result)
    svc.close_panel()
