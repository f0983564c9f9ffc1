"""Command: list the wheel's life domains."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from papilio.commands._base import PapilioCommand

if TYPE_CHECKING:
    from papilio.commands._context import AppContext


@click.command(
    cls=PapilioCommand,
    examples="""\
  papilio domains
  papilio --json domains
  papilio -q domains""",
)
@click.pass_obj
def domains(app: AppContext) -> None:
    """List the 12 domains with their completion."""
    app.emit(app.service.list_domains())
