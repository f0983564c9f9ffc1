"""Subcommand modules for papilio.

Provides register_commands() which uses deferred imports to keep
``papilio --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from papilio.commands.task import task
    from papilio.commands.wheel import wheel

    cli.add_command(task)
    cli.add_command(wheel)

    # --- Standalone commands ---
    from papilio.commands.domains import domains
    from papilio.commands.panel import panel

    cli.add_command(domains)
    cli.add_command(panel)
