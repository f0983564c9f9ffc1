"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Builds the task store lazily (so ``--help`` never
touches storage) and centralizes result emission.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from papilio.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from papilio.config.settings import PapilioSettings
    from papilio.infrastructure.storage import KeyValueStore
    from papilio.services.result import ServiceResult
    from papilio.services.wheel import WheelService


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: PapilioSettings) -> None:
        self.settings = settings
        self._service: WheelService | None = None

        from papilio.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def _storage(self) -> KeyValueStore:
        from papilio.infrastructure.storage import JsonFileStore, MemoryStore

        cfg = self.settings.storage
        if cfg.backend == "memory":
            return MemoryStore(cfg.namespace)
        return JsonFileStore(self.settings.storage_dir, cfg.namespace)

    @property
    def service(self) -> WheelService:
        """The wheel service over a freshly loaded task store (created lazily)."""
        if self._service is None:
            from papilio.services.task_store import TaskStore
            from papilio.services.wheel import WheelService

            try:
                geometry = self.settings.wheel.geometry()
            except ValueError as exc:
                raise click.ClickException(f"Invalid [wheel] config: {exc}") from exc

            store = TaskStore(self._storage())
            store.load()
            self._service = WheelService(store, geometry=geometry)
        return self._service

    def render(self, result: ServiceResult) -> str:
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        return format_result(result, settings=settings)

    def show(self, result: ServiceResult) -> None:
        """Print a result without exit semantics (used by the panel session)."""
        click.echo(self.render(result), err=not result.ok)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: stdout; warnings go to stderr unless in JSON mode.
        * Failure: stderr, exit code 1.
        """
        output = self.render(result)
        if result.ok:
            click.echo(output)
            if not self.settings.json_output and not self.settings.quiet:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
