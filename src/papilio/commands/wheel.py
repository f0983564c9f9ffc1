"""Command group: the wheel visualization."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from papilio.commands._base import PapilioGroup

if TYPE_CHECKING:
    from papilio.commands._context import AppContext


@click.group(
    cls=PapilioGroup,
    examples="""\
  papilio wheel show
  papilio -v wheel show
  papilio wheel svg -o wheel.svg""",
)
def wheel() -> None:
    """Show progress around the wheel."""


@wheel.command()
@click.pass_obj
def show(app: AppContext) -> None:
    """Print every segment's arc and completion."""
    app.emit(app.service.wheel())


@wheel.command()
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the SVG to a file instead of stdout.",
)
@click.pass_obj
def svg(app: AppContext, output: Path | None) -> None:
    """Render the wheel as an SVG document."""
    from papilio.output.svg import render_wheel_svg
    from papilio.services.result import ServiceResult

    result = app.service.wheel()
    document = render_wheel_svg(result.data, data_dir=app.settings.storage_dir)
    if output is None:
        click.echo(document, nl=False)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(document, encoding="utf-8")
    app.emit(ServiceResult(ok=True, op="wheel_svg", data={"path": str(output)}))
