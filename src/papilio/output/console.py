"""Rich Console factory and theme for papilio output.

Consoles render to a StringIO buffer so formatters keep a
``format_result() -> str`` contract. In non-TTY environments (tests,
pipes) Rich disables color codes on its own.
"""

from __future__ import annotations

import colorsys
from io import StringIO

from rich.console import Console
from rich.theme import Theme

PAPILIO_THEME = Theme(
    {
        "pl.ok": "bold green",
        "pl.error": "bold red",
        "pl.warning": "bold yellow",
        "pl.op": "bold cyan",
        "pl.key": "dim",
        "pl.id": "bold blue",
        "pl.domain": "bold magenta",
        "pl.done": "green",
        "pl.open": "yellow",
        "pl.points": "bold magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (useful for stable test output).
    """
    return Console(
        file=StringIO(),
        theme=PAPILIO_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def hue_style(hue: float) -> str:
    """Hex color for a domain hue, for Rich styles and SVG fills."""
    r, g, b = colorsys.hls_to_rgb((hue % 360) / 360, 0.5, 0.65)
    return f"#{round(r * 255):02x}{round(g * 255):02x}{round(b * 255):02x}"
