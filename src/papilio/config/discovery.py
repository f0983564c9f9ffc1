"""Locate and read ``papilio.toml``.

Lookup order: the file named by ``PAPILIO_CONFIG``, then the nearest
``papilio.toml`` in the start directory or any of its ancestors.
"""

from __future__ import annotations

import logging
import os
import tomllib
from collections.abc import Collection, Iterator
from pathlib import Path
from typing import Any

import click

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "papilio.toml"
CONFIG_ENV_VAR = "PAPILIO_CONFIG"


def _ancestors(start: Path) -> Iterator[Path]:
    here = start.resolve()
    yield here
    yield from here.parents


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file in effect, or None.

    A ``PAPILIO_CONFIG`` path that does not exist disables discovery
    instead of falling back to the walk-up.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override).expanduser()
        return path if path.is_file() else None
    for directory in _ancestors(start or Path.cwd()):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_config(path: Path, known: Collection[str] | None = None) -> dict[str, Any]:
    """Parse *path* as TOML, raising ClickException on syntax errors.

    With *known*, top-level keys outside it are dropped with a warning
    so a stray table does not abort every command.
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc
    if known is None:
        return data
    for key in sorted(set(data) - set(known)):
        logger.warning("Ignoring unknown key %r in %s", key, path)
    return {k: v for k, v in data.items() if k in known}
