"""Jinja2 environments for rendered documents (the SVG wheel).

Templates ship inside the package under ``papilio/templates/<group>/``.
A ``templates/`` directory inside the data directory (``.papilio/`` by
default) takes precedence, either namespaced (``templates/svg/``) or flat.
"""

from __future__ import annotations

from pathlib import Path

from jinja2 import BaseLoader, ChoiceLoader, Environment, FileSystemLoader, PackageLoader


def build_template_environment(group: str, *, data_dir: Path | None = None) -> Environment:
    """Autoescaping environment for *group*, user overrides before packaged defaults."""
    loaders: list[BaseLoader] = []
    if data_dir is not None:
        override_root = data_dir / "templates"
        loaders.append(FileSystemLoader([str(override_root / group), str(override_root)]))
    loaders.append(PackageLoader("papilio", f"templates/{group}"))
    return Environment(
        loader=ChoiceLoader(loaders),
        autoescape=True,
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
