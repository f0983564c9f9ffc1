"""PapilioSettings: CLI flags, env vars, and papilio.toml merged into one frozen object.

Sources, highest priority first:

1. keyword arguments (the root CLI group's flags)
2. ``PAPILIO_*`` environment variables (``PAPILIO_WHEEL__GAP=4`` for sections)
3. the ``papilio.toml`` table read by :func:`PapilioSettings.from_cli`
4. defaults baked into :mod:`papilio.config.models`
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from papilio.config.discovery import find_config, read_config
from papilio.config.models import PanelConfig, StorageConfig, WheelConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Serves an already-parsed ``papilio.toml`` table."""

    def __init__(self, settings_cls: type[BaseSettings], table: dict[str, Any]) -> None:
        super().__init__(settings_cls)
        self._table = table

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._table.get(field_name), field_name, field_name in self._table

    def __call__(self) -> dict[str, Any]:
        return dict(self._table)


# TOML table for the PapilioSettings currently being built by from_cli().
_pending = threading.local()


class PapilioSettings(BaseSettings):
    """Frozen settings for one papilio invocation.

    Attributes:
        data_root: Directory that relative storage paths hang off: the
            ``--data-dir`` flag, else the config file's directory, else CWD.
        config_path: The papilio.toml in effect, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "PAPILIO_",
        "env_nested_delimiter": "__",
    }

    data_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    storage: StorageConfig = Field(default_factory=StorageConfig)
    wheel: WheelConfig = Field(default_factory=WheelConfig)
    panel: PanelConfig = Field(default_factory=PanelConfig)

    @property
    def storage_dir(self) -> Path:
        """Directory holding the JSON blobs (relative paths hang off data_root)."""
        directory = Path(self.storage.directory)
        return directory if directory.is_absolute() else self.data_root / directory

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        **_unused: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # No dotenv or secrets-dir sources.
        table = getattr(_pending, "table", {})
        return init_settings, env_settings, TomlSettingsSource(settings_cls, table)

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        data_root: Path | None = None,
        **cli_flags: Any,
    ) -> PapilioSettings:
        """Build settings for a CLI run.

        An explicit *config_path* must exist; otherwise papilio.toml is
        discovered by walking up from *data_root* (or CWD). Invalid
        values surface as :class:`click.ClickException`.
        """
        if config_path:
            toml_path: Path | None = Path(config_path)
            if not toml_path.is_file():
                raise click.ClickException(f"Config file not found: {config_path}")
        else:
            toml_path = find_config(data_root)

        table = read_config(toml_path, known=cls.model_fields) if toml_path else {}
        if data_root is None:
            data_root = toml_path.parent if toml_path else Path.cwd()

        _pending.table = table
        try:
            return cls(data_root=data_root, config_path=toml_path, **cli_flags)
        except ValidationError as exc:
            where = toml_path or "environment"
            raise click.ClickException(f"Invalid configuration ({where}):\n{exc}") from exc
        finally:
            del _pending.table
