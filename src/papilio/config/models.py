"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, papilio.toml only contains
overrides. A fresh install needs no config file at all.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from papilio.domain.catalog import DOMAIN_COUNT
from papilio.domain.geometry import GeometryConfig, check_gap


class StorageConfig(BaseModel):
    """[storage] section."""

    model_config = {"frozen": True}

    backend: Literal["file", "memory"] = "file"
    directory: str = ".papilio"
    namespace: str = Field(default="papilio", pattern=r"^[A-Za-z0-9_-]+$")


class WheelConfig(BaseModel):
    """[wheel] section."""

    model_config = {"frozen": True}

    size: float = 400.0
    gap: float = 2.0
    inner_radius: float = 70.0
    outer_radius: float = 180.0
    progress_offset: float = 10.0
    epsilon: float = 0.01

    def geometry(self) -> GeometryConfig:
        """Build the domain-layer geometry config.

        Raises ValueError for bad radii or epsilon, or a gap too wide to
        leave every domain a visible wedge.
        """
        config = GeometryConfig(**self.model_dump())
        check_gap(DOMAIN_COUNT, config.gap)
        return config


class PanelConfig(BaseModel):
    """[panel] section."""

    model_config = {"frozen": True}

    prompt: str = "papilio"

