"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, plotctl.toml only contains
overrides. An empty file (or none at all) is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class DataConfig(BaseModel):
    """[data] section.

    Relative paths resolve against the project root.
    """

    model_config = {"frozen": True}

    path: str = "data/lands.json"
    coordination: str = ""


class DisplayConfig(BaseModel):
    """[display] section."""

    model_config = {"frozen": True}

    per_page: int = Field(default=20, ge=1)


class OwnersConfig(BaseModel):
    """[owners] section."""

    model_config = {"frozen": True}

    chart_top: int = Field(default=10, ge=1)


class GenerateConfig(BaseModel):
    """[generate] section."""

    model_config = {"frozen": True}

    total: int = Field(default=21000, ge=1)
    sold: int = Field(default=10270, ge=0)
