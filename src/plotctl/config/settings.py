"""PlotSettings: CLI flags, environment, and ``plotctl.toml`` merged into one object.

Priority chain (highest to lowest):
  1. Init kwargs: CLI flags passed by Click
  2. Env vars: ``PLOTCTL_*`` prefix, ``__`` for nested sections
  3. TOML file: ``plotctl.toml`` discovered via walk-up
  4. Code defaults: baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from plotctl.config.discovery import find_config
from plotctl.config.models import DataConfig, DisplayConfig, GenerateConfig, OwnersConfig


def load_toml(path: Path | None) -> dict[str, Any]:
    """Parse *path*; a missing path yields an empty mapping."""
    if path is None or not path.is_file():
        return {}
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Top-level tables of ``plotctl.toml`` as a settings source."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._tables = load_toml(toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        present = field_name in self._tables
        return self._tables.get(field_name), field_name, present

    def __call__(self) -> dict[str, Any]:
        return dict(self._tables)


# TOML path handed to settings_customise_sources during construction.
_tls = threading.local()


class PlotSettings(BaseSettings):
    """Settings for the whole plotctl CLI, frozen after construction.

    Attributes:
        project_root: Directory relative data paths resolve against (parent
            of ``plotctl.toml``, or CWD if no config was found).
        config_path: The TOML file in effect, if any.
        data_path: ``--data`` override for ``[data] path``.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "PLOTCTL_",
        "env_nested_delimiter": "__",
    }

    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    data_path: str | None = None

    # --- TOML sections ---
    data: DataConfig = Field(default_factory=DataConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    owners: OwnersConfig = Field(default_factory=OwnersConfig)
    generate: GenerateConfig = Field(default_factory=GenerateConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, getattr(_tls, "toml_path", None)),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
        **cli_flags: Any,
    ) -> PlotSettings:
        """Construct settings from a CLI invocation.

        An explicit *config_path* wins over walk-up discovery; a path that
        does not exist is ignored.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(project_root)

        root = project_root
        if root is None:
            root = toml_path.parent if toml_path else Path.cwd()

        _tls.toml_path = toml_path
        try:
            return cls(project_root=root, config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None

    def resolve(self, path: str) -> Path:
        """Resolve *path* against the project root unless it is absolute."""
        p = Path(path).expanduser()
        return p if p.is_absolute() else self.project_root / p

    @property
    def dataset_path(self) -> Path:
        return self.resolve(self.data_path or self.data.path)

    @property
    def coordination_path(self) -> Path | None:
        return self.resolve(self.data.coordination) if self.data.coordination else None
