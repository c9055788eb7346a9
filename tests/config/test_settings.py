"""Tests for PlotSettings resolution."""

from pathlib import Path

import click
import pytest
from pydantic import ValidationError

from plotctl.config.settings import PlotSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PLOTCTL_CONFIG", raising=False)
    monkeypatch.delenv("PLOTCTL_DISPLAY__PER_PAGE", raising=False)


class TestDefaults:
    def test_no_config(self, tmp_path: Path) -> None:
        settings = PlotSettings.from_cli(project_root=tmp_path)
        assert settings.config_path is None
        assert settings.display.per_page == 20
        assert settings.owners.chart_top == 10
        assert settings.generate.total == 21000
        assert settings.generate.sold == 10270
        assert settings.dataset_path == tmp_path / "data" / "lands.json"
        assert settings.coordination_path is None

    def test_frozen(self, tmp_path: Path) -> None:
        settings = PlotSettings.from_cli(project_root=tmp_path)
        with pytest.raises(ValidationError):
            settings.quiet = True  # type: ignore[misc]


class TestToml:
    def test_sections_override_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "plotctl.toml").write_text(
            '[data]\npath = "lands.json"\ncoordination = "coord.json"\n'
            "[display]\nper_page = 50\n"
        )
        settings = PlotSettings.from_cli(project_root=tmp_path)
        assert settings.config_path == (tmp_path / "plotctl.toml").resolve()
        assert settings.display.per_page == 50
        assert settings.dataset_path == tmp_path / "lands.json"
        assert settings.coordination_path == tmp_path / "coord.json"

    def test_project_root_is_config_parent(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "plotctl.toml").write_text("")
        nested = tmp_path / "sub"
        nested.mkdir()
        monkeypatch.chdir(nested)
        settings = PlotSettings.from_cli()
        assert settings.project_root == tmp_path.resolve()

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        cfg = tmp_path / "custom.toml"
        cfg.write_text("[owners]\nchart_top = 3\n")
        settings = PlotSettings.from_cli(config_path=str(cfg), project_root=tmp_path)
        assert settings.owners.chart_top == 3

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "plotctl.toml").write_text("[display\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            PlotSettings.from_cli(project_root=tmp_path)

    def test_invalid_value(self, tmp_path: Path) -> None:
        (tmp_path / "plotctl.toml").write_text("[display]\nper_page = 0\n")
        with pytest.raises(ValidationError):
            PlotSettings.from_cli(project_root=tmp_path)


class TestPriority:
    def test_env_beats_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "plotctl.toml").write_text("[display]\nper_page = 50\n")
        monkeypatch.setenv("PLOTCTL_DISPLAY__PER_PAGE", "7")
        settings = PlotSettings.from_cli(project_root=tmp_path)
        assert settings.display.per_page == 7

    def test_cli_data_path_beats_toml(self, tmp_path: Path) -> None:
        (tmp_path / "plotctl.toml").write_text('[data]\npath = "a.json"\n')
        settings = PlotSettings.from_cli(project_root=tmp_path, data_path="b.json")
        assert settings.dataset_path == tmp_path / "b.json"

    def test_absolute_path_kept(self, tmp_path: Path) -> None:
        target = tmp_path / "abs.json"
        settings = PlotSettings.from_cli(project_root=tmp_path / "x", data_path=str(target))
        assert settings.dataset_path == target
