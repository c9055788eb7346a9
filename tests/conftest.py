"""Shared pytest fixtures and test helpers for plotctl tests."""

from __future__ import annotations

import json
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from plotctl.infrastructure.dataset import PlotStore
from plotctl.services.telemetry import disable_telemetry

OWNER_A = "0xaaaa000000000000000000000000000000000001"
OWNER_B = "0xBBBB000000000000000000000000000000000002"
OWNER_C = "0xcccc000000000000000000000000000000000003"

# id -> owner (None = available)
SAMPLE_OWNERS: dict[int, str | None] = {
    1: OWNER_A,
    2: None,
    3: None,
    7: None,
    11: OWNER_A,
    50: None,
    100: OWNER_B,
    101: None,
    111: OWNER_A,
    1111: OWNER_A,
    1112: None,
    1212: None,
    1234: None,
    5000: OWNER_B,
    10101: None,
    10102: None,
    12320: None,
    12321: OWNER_C,
    123123: None,
}


def make_record(plot_id: int, owner: str | None = None) -> dict[str, Any]:
    """A generated-format plot record."""
    record: dict[str, Any] = {
        "id": plot_id,
        "isSold": owner is not None,
        "coordinates": {
            "longitude": {"min": -177.67, "max": -176.67},
            "latitude": {"min": 79.27, "max": 80.27},
        },
    }
    if owner is not None:
        record["owner"] = owner
    return record


def sample_document() -> dict[str, Any]:
    lands = [make_record(pid, owner) for pid, owner in SAMPLE_OWNERS.items()]
    return {
        "totalLands": len(lands),
        "soldLands": sum(1 for land in lands if land["isSold"]),
        "lands": lands,
    }


@pytest.fixture(autouse=True)
def _telemetry_off() -> Iterator[None]:
    """``-v`` in one CLI test must not leak spans into the next."""
    yield
    disable_telemetry()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def dataset_path(tmp_path: Path) -> Path:
    """The sample dataset written to ``data/lands.json`` under tmp_path."""
    path = tmp_path / "data" / "lands.json"
    path.parent.mkdir()
    path.write_text(json.dumps(sample_document()), encoding="utf-8")
    return path


@pytest.fixture
def store(dataset_path: Path) -> PlotStore:
    return PlotStore(dataset_path)


@pytest.fixture
def missing_store(tmp_path: Path) -> PlotStore:
    return PlotStore(tmp_path / "nope.json")


@pytest.fixture
def _isolated_project(dataset_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run CLI tests from a temp project root holding the sample dataset.

    Use via ``@pytest.mark.usefixtures("_isolated_project")``.
    """
    monkeypatch.delenv("PLOTCTL_CONFIG", raising=False)
    monkeypatch.chdir(dataset_path.parent.parent)


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """CLI invocations reconfigure the root logger; put it back afterwards."""
    import logging

    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
