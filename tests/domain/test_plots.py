"""Tests for plot models and record normalization."""

import pytest
from pydantic import ValidationError

from plotctl.domain.plots import Plot, plot_from_record

GENERATED = {
    "id": 7,
    "isSold": True,
    "owner": "0xabc",
    "coordinates": {
        "longitude": {"min": -10.5, "max": -9.5},
        "latitude": {"min": 20.0, "max": 21.0},
    },
}

EXPORTED = {
    "id": 7,
    "isSold": "True",
    "owner": "0xabc",
    "coord": {
        "long": {"min": "-10.5", "max": "-9.5"},
        "lat": {"min": "20.0", "max": "21.0"},
    },
}


class TestPlotFromRecord:
    def test_generated_and_exported_shapes_agree(self) -> None:
        assert plot_from_record(GENERATED) == plot_from_record(EXPORTED)

    def test_exported_unsold(self) -> None:
        plot = plot_from_record({**EXPORTED, "isSold": "False", "owner": "None"})
        assert plot.is_sold is False
        assert plot.owner is None

    def test_missing_owner_is_none(self) -> None:
        record = {k: v for k, v in GENERATED.items() if k != "owner"}
        assert plot_from_record(record).owner is None

    def test_missing_coordinates_default_to_zero(self) -> None:
        plot = plot_from_record({"id": 3, "isSold": False})
        assert plot.coordinates.longitude.min == 0.0

    def test_rejects_non_positive_id(self) -> None:
        with pytest.raises(ValidationError):
            plot_from_record({**GENERATED, "id": 0})

    def test_rejects_missing_id(self) -> None:
        with pytest.raises(ValidationError):
            plot_from_record({"isSold": True})

    def test_incomplete_coord_block(self) -> None:
        with pytest.raises(KeyError):
            plot_from_record({"id": 1, "coord": {"long": {"min": "1", "max": "2"}}})


class TestPlot:
    def test_frozen(self) -> None:
        plot = plot_from_record(GENERATED)
        with pytest.raises(ValidationError):
            plot.owner = "0xdef"  # type: ignore[misc]

    def test_to_dict(self) -> None:
        data = plot_from_record(GENERATED).to_dict()
        assert data == {
            "id": 7,
            "status": "sold",
            "owner": "0xabc",
            "longitude": [-10.5, -9.5],
            "latitude": [20.0, 21.0],
        }

    def test_construct_by_field_name(self) -> None:
        assert Plot(id=1, is_sold=True).is_sold is True
