"""Tests for OwnerService and its helpers."""

from pathlib import Path

import pytest

from plotctl.infrastructure.dataset import PlotStore
from plotctl.services.owners import OTHERS, OwnerService, chart_series, shorten_address
from tests.conftest import OWNER_A, OWNER_B, OWNER_C


class TestShortenAddress:
    def test_long_address(self) -> None:
        assert shorten_address(OWNER_A) == "0xaaaa...0001"

    def test_short_address_untouched(self) -> None:
        assert shorten_address("0x12345678") == "0x12345678"


class TestChartSeries:
    def test_others_bucket(self) -> None:
        owners = [
            {"short": "a", "plots": 5, "percentage": 50.0},
            {"short": "b", "plots": 3, "percentage": 30.0},
            {"short": "c", "plots": 1, "percentage": 10.0},
            {"short": "d", "plots": 1, "percentage": 10.0},
        ]
        series = chart_series(owners, 2)
        assert [row["label"] for row in series] == ["a", "b", OTHERS]
        assert series[-1] == {"label": OTHERS, "plots": 2, "percentage": 20.0}

    def test_no_others_when_everyone_fits(self) -> None:
        owners = [{"short": "a", "plots": 1, "percentage": 100.0}]
        assert chart_series(owners, 10) == [{"label": "a", "plots": 1, "percentage": 100.0}]


class TestReport:
    def test_totals(self, store: PlotStore) -> None:
        result = OwnerService(store).report()
        assert result.ok
        d = result.data
        assert d["owners"] == 3
        assert d["owned_plots"] == 7
        assert d["total_plots"] == 19
        assert d["average_per_owner"] == 2.3

    def test_default_order(self, store: PlotStore) -> None:
        items = OwnerService(store).report().data["items"]
        assert [i["address"] for i in items] == [OWNER_A, OWNER_B, OWNER_C]
        assert [i["plots"] for i in items] == [4, 2, 1]
        assert [i["percentage"] for i in items] == [21.05, 10.53, 5.26]

    def test_ascending_by_percentage(self, store: PlotStore) -> None:
        items = OwnerService(store).report(sort_by="percentage", order="asc").data["items"]
        assert [i["address"] for i in items] == [OWNER_C, OWNER_B, OWNER_A]

    def test_search_is_case_insensitive(self, store: PlotStore) -> None:
        result = OwnerService(store).report(query="bbbb")
        assert [i["address"] for i in result.data["items"]] == [OWNER_B]
        assert result.data["matched"] == 1
        # Totals still describe every owner.
        assert result.data["owners"] == 3

    def test_limit(self, store: PlotStore) -> None:
        result = OwnerService(store).report(limit=1)
        assert len(result.data["items"]) == 1
        assert result.data["matched"] == 3

    def test_chart(self, store: PlotStore) -> None:
        chart = OwnerService(store).report(chart_top=2).data["chart"]
        assert [row["plots"] for row in chart] == [4, 2, 1]
        assert chart[-1]["label"] == OTHERS

    def test_invalid_sort_key(self, store: PlotStore) -> None:
        result = OwnerService(store).report(sort_by="name")
        assert result.error is not None
        assert result.error.code == "INVALID_ARGUMENT"

    def test_invalid_order(self, store: PlotStore) -> None:
        result = OwnerService(store).report(order="sideways")
        assert not result.ok

    def test_no_owners(self, tmp_path: Path) -> None:
        path = tmp_path / "lands.json"
        path.write_text('[{"id": 1, "isSold": false}]')
        result = OwnerService(PlotStore(path)).report()
        assert result.data["owners"] == 0
        assert result.data["average_per_owner"] == 0.0
        assert result.data["chart"] == []

    def test_invalid_dataset(self, tmp_path: Path) -> None:
        path = tmp_path / "lands.json"
        path.write_text("{not json")
        result = OwnerService(PlotStore(path)).report()
        assert result.error is not None
        assert result.error.code == "DATASET_INVALID"


class TestShares:
    def test_percentages_sum_to_owned_share(self, store: PlotStore) -> None:
        d = OwnerService(store).report().data
        owned_share = d["owned_plots"] / d["total_plots"] * 100
        total = sum(item["percentage"] for item in d["items"])
        # Each percentage is rounded to 2 dp.
        assert total == pytest.approx(owned_share, abs=0.005 * len(d["items"]))

    def test_chart_row_limit(self, store: PlotStore) -> None:
        for top in (1, 2, 3, 10):
            chart = OwnerService(store).report(chart_top=top).data["chart"]
            assert len(chart) <= top + 1
            assert sum(row["plots"] for row in chart) == 7
