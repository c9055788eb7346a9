"""Tests for CatalogService."""

from pathlib import Path

from plotctl.domain.imagery import DATA_URI_PREFIX, synthesize
from plotctl.infrastructure.coordination import CoordinationIndex
from plotctl.infrastructure.dataset import PlotStore
from plotctl.services.catalog import CatalogService
from tests.conftest import OWNER_C, SAMPLE_OWNERS


class TestGet:
    def test_found(self, store: PlotStore) -> None:
        result = CatalogService(store).get(12321)
        assert result.ok
        assert result.data["status"] == "sold"
        assert result.data["owner"] == OWNER_C
        assert result.data["image"] == synthesize(12321)
        assert "image_url" not in result.data

    def test_not_found(self, store: PlotStore) -> None:
        result = CatalogService(store).get(4)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"

    def test_missing_dataset(self, missing_store: PlotStore) -> None:
        result = CatalogService(missing_store).get(1)
        assert result.error is not None
        assert result.error.code == "DATASET_UNAVAILABLE"

    def test_with_coordination_index(self, store: PlotStore) -> None:
        index = CoordinationIndex.from_document(
            Path("coord.json"),
            [
                {
                    "coord": {"long": {"min": "5", "max": "6"}, "lat": {"min": "-2", "max": "-1"}},
                    "img_url": "https://img.example/1.png",
                }
            ],
        )
        svc = CatalogService(store, index)
        first = svc.get(1).data
        assert first["image_url"] == "https://img.example/1.png"
        assert first["coordination"] == {"longitude": [5.0, 6.0], "latitude": [-2.0, -1.0]}
        # Plot 2 exists in the dataset but not in the index.
        second = svc.get(2).data
        assert second["image_url"].startswith(DATA_URI_PREFIX)
        assert second["coordination"] is None

    def test_without_coordination_index(self, store: PlotStore) -> None:
        assert "coordination" not in CatalogService(store).get(1).data


class TestImage:
    def test_image_payload(self, missing_store: PlotStore) -> None:
        # Images need no dataset.
        result = CatalogService(missing_store).image(777)
        assert result.ok
        assert result.data["data_uri"] == synthesize(777)
        assert len(result.data["matrix"]) == 10
        assert all(row == row[::-1] for row in result.data["matrix"])

    def test_writes_svg(self, store: PlotStore, tmp_path: Path) -> None:
        out = tmp_path / "art" / "777.svg"
        result = CatalogService(store).image(777, output=out)
        assert result.data["path"] == str(out)
        assert out.read_text().startswith("<svg")

    def test_write_failure(self, store: PlotStore, tmp_path: Path) -> None:
        blocker = tmp_path / "file"
        blocker.write_text("")
        result = CatalogService(store).image(1, output=blocker / "x.svg")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "WRITE_FAILED"

    def test_rejects_non_positive_id(self, store: PlotStore) -> None:
        result = CatalogService(store).image(0)
        assert result.error is not None
        assert result.error.code == "INVALID_ARGUMENT"


class TestStats:
    def test_counts(self, store: PlotStore) -> None:
        result = CatalogService(store).stats()
        assert result.data == {
            "total": len(SAMPLE_OWNERS),
            "sold": 7,
            "available": len(SAMPLE_OWNERS) - 7,
            "sold_percentage": round(7 / len(SAMPLE_OWNERS) * 100, 2),
        }

    def test_empty_dataset(self, tmp_path: Path) -> None:
        path = tmp_path / "lands.json"
        path.write_text("[]")
        result = CatalogService(PlotStore(path)).stats()
        assert result.data["total"] == 0
        assert result.data["sold_percentage"] == 0.0
