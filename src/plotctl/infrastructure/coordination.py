"""CoordinationIndex — auxiliary per-plot coordinates and artwork URLs.

The coordination file is a JSON list of
``{"coord": {"long": {...}, "lat": {...}}, "img_url": "..."}`` entries
where entry ``i`` describes plot ``i + 1``. Every entry is validated when
the file is loaded; a bad entry fails the whole load with ``DatasetError``.
The index is built once and passed explicitly to whatever needs it; there
is no module-level cache.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError, field_validator

from plotctl.domain.plots import Coordinates
from plotctl.infrastructure.dataset import DatasetError, read_document

logger = logging.getLogger(__name__)


class CoordinationEntry(BaseModel):
    """One coordination record. Both parts are optional."""

    model_config = {"frozen": True}

    coord: Coordinates | None = None
    img_url: str | None = None

    @field_validator("coord", mode="before")
    @classmethod
    def _from_long_lat(cls, value: Any) -> Any:
        if isinstance(value, dict) and ("long" in value or "lat" in value):
            missing = [key for key in ("long", "lat") if key not in value]
            if missing:
                raise ValueError(f"coord block lacks {', '.join(missing)}")
            return {"longitude": value["long"], "latitude": value["lat"]}
        return value


def parse_entries(path: Path, document: Any) -> tuple[CoordinationEntry, ...]:
    """Validate a decoded coordination document."""
    if not isinstance(document, list):
        raise DatasetError(path, "expected a list of coordination entries")
    entries: list[CoordinationEntry] = []
    for index, raw in enumerate(document):
        if not isinstance(raw, dict):
            raise DatasetError(path, f"entry {index} is not an object")
        try:
            entries.append(CoordinationEntry.model_validate(raw))
        except ValidationError as exc:
            raise DatasetError(path, f"entry {index} is malformed: {exc}") from exc
    return tuple(entries)


class CoordinationIndex:
    """Read-only lookup of coordination entries by plot id."""

    def __init__(self, entries: tuple[CoordinationEntry, ...]) -> None:
        self._entries = entries

    @classmethod
    def from_document(cls, path: Path, document: Any) -> CoordinationIndex:
        return cls(parse_entries(path, document))

    @classmethod
    def from_file(cls, path: Path) -> CoordinationIndex:
        index = cls.from_document(path, read_document(path))
        logger.debug("Loaded %d coordination entries from %s", len(index), path)
        return index

    def __len__(self) -> int:
        return len(self._entries)

    def _entry(self, plot_id: int) -> CoordinationEntry | None:
        index = plot_id - 1
        if index < 0 or index >= len(self._entries):
            logger.debug("Plot %d is outside the coordination index", plot_id)
            return None
        return self._entries[index]

    def coordinates(self, plot_id: int) -> Coordinates | None:
        entry = self._entry(plot_id)
        return entry.coord if entry is not None else None

    def image_url(self, plot_id: int) -> str | None:
        entry = self._entry(plot_id)
        if entry is None:
            return None
        return entry.img_url or None
