"""PlotStore — read-only access to the plot dataset file.

The dataset is loaded once, on first access, and kept as an immutable
tuple. ``reload()`` parses the whole file before swapping the tuple in a
single assignment, so readers see either the old dataset or the new one,
never a mix.

Accepted documents: a bare list of records, or an object with a
``lands`` list (plus ``totalLands``/``soldLands`` counters, which are
informational and not trusted).
"""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from plotctl.domain.plots import Plot, plot_from_record

logger = logging.getLogger(__name__)


class DatasetError(Exception):
    """The dataset file is missing, unreadable, or malformed."""

    def __init__(self, path: Path, reason: str, *, missing: bool = False) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason
        self.missing = missing


def read_document(path: Path) -> Any:
    """Read and decode a JSON document, mapping failures to ``DatasetError``."""
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise DatasetError(path, "file not found", missing=True) from exc
    except OSError as exc:
        raise DatasetError(path, f"cannot read file ({exc.strerror})") from exc
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise DatasetError(path, f"invalid JSON at line {exc.lineno}: {exc.msg}") from exc


def parse_plots(path: Path, document: Any) -> tuple[Plot, ...]:
    """Convert a decoded dataset document into plots."""
    records = document.get("lands") if isinstance(document, dict) else document
    if not isinstance(records, list):
        raise DatasetError(path, "expected a list of plot records or an object with 'lands'")

    plots: list[Plot] = []
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            raise DatasetError(path, f"record {index} is not an object")
        try:
            plots.append(plot_from_record(record))
        except (ValidationError, KeyError, TypeError) as exc:
            raise DatasetError(path, f"record {index} is malformed: {exc}") from exc
    return tuple(plots)


def write_dataset(path: Path, document: dict[str, Any]) -> Path:
    """Write *document* as indented JSON, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(document, indent=2) + "\n", encoding="utf-8")
    logger.debug("Wrote dataset to %s", path)
    return path


class PlotStore:
    """Lazily loaded, atomically reloadable plot catalogue.

    The plots tuple and its id index live together in one snapshot
    attribute, so a reader always sees a matching pair.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self._snapshot: tuple[tuple[Plot, ...], dict[int, Plot]] | None = None
        self._lock = threading.Lock()

    def _current(self) -> tuple[tuple[Plot, ...], dict[int, Plot]]:
        snapshot = self._snapshot
        if snapshot is None:
            self.reload()
            snapshot = self._snapshot
            assert snapshot is not None
        return snapshot

    @property
    def plots(self) -> tuple[Plot, ...]:
        """All plots in file order. Loads the file on first access."""
        return self._current()[0]

    @property
    def loaded(self) -> bool:
        return self._snapshot is not None

    def reload(self) -> tuple[Plot, ...]:
        """Re-read the dataset and replace the in-memory copy as a whole."""
        with self._lock:
            plots = parse_plots(self.path, read_document(self.path))
            self._snapshot = (plots, {p.id: p for p in plots})
        logger.debug("Loaded %d plots from %s", len(plots), self.path)
        return plots

    def get(self, plot_id: int) -> Plot | None:
        return self._current()[1].get(plot_id)
