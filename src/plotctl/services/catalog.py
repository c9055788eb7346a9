"""CatalogService — single-plot lookup, plot images, and catalogue totals.

The optional :class:`CoordinationIndex` is injected by the caller. When
present, ``get`` reports the artwork URL it holds for the plot (or a
"No Image" placeholder when the plot is outside the index) and the map
bounding box from the index under ``coordination`` (None when absent).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from plotctl.domain import imagery
from plotctl.services.base import BaseService
from plotctl.services.result import ServiceResult
from plotctl.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from plotctl.infrastructure.coordination import CoordinationIndex
    from plotctl.infrastructure.dataset import PlotStore


class CatalogService(BaseService):
    """Read-only views over the whole catalogue."""

    def __init__(self, store: PlotStore, coordination: CoordinationIndex | None = None) -> None:
        super().__init__(store)
        self._coordination = coordination

    @traced
    def get(self, plot_id: int) -> ServiceResult:
        """Retrieve one plot with its synthesized image."""
        _, failure = self._load_plots("get")
        if failure is not None:
            return failure

        plot = self._store.get(plot_id)
        if plot is None:
            return ServiceResult.failure(
                "get", "NOT_FOUND", f"No plot with id {plot_id}", id=plot_id
            )

        data: dict[str, Any] = plot.to_dict()
        data["image"] = imagery.synthesize(plot.id)
        if self._coordination is not None:
            data["image_url"] = self._coordination.image_url(plot.id) or imagery.placeholder(
                "No Image"
            )
            mapped = self._coordination.coordinates(plot.id)
            data["coordination"] = mapped.to_dict() if mapped is not None else None
        return ServiceResult(ok=True, op="get", data=data)

    @traced
    def image(self, plot_id: int, *, output: Path | None = None) -> ServiceResult:
        """Synthesize the image for *plot_id*, optionally writing the SVG to *output*.

        Works for any positive id, including ids outside the dataset.
        """
        if plot_id < 1:
            return ServiceResult.failure(
                "image", "INVALID_ARGUMENT", "Plot id must be a positive integer", id=plot_id
            )

        with trace_span("synthesize"):
            matrix = imagery.color_matrix(plot_id)
            svg = imagery.render_svg(matrix)

        data: dict[str, Any] = {
            "id": plot_id,
            "matrix": [[color.value for color in row] for row in matrix],
            "data_uri": imagery.to_data_uri(svg),
        }

        if output is not None:
            try:
                output.parent.mkdir(parents=True, exist_ok=True)
                output.write_text(svg, encoding="utf-8")
            except OSError as exc:
                return ServiceResult.failure(
                    "image", "WRITE_FAILED", f"Cannot write {output}: {exc}", path=str(output)
                )
            data["path"] = str(output)

        return ServiceResult(ok=True, op="image", data=data)

    @traced
    def stats(self) -> ServiceResult:
        """Total, sold, and available plot counts."""
        plots, failure = self._load_plots("stats")
        if failure is not None:
            return failure

        total = len(plots)
        sold = sum(1 for p in plots if p.is_sold)
        percentage = round(sold / total * 100, 2) if total else 0.0
        return ServiceResult(
            ok=True,
            op="stats",
            data={
                "total": total,
                "sold": sold,
                "available": total - sold,
                "sold_percentage": percentage,
            },
        )
