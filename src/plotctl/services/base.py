"""BaseService — abstract foundation for all plotctl services.

Every service receives a :class:`PlotStore` at construction time. Dataset
failures surface as :class:`DatasetError`; ``_load_plots`` converts them
into a failed ServiceResult so no service ever raises for a bad file.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from plotctl.infrastructure.dataset import DatasetError
from plotctl.services.result import ServiceResult

if TYPE_CHECKING:
    from plotctl.domain.plots import Plot
    from plotctl.infrastructure.dataset import PlotStore

logger = logging.getLogger(__name__)


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class SearchService(BaseService):
            def search(self, ...) -> ServiceResult:
                plots, failure = self._load_plots("search")
                if failure is not None:
                    return failure
                ...
    """

    def __init__(self, store: PlotStore) -> None:
        self._store = store

    def _load_plots(self, op: str) -> tuple[tuple[Plot, ...], ServiceResult | None]:
        """Return ``(plots, None)`` or ``((), failure_result)``."""
        try:
            return self._store.plots, None
        except DatasetError as exc:
            logger.debug("Dataset load failed for %s", op, exc_info=True)
            return (), dataset_failure(op, exc)


def dataset_failure(op: str, exc: DatasetError) -> ServiceResult:
    """Map a DatasetError to the matching error code."""
    code = "DATASET_UNAVAILABLE" if exc.missing else "DATASET_INVALID"
    return ServiceResult.failure(
        op,
        code,
        f"Cannot load plot dataset: {exc.reason}",
        path=str(exc.path),
    )
