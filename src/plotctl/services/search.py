"""SearchService — the plot finder.

Pipeline: pattern + status filter over the full catalogue (input order
preserved), then a stable sort, then pagination.
"""

from __future__ import annotations

from plotctl.domain.paging import paginate
from plotctl.domain.patterns import filter_plots, sort_plots
from plotctl.domain.types import PatternRule, SortOrder, StatusFilter
from plotctl.services.base import BaseService
from plotctl.services.result import ServiceResult
from plotctl.services.telemetry import trace_span, traced


class SearchService(BaseService):
    """Filters, orders, and pages the plot list."""

    @traced
    def search(
        self,
        rule: PatternRule | str = PatternRule.ALL,
        *,
        wildcard: str | None = None,
        sort: SortOrder | str = SortOrder.ID_ASC,
        status: StatusFilter | str = StatusFilter.ALL,
        page: int = 1,
        per_page: int = 20,
    ) -> ServiceResult:
        """Find plots whose id matches *rule*.

        Args:
            rule: Pattern rule name (``all``, ``palindrome``, ...).
            wildcard: Digits and ``*`` for the ``custom`` rule.
            sort: ``id-asc``, ``id-desc``, ``sold-first`` or ``available-first``.
            status: ``all``, ``available`` or ``sold``.
            page: 1-based page; out-of-range pages fall back to 1.
            per_page: Page size, at least 1.
        """
        try:
            rule = PatternRule(rule)
            sort = SortOrder(sort)
            status = StatusFilter(status)
        except ValueError as exc:
            return ServiceResult.failure("search", "INVALID_ARGUMENT", str(exc))
        if per_page < 1:
            return ServiceResult.failure(
                "search", "INVALID_ARGUMENT", "per_page must be at least 1", per_page=per_page
            )

        warnings: list[str] = []
        if rule is PatternRule.CUSTOM and not wildcard:
            warnings.append("Custom pattern is empty; no plots match")

        with trace_span("load") as span:
            plots, failure = self._load_plots("search")
            if span is not None:
                span.annotate("plots", len(plots))
        if failure is not None:
            return failure

        with trace_span("filter") as span:
            matched = filter_plots(plots, rule, wildcard, status=status)
            if span is not None:
                span.annotate("matched", len(matched))

        with trace_span("sort"):
            ordered = sort_plots(matched, sort)

        current = paginate(ordered, page, per_page)

        return ServiceResult(
            ok=True,
            op="search",
            data={
                "rule": rule.value,
                "wildcard": wildcard if rule is PatternRule.CUSTOM else None,
                "sort": sort.value,
                "status": status.value,
                "count": current.total_items,
                "page": current.number,
                "pages": current.total_pages,
                "per_page": current.per_page,
                "items": [p.to_dict() for p in current.items],
            },
            warnings=warnings,
        )
