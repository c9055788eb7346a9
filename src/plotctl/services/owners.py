"""OwnerService — owner-concentration report.

Counts plots per owner address, expresses each count as a percentage of
the whole catalogue (sold and available), and builds a chart series of the
largest owners with everyone else folded into an ``Others`` bucket.
"""

from __future__ import annotations

from collections import Counter
from typing import Any

from plotctl.services.base import BaseService
from plotctl.services.result import ServiceResult
from plotctl.services.telemetry import traced

SORT_KEYS = ("plots", "percentage")
OTHERS = "Others"


def shorten_address(address: str) -> str:
    """``0x1234...abcd`` form for tables and charts.

    Examples:
        >>> shorten_address("0x1234567890abcdef1234567890abcdef12345678")
        '0x1234...5678'
        >>> shorten_address("0xabc")
        '0xabc'
    """
    if len(address) <= 10:
        return address
    return f"{address[:6]}...{address[-4:]}"


def chart_series(owners: list[dict[str, Any]], top: int) -> list[dict[str, Any]]:
    """Top *top* owners by plot count, plus an ``Others`` row for the rest."""
    ranked = sorted(owners, key=lambda o: o["plots"], reverse=True)
    series = [
        {"label": o["short"], "plots": o["plots"], "percentage": o["percentage"]}
        for o in ranked[:top]
    ]
    rest = ranked[top:]
    if rest:
        series.append(
            {
                "label": OTHERS,
                "plots": sum(o["plots"] for o in rest),
                "percentage": round(sum(o["percentage"] for o in rest), 2),
            }
        )
    return series


class OwnerService(BaseService):
    """Who owns how much of the catalogue."""

    @traced
    def report(
        self,
        *,
        query: str | None = None,
        sort_by: str = "plots",
        order: str = "desc",
        limit: int | None = None,
        chart_top: int = 10,
    ) -> ServiceResult:
        """Per-owner plot counts.

        Args:
            query: Case-insensitive substring filter on the address.
            sort_by: ``plots`` or ``percentage``.
            order: ``asc`` or ``desc``.
            limit: Max rows in ``items`` (the totals still cover every owner).
            chart_top: Owners shown individually in the chart series.
        """
        if sort_by not in SORT_KEYS:
            return ServiceResult.failure(
                "owners", "INVALID_ARGUMENT", f"Unknown sort key: {sort_by}", sort_by=sort_by
            )
        if order not in ("asc", "desc"):
            return ServiceResult.failure(
                "owners", "INVALID_ARGUMENT", f"Unknown sort order: {order}", order=order
            )

        plots, failure = self._load_plots("owners")
        if failure is not None:
            return failure

        total = len(plots)
        counts = Counter(p.owner for p in plots if p.owner)
        owners = [
            {
                "address": address,
                "short": shorten_address(address),
                "plots": count,
                "percentage": round(count / total * 100, 2),
            }
            for address, count in counts.items()
        ]

        owned = sum(counts.values())
        average = round(owned / len(owners), 1) if owners else 0.0
        chart = chart_series(owners, chart_top)

        if query:
            needle = query.lower()
            owners = [o for o in owners if needle in o["address"].lower()]

        # Address as tie-breaker keeps the listing deterministic.
        owners.sort(key=lambda o: o["address"])
        owners.sort(key=lambda o: o[sort_by], reverse=order == "desc")
        matched = len(owners)
        if limit is not None:
            owners = owners[:limit]

        return ServiceResult(
            ok=True,
            op="owners",
            data={
                "owners": len(counts),
                "matched": matched,
                "owned_plots": owned,
                "total_plots": total,
                "average_per_owner": average,
                "sort_by": sort_by,
                "order": order,
                "items": owners,
                "chart": chart,
            },
        )
