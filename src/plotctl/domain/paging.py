"""Page slicing for result lists."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of a result list."""

    number: int
    per_page: int
    total_items: int
    items: list[T] = field(default_factory=list)

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_items / self.per_page)

    @property
    def has_next(self) -> bool:
        return self.number < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.number > 1


def paginate(items: Sequence[T], page: int, per_page: int) -> Page[T]:
    """Slice *items* into the 1-based *page*.

    A page outside ``1..total_pages`` falls back to page 1, matching what a
    filter change does to a stale page number.
    """
    if per_page < 1:
        raise ValueError(f"per_page must be >= 1, got {per_page}")
    total_pages = math.ceil(len(items) / per_page)
    if page < 1 or page > total_pages:
        page = 1
    start = (page - 1) * per_page
    return Page(
        number=page,
        per_page=per_page,
        total_items=len(items),
        items=list(items[start : start + per_page]),
    )
