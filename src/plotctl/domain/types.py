"""Pattern rules, sort orders, status filters, and the image palette.

String values are the names accepted on the command line and written to
JSON output, so they must stay stable.
"""

from __future__ import annotations

from enum import StrEnum


class PatternRule(StrEnum):
    """Named predicate classes over a plot id's decimal digit string."""

    ALL = "all"
    PALINDROME = "palindrome"
    REPEATING = "repeating"
    ROUND = "round"
    MIRROR = "mirror"
    COMBINATION = "combination"
    CUSTOM = "custom"


class SortOrder(StrEnum):
    """Ordering applied after pattern filtering."""

    ID_ASC = "id-asc"
    ID_DESC = "id-desc"
    SOLD_FIRST = "sold-first"
    AVAILABLE_FIRST = "available-first"


class StatusFilter(StrEnum):
    """Quick filter on sold/available status."""

    ALL = "all"
    AVAILABLE = "available"
    SOLD = "sold"


class Palette(StrEnum):
    """The three fill colors used by synthesized plot images."""

    PRIMARY = "#f85266"
    SECONDARY = "#b243a7"
    TERTIARY = "#3f4057"
