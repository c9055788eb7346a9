"""Special-number pattern rules over plot ids.

Each rule is an independent predicate over the id's base-10 digit string.
``matches`` dispatches on ``PatternRule`` through ``RULES``; ``custom`` is
the only rule that takes an extra argument (the wildcard string).

INVARIANT: rules are pure and total. A ``custom`` rule with a missing or
empty wildcard matches nothing instead of raising.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable

from plotctl.domain.plots import Plot
from plotctl.domain.types import PatternRule, SortOrder, StatusFilter

_ROUND = re.compile(r"^[1-9]0{2,}$")


def is_palindrome(digits: str) -> bool:
    """12321, 1221."""
    return digits == digits[::-1]


def is_repeating(digits: str) -> bool:
    """111, 2222."""
    return len(set(digits)) == 1


def is_round(digits: str) -> bool:
    """100, 5000, 20000: one non-zero digit then at least two zeros."""
    return _ROUND.match(digits) is not None


def is_mirror(digits: str) -> bool:
    """First half equals the reversed second half.

    The middle digit of an odd-length id is dropped, so for odd lengths this
    is the same test as ``is_palindrome``.
    """
    half = len(digits) // 2
    first = digits[:half]
    second = digits[half if len(digits) % 2 == 0 else half + 1 :]
    return first == second[::-1]


def is_combination(digits: str) -> bool:
    """1212, 123123: the first half repeated literally."""
    if len(digits) % 2:
        return False
    half = len(digits) // 2
    return digits[:half] == digits[half:]


def compile_wildcard(wildcard: str) -> re.Pattern[str]:
    """Compile a wildcard where ``*`` is exactly one digit.

    Every other character is literal, so anything but digits and ``*``
    makes the pattern unable to match a digit string.
    """
    body = "".join("[0-9]" if ch == "*" else re.escape(ch) for ch in wildcard)
    return re.compile(f"^{body}$")


def matches_wildcard(digits: str, wildcard: str | None) -> bool:
    """1*1*1 matches 10101 and 12121."""
    if not wildcard:
        return False
    return compile_wildcard(wildcard).match(digits) is not None


RULES: dict[PatternRule, Callable[[str], bool]] = {
    PatternRule.ALL: lambda _digits: True,
    PatternRule.PALINDROME: is_palindrome,
    PatternRule.REPEATING: is_repeating,
    PatternRule.ROUND: is_round,
    PatternRule.MIRROR: is_mirror,
    PatternRule.COMBINATION: is_combination,
}


def matches(plot_id: int, rule: PatternRule | str, wildcard: str | None = None) -> bool:
    """Return whether *plot_id* belongs to the pattern class *rule*.

    *plot_id* is expected to be positive; it is not validated.
    """
    rule = PatternRule(rule)
    digits = str(plot_id)
    if rule is PatternRule.CUSTOM:
        return matches_wildcard(digits, wildcard)
    return RULES[rule](digits)


# ---------------------------------------------------------------------------
# Filtering and ordering
# ---------------------------------------------------------------------------


def filter_plots(
    plots: Iterable[Plot],
    rule: PatternRule | str = PatternRule.ALL,
    wildcard: str | None = None,
    *,
    status: StatusFilter | str = StatusFilter.ALL,
) -> list[Plot]:
    """Keep plots matching *rule* and *status*, preserving input order."""
    rule = PatternRule(rule)
    status = StatusFilter(status)
    if rule is PatternRule.CUSTOM:
        # Compile once for the whole scan.
        pattern = compile_wildcard(wildcard) if wildcard else None

        def keep(plot_id: int) -> bool:
            return pattern is not None and pattern.match(str(plot_id)) is not None

    else:
        predicate = RULES[rule]

        def keep(plot_id: int) -> bool:
            return predicate(str(plot_id))

    return [p for p in plots if _status_ok(p, status) and keep(p.id)]


def _status_ok(plot: Plot, status: StatusFilter) -> bool:
    if status is StatusFilter.SOLD:
        return plot.is_sold
    if status is StatusFilter.AVAILABLE:
        return not plot.is_sold
    return True


def sort_plots(plots: Iterable[Plot], order: SortOrder | str = SortOrder.ID_ASC) -> list[Plot]:
    """Stable sort on a single numeric key.

    Status orders group sold or available plots first, ids ascending
    within each group.
    """
    order = SortOrder(order)
    by_id = sorted(plots, key=lambda p: p.id)
    if order is SortOrder.ID_DESC:
        return sorted(by_id, key=lambda p: p.id, reverse=True)
    if order is SortOrder.SOLD_FIRST:
        return sorted(by_id, key=lambda p: 0 if p.is_sold else 1)
    if order is SortOrder.AVAILABLE_FIRST:
        return sorted(by_id, key=lambda p: 1 if p.is_sold else 0)
    return by_id
