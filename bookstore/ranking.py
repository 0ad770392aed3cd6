"""
Ordering rules for rating-based listings.

Average ratings are floats, so two books whose averages differ only by
rounding noise must not swap places between calls. Books are first
sorted on the exact value, then neighbours closer than ``epsilon`` are
chained into one group and each group is ordered by isbn ascending.
Grouping after an exact sort keeps the result independent of the order
the books came in, even with a large ``epsilon``: a run of values each
within ``epsilon`` of the next counts as a single tie.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional, Protocol

from .config import settings


class Rated(Protocol):
    isbn: int
    total_rating: int
    num_times_rated: int

    @property
    def average_rating(self) -> float: ...


class SortBy(str, Enum):
    AVERAGE_RATING = "average_rating"
    TOTAL_RATING = "total_rating"
    NUM_TIMES_RATED = "num_times_rated"


_VALUES: Dict[SortBy, Callable[[Rated], float]] = {
    SortBy.AVERAGE_RATING: lambda b: b.average_rating,
    SortBy.TOTAL_RATING: lambda b: b.total_rating,
    SortBy.NUM_TIMES_RATED: lambda b: b.num_times_rated,
}


def compare_ratings(a: float, b: float, epsilon: Optional[float] = None) -> int:
    """Three-way compare two values with tolerance.

    Returns 0 when ``|a - b| < epsilon``, otherwise -1 or 1 following the
    usual numeric order.
    """
    eps = settings.RATING_EPSILON if epsilon is None else epsilon
    if abs(a - b) < eps:
        return 0
    return -1 if a < b else 1


def rank_by_rating(
    books: Iterable[Rated],
    epsilon: Optional[float] = None,
    by: SortBy = SortBy.AVERAGE_RATING,
) -> List[Rated]:
    """Return ``books`` best first on ``by``, ties broken by isbn."""
    value = _VALUES[SortBy(by)]
    ordered = sorted(books, key=lambda b: (-value(b), b.isbn))

    groups: List[List[Rated]] = []
    previous: Optional[float] = None
    for book in ordered:
        current = value(book)
        if previous is None or compare_ratings(previous, current, epsilon) != 0:
            groups.append([])
        groups[-1].append(book)
        previous = current

    return [book for group in groups for book in sorted(group, key=lambda b: b.isbn)]


def top_rated(
    books: Iterable[Rated],
    k: int,
    epsilon: Optional[float] = None,
    by: SortBy = SortBy.AVERAGE_RATING,
) -> List[Rated]:
    """The first ``k`` books of :func:`rank_by_rating` (all of them if fewer)."""
    return rank_by_rating(books, epsilon, by)[:k]
