# bookstore/storage.py
"""
In-memory inventory engine.

``CertainBookStore`` owns the catalog (a mapping from isbn to
``BookRecord``) and a single lock. Every operation takes the lock,
validates the whole request batch against the current catalog and
only then commits, so a batch is applied completely or not at all and
no caller ever observes half of another caller's batch. Results are
always ``StockBook`` snapshots, never the live records.
"""

from __future__ import annotations

import logging
import math
import random
import threading
from collections import Counter
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Type, TypeVar

from .config import settings
from .errors import AlreadyExists, BookStoreError, InvalidArgument, NotFound, OutOfStock
from .models import BookCopy, BookRating, BookRecord, NewStockBook, StockBook
from .ranking import SortBy, top_rated

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_positive_int(value: object) -> bool:
    return _is_int(value) and value > 0  # type: ignore[operator]


def _duplicates(isbns: Iterable[int]) -> List[int]:
    return [isbn for isbn, n in Counter(isbns).items() if n > 1]


def _as_batch(items: Optional[Iterable[T]], what: str, allow_empty: bool = False) -> List[T]:
    if items is None:
        raise InvalidArgument(f"No {what} given")
    batch = list(items)
    if not batch and not allow_empty:
        raise InvalidArgument(f"Empty {what} request")
    return batch


def _reject(error: Type[BookStoreError], message: str, isbns: Sequence[int]) -> None:
    if isbns:
        logger.warning("Rejected batch (%s): %s %s", error.__name__, message, sorted(set(isbns)))
        raise error(message, isbns)


class CertainBookStore:
    """Thread-safe catalog serving both the storefront and the stock manager."""

    def __init__(
        self,
        min_rating: Optional[int] = None,
        max_rating: Optional[int] = None,
        rating_epsilon: Optional[float] = None,
    ) -> None:
        self._books: Dict[int, BookRecord] = {}
        self._lock = threading.Lock()
        self.min_rating = settings.MIN_RATING if min_rating is None else min_rating
        self.max_rating = settings.MAX_RATING if max_rating is None else max_rating
        self.rating_epsilon = settings.RATING_EPSILON if rating_epsilon is None else rating_epsilon

    # ------------------------------------------------------------------
    # Validation helpers. Callers must hold ``self._lock``.

    def _check_pairs(self, pairs: Sequence[T], value_ok: Callable[[T], bool], message: str) -> None:
        bad = [p.isbn for p in pairs if not _is_positive_int(p.isbn) or not value_ok(p)]  # type: ignore[attr-defined]
        bad += _duplicates(p.isbn for p in pairs)  # type: ignore[attr-defined]
        _reject(InvalidArgument, message, bad)

    def _check_present(self, isbns: Iterable[int]) -> None:
        _reject(NotFound, "Books not in the catalog", [i for i in isbns if i not in self._books])

    # ------------------------------------------------------------------
    # Stock manager

    def add_books(self, books: Optional[Iterable[NewStockBook]]) -> None:
        """Add new books. Fails as a whole if any descriptor is invalid or
        any isbn is repeated or already in the catalog."""
        batch = _as_batch(books, "books", allow_empty=True)
        with self._lock:
            invalid = [
                b.isbn
                for b in batch
                if not _is_positive_int(b.isbn)
                or not (b.title or "").strip()
                or not (b.author or "").strip()
                or not math.isfinite(b.price)
                or b.price < 0
                or not _is_int(b.num_copies)
                or b.num_copies < 0
            ]
            invalid += _duplicates(b.isbn for b in batch)
            _reject(InvalidArgument, "Invalid books", invalid)
            _reject(AlreadyExists, "Books already in the catalog", [b.isbn for b in batch if b.isbn in self._books])

            for b in batch:
                self._books[b.isbn] = BookRecord.from_new(b)
        if batch:
            logger.info("Added %d book(s)", len(batch))

    def add_copies(self, book_copies: Optional[Iterable[BookCopy]]) -> None:
        """Restock existing books."""
        batch = _as_batch(book_copies, "copies", allow_empty=True)
        with self._lock:
            self._check_pairs(batch, lambda c: _is_positive_int(c.num_copies), "Invalid number of copies")
            self._check_present(c.isbn for c in batch)

            for c in batch:
                self._books[c.isbn].num_copies += c.num_copies
        if batch:
            logger.info("Added copies for %d book(s)", len(batch))

    def get_books(self) -> List[StockBook]:
        """Snapshot of every book, ordered by isbn."""
        with self._lock:
            return [self._books[isbn].snapshot() for isbn in sorted(self._books)]

    def remove_all_books(self) -> None:
        with self._lock:
            count = len(self._books)
            self._books.clear()
        logger.info("Catalog cleared (%d book(s) removed)", count)

    # ------------------------------------------------------------------
    # Storefront

    def buy_books(self, book_copies: Optional[Iterable[BookCopy]]) -> None:
        """Decrement stock for every pair, or for none of them."""
        batch = _as_batch(book_copies, "books to buy")
        with self._lock:
            self._check_pairs(batch, lambda c: _is_positive_int(c.num_copies), "Invalid number of copies")
            self._check_present(c.isbn for c in batch)
            # Sale misses are only committed with a successful batch, and a
            # successful batch has no short isbns.
            short = [c.isbn for c in batch if self._books[c.isbn].num_copies < c.num_copies]
            _reject(OutOfStock, "Not enough copies in stock", short)

            for c in batch:
                self._books[c.isbn].num_copies -= c.num_copies
        logger.info("Sold %d copy(ies) across %d book(s)", sum(c.num_copies for c in batch), len(batch))

    def rate_books(self, book_ratings: Optional[Iterable[BookRating]]) -> None:
        """Apply every rating in the batch, or none of them."""
        batch = _as_batch(book_ratings, "ratings")
        lo, hi = self.min_rating, self.max_rating
        with self._lock:
            self._check_pairs(
                batch,
                lambda r: _is_int(r.rating) and lo <= r.rating <= hi,
                f"Ratings must be whole numbers in [{lo}, {hi}]",
            )
            self._check_present(r.isbn for r in batch)

            for r in batch:
                record = self._books[r.isbn]
                record.total_rating += r.rating
                record.num_times_rated += 1
        logger.info("Applied %d rating(s)", len(batch))

    def get_books_by_isbn(self, isbns: Optional[Iterable[int]]) -> List[StockBook]:
        """Snapshots for ``isbns`` in request order. Nothing is returned
        unless every isbn is in the catalog."""
        batch = _as_batch(isbns, "isbns")
        with self._lock:
            invalid = [i for i in batch if not _is_positive_int(i)] + _duplicates(batch)
            _reject(InvalidArgument, "Invalid isbns", invalid)
            self._check_present(batch)
            return [self._books[i].snapshot() for i in batch]

    def get_top_rated_books(self, k: int, by: SortBy = SortBy.AVERAGE_RATING) -> List[StockBook]:
        """The ``k`` best-rated books, or every book when there are fewer.

        ``by`` picks the ranking value; the default is the average rating.
        """
        if not _is_positive_int(k):
            logger.warning("Rejected top-rated query with k=%r", k)
            raise InvalidArgument(f"Number of books must be a positive integer, got {k!r}")
        try:
            by = SortBy(by)
        except ValueError:
            raise InvalidArgument(f"Unknown ranking {by!r}") from None
        with self._lock:
            ranked = top_rated(self._books.values(), k, self.rating_epsilon, by)
            return [record.snapshot() for record in ranked]

    def get_editor_picks(self, k: int) -> List[StockBook]:
        """Up to ``k`` editor picks chosen at random."""
        if not _is_int(k) or k < 0:
            logger.warning("Rejected editor-picks query with k=%r", k)
            raise InvalidArgument(f"Number of books must be a non-negative integer, got {k!r}")
        with self._lock:
            picks = [record for record in self._books.values() if record.editor_pick]
            chosen = random.sample(picks, min(k, len(picks)))
            return [record.snapshot() for record in chosen]


# Shared catalog served by the HTTP routers
STORE = CertainBookStore()


def get_store() -> CertainBookStore:
    """FastAPI dependency returning the shared engine."""
    return STORE
