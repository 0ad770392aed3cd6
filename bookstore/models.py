# bookstore/models.py
from pydantic import BaseModel, ConfigDict, computed_field


def _average(total_rating: int, num_times_rated: int) -> float:
    if num_times_rated <= 0:
        return 0.0
    return total_rating / num_times_rated


class NewStockBook(BaseModel):
    """A book to be added to the catalog. Rating counters always start at zero."""

    model_config = ConfigDict(frozen=True)

    isbn: int
    title: str
    author: str
    price: float
    num_copies: int
    editor_pick: bool = False


class BookCopy(BaseModel):
    model_config = ConfigDict(frozen=True)

    isbn: int
    num_copies: int


class BookRating(BaseModel):
    model_config = ConfigDict(frozen=True)

    isbn: int
    rating: int


class StockBook(BaseModel):
    """Immutable snapshot of a catalog entry as seen by the stock manager.

    ``average_rating`` is derived from the two rating counters every time
    it is read; it is never stored alongside them.
    """

    model_config = ConfigDict(frozen=True)

    isbn: int
    title: str
    author: str
    price: float
    num_copies: int
    num_sale_misses: int = 0
    total_rating: int = 0
    num_times_rated: int = 0
    editor_pick: bool = False

    @computed_field  # type: ignore[misc]
    @property
    def average_rating(self) -> float:
        return _average(self.total_rating, self.num_times_rated)


class Book(BaseModel):
    """Storefront view of a book: no stock levels or sale misses."""

    model_config = ConfigDict(frozen=True)

    isbn: int
    title: str
    author: str
    price: float
    average_rating: float = 0.0
    editor_pick: bool = False

    @classmethod
    def from_stock(cls, book: StockBook) -> "Book":
        return cls(
            isbn=book.isbn,
            title=book.title,
            author=book.author,
            price=book.price,
            average_rating=book.average_rating,
            editor_pick=book.editor_pick,
        )


class BookRecord(BaseModel):
    """Mutable catalog entry owned by the engine. Never handed to callers."""

    isbn: int
    title: str
    author: str
    price: float
    num_copies: int
    num_sale_misses: int = 0
    total_rating: int = 0
    num_times_rated: int = 0
    editor_pick: bool = False

    @classmethod
    def from_new(cls, book: NewStockBook) -> "BookRecord":
        return cls(
            isbn=book.isbn,
            title=book.title,
            author=book.author,
            price=book.price,
            num_copies=book.num_copies,
            editor_pick=book.editor_pick,
        )

    @property
    def average_rating(self) -> float:
        return _average(self.total_rating, self.num_times_rated)

    def snapshot(self) -> StockBook:
        return StockBook(
            isbn=self.isbn,
            title=self.title,
            author=self.author,
            price=self.price,
            num_copies=self.num_copies,
            num_sale_misses=self.num_sale_misses,
            total_rating=self.total_rating,
            num_times_rated=self.num_times_rated,
            editor_pick=self.editor_pick,
        )
