"""
Storefront routes.

Endpoints under /api/store:
- POST /books/query          : look up books by isbn
- POST /books/buy            : buy copies of one or more books
- POST /books/rate           : rate one or more books
- GET  /books/top-rated      : the k best-rated books (by average by default)
- GET  /books/editor-picks   : up to k random editor picks

Storefront clients only see ``Book`` values; stock levels stay with the
stock manager routes in ``stock_router``.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Query

from ..models import Book
from ..ranking import SortBy
from ..storage import CertainBookStore, get_store
from .schemas import BuyRequest, IsbnQuery, RateRequest, Status

router = APIRouter(prefix="/api/store", tags=["storefront"])


@router.post("/books/query", response_model=List[Book])
def get_books(req: IsbnQuery, store: CertainBookStore = Depends(get_store)) -> List[Book]:
    return [Book.from_stock(b) for b in store.get_books_by_isbn(req.isbns)]


@router.post("/books/buy", response_model=Status)
def buy_books(req: BuyRequest, store: CertainBookStore = Depends(get_store)) -> Status:
    store.buy_books(req.books)
    return Status()


@router.post("/books/rate", response_model=Status)
def rate_books(req: RateRequest, store: CertainBookStore = Depends(get_store)) -> Status:
    store.rate_books(req.ratings)
    return Status()


@router.get("/books/top-rated", response_model=List[Book])
def top_rated_books(
    k: int = Query(..., description="Number of books to return"),
    by: SortBy = Query(default=SortBy.AVERAGE_RATING, description="Ranking value"),
    store: CertainBookStore = Depends(get_store),
) -> List[Book]:
    """Best average rating first by default; ``k`` larger than the catalog
    returns everything."""
    return [Book.from_stock(b) for b in store.get_top_rated_books(k, by)]


@router.get("/books/editor-picks", response_model=List[Book])
def editor_picks(
    k: int = Query(..., description="Maximum number of picks to return"),
    store: CertainBookStore = Depends(get_store),
) -> List[Book]:
    return [Book.from_stock(b) for b in store.get_editor_picks(k)]
