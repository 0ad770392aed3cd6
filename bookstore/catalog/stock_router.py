"""
Stock manager routes.

Endpoints under /api/stock:
- GET    /books        : every book with stock and rating counters
- POST   /books        : add new books
- POST   /books/query  : look up books by isbn
- POST   /copies       : restock existing books
- DELETE /books        : clear the catalog
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from ..models import StockBook
from ..storage import CertainBookStore, get_store
from .schemas import AddBooksRequest, AddCopiesRequest, IsbnQuery, Status

router = APIRouter(prefix="/api/stock", tags=["stock"])


@router.get("/books", response_model=List[StockBook])
def list_books(store: CertainBookStore = Depends(get_store)) -> List[StockBook]:
    return store.get_books()


@router.post("/books", response_model=Status)
def add_books(req: AddBooksRequest, store: CertainBookStore = Depends(get_store)) -> Status:
    store.add_books(req.books)
    return Status()


@router.post("/books/query", response_model=List[StockBook])
def get_books(req: IsbnQuery, store: CertainBookStore = Depends(get_store)) -> List[StockBook]:
    return store.get_books_by_isbn(req.isbns)


@router.post("/copies", response_model=Status)
def add_copies(req: AddCopiesRequest, store: CertainBookStore = Depends(get_store)) -> Status:
    store.add_copies(req.books)
    return Status()


@router.delete("/books", response_model=Status)
def remove_all_books(store: CertainBookStore = Depends(get_store)) -> Status:
    store.remove_all_books()
    return Status()
