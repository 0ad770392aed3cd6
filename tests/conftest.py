"""Shared pytest fixtures for all tests."""
from __future__ import annotations

from typing import Callable, Generator

import pytest
from fastapi.testclient import TestClient

from bookstore.main import app
from bookstore.models import NewStockBook
from bookstore.storage import CertainBookStore, get_store


@pytest.fixture
def make_book() -> Callable[..., NewStockBook]:
    """Factory for throwaway test book descriptors."""

    def _make(isbn: int, copies: int = 1, **overrides) -> NewStockBook:
        fields = dict(
            isbn=isbn,
            title="Test of Thrones",
            author="George RR Testin'",
            price=10.0,
            num_copies=copies,
            editor_pick=False,
        )
        fields.update(overrides)
        return NewStockBook(**fields)

    return _make


@pytest.fixture
def default_book() -> NewStockBook:
    """The book every test store starts with (isbn 3044560, 5 copies)."""
    return NewStockBook(
        isbn=3044560,
        title="Harry Potter and JUnit",
        author="JK Unit",
        price=10.0,
        num_copies=5,
        editor_pick=False,
    )


@pytest.fixture
def store(default_book: NewStockBook) -> Generator[CertainBookStore, None, None]:
    """A fresh engine holding only the default book."""
    engine = CertainBookStore()
    engine.add_books({default_book})
    yield engine
    engine.remove_all_books()


@pytest.fixture
def client(store: CertainBookStore) -> Generator[TestClient, None, None]:
    """HTTP client whose routes all talk to ``store``."""
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
