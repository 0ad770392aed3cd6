"""
HTTP surface of the bookstore.

Two routers expose the same inventory engine to two kinds of client:
``storefront_router`` for customers who look up, buy and rate books,
and ``stock_router`` for staff who stock and inspect the catalog.
"""

from .router import router as storefront_router  # noqa: F401
from .stock_router import router as stock_router  # noqa: F401
