"""
Pydantic request/response bodies for the bookstore HTTP API.

Engine input types (``NewStockBook``, ``BookCopy``, ``BookRating``) are
reused inside these envelopes unchanged; range checks are left to the
engine so that a bad batch is reported as one error naming every
offending isbn.
"""

from typing import List

from pydantic import BaseModel, Field

from ..models import BookCopy, BookRating, NewStockBook


class IsbnQuery(BaseModel):
    """A set of isbns to look up."""

    isbns: List[int] = Field(default_factory=list)


class BuyRequest(BaseModel):
    books: List[BookCopy] = Field(default_factory=list)


class RateRequest(BaseModel):
    ratings: List[BookRating] = Field(default_factory=list)


class AddBooksRequest(BaseModel):
    books: List[NewStockBook] = Field(default_factory=list)


class AddCopiesRequest(BaseModel):
    books: List[BookCopy] = Field(default_factory=list)


class Status(BaseModel):
    status: str = "ok"


class ErrorBody(BaseModel):
    """Body returned for every engine error."""

    detail: str
    error: str
    isbns: List[int] = Field(default_factory=list)
