"""Pagination envelope."""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    """One page of results plus the totals needed to fetch the rest."""

    data: list[T]
    total: int
    page: int
    limit: int
    total_pages: int
