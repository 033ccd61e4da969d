"""Page/limit handling shared by list endpoints."""

import math
from dataclasses import dataclass
from typing import Any

from sqlalchemy.orm import Query

MAX_PAGE_SIZE = 100
DEFAULT_PAGE_SIZE = 10


@dataclass(frozen=True)
class PageParams:
    """Validated ``page`` (1-based) and ``limit`` query parameters."""

    page: int = 1
    limit: int = DEFAULT_PAGE_SIZE

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def total_pages(total: int, limit: int) -> int:
    """Number of pages needed for ``total`` rows."""
    return math.ceil(total / limit) if limit else 0


def paginate(query: Query, params: PageParams) -> dict[str, Any]:
    """Run ``query`` for one page and count the full result set."""
    total = query.order_by(None).count()
    items = query.offset(params.offset).limit(params.limit).all()
    return {
        "data": items,
        "total": total,
        "page": params.page,
        "limit": params.limit,
        "total_pages": total_pages(total, params.limit),
    }
