"""
Paged query results.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")

PAGINATION_HEADER = "X-Pagination"


@dataclass
class PagedList(Generic[T]):
    items: list[T] = field(default_factory=list)
    current_page: int = 1
    total_count: int = 0
    page_size: int = 10

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return math.ceil(self.total_count / self.page_size)

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    def metadata(self) -> dict[str, Any]:
        """
        Pagination summary for the `X-Pagination` header.

        `HasPrevios` and `HastNext` are spelled the way existing clients read them.
        """
        return {
            "CurrentPage": self.current_page,
            "TotalCount": self.total_count,
            "TotalPages": self.total_pages,
            "PageSize": self.page_size,
            "HasPrevios": self.has_previous,
            "HastNext": self.has_next,
        }

    def header_value(self) -> str:
        return json.dumps(self.metadata())


def offset_for(page_number: int, page_size: int) -> int:
    return max(page_number - 1, 0) * page_size
