import math
from typing import Optional

from .base import ApiModel


class PaginationMeta(ApiModel):
    current: int
    page_size: int
    total: int
    total_records: int
    has_next: bool
    has_prev: bool
    next_page: Optional[int] = None
    prev_page: Optional[int] = None

    @classmethod
    def build(cls, page: int, limit: int, total_records: int) -> "PaginationMeta":
        total_pages = math.ceil(total_records / limit) if limit else 0
        return cls(
            current=page,
            page_size=limit,
            total=total_pages,
            total_records=total_records,
            has_next=page < total_pages,
            has_prev=page > 1,
            next_page=page + 1 if page < total_pages else None,
            prev_page=page - 1 if page > 1 else None,
        )
