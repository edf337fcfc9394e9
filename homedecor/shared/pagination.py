import math

from fastapi import Query
from pydantic import BaseModel


class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    pages: int


def page_meta(page: int, limit: int, total: int) -> Pagination:
    return Pagination(page=page, limit=limit, total=total, pages=math.ceil(total / limit))


class PageParams:
    """Query-string paging for list endpoints (10 per page unless asked otherwise)."""

    def __init__(self, page: int = Query(default=1, ge=1), limit: int = Query(default=10, ge=1, le=100)):
        self.page = page
        self.limit = limit

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit

    def meta(self, total: int) -> Pagination:
        return page_meta(self.page, self.limit, total)
