"""
Page/limit pagination shared by list endpoints.
"""

import math

from django.db.models import QuerySet
from ninja import Schema

DEFAULT_LIMIT = 10
MAX_LIMIT = 100


class PaginationOut(Schema):
    """Pagination info for list responses."""

    page: int
    limit: int
    totalCount: int
    totalPages: int
    hasNextPage: bool
    hasPreviousPage: bool


def build_pagination(page: int, limit: int, total_count: int) -> PaginationOut:
    total_pages = math.ceil(total_count / limit) if limit > 0 else 0
    return PaginationOut(
        page=page,
        limit=limit,
        totalCount=total_count,
        totalPages=total_pages,
        hasNextPage=page < total_pages,
        hasPreviousPage=page > 1,
    )


def paginate(queryset: QuerySet, page: int = 1, limit: int = DEFAULT_LIMIT) -> tuple[list, PaginationOut]:
    """
    Run one count query and one bounded query against a filtered queryset.

    `page` is 1-based. Out-of-range values are coerced rather than rejected.
    """
    page = max(1, page or 1)
    if not limit or limit < 1:
        limit = DEFAULT_LIMIT
    limit = min(limit, MAX_LIMIT)

    total_count = queryset.count()
    offset = (page - 1) * limit
    items = list(queryset[offset : offset + limit])

    return items, build_pagination(page, limit, total_count)
