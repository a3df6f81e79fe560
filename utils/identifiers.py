"""
Slug-or-id resolution for route parameters.

Resources addressed by a single path segment accept either their UUID or
their human-readable slug. The segment is classified by shape: anything that
matches the canonical UUID pattern is looked up by primary key, everything
else is treated as a slug.
"""

import re
from typing import Any

from django.db.models import Model, QuerySet
from ninja.errors import HttpError

UUID_REGEX = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.I)


def is_uuid(value: str) -> bool:
    """Check whether a path segment is an opaque identifier."""
    return bool(UUID_REGEX.match(value or ""))


def resolve_identifier(
    queryset: QuerySet,
    identifier: str,
    *,
    public_filters: dict[str, Any] | None = None,
    is_admin: bool = False,
    not_found: str = "Not found",
) -> Model:
    """
    Fetch a single row by id or slug.

    Slug lookups made by non-admin callers are narrowed by `public_filters`
    (e.g. only active or published rows). Id lookups are never narrowed.
    """
    if is_uuid(identifier):
        lookup = {"id": identifier}
    else:
        lookup = {"slug": identifier}
        if public_filters and not is_admin:
            lookup.update(public_filters)

    obj = queryset.filter(**lookup).first()
    if obj is None:
        raise HttpError(404, not_found)
    return obj


def get_by_id(queryset: QuerySet, object_id: Any, not_found: str = "Not found") -> Model:
    """Fetch a single row by primary key; malformed ids are simply not found."""
    if not is_uuid(str(object_id)):
        raise HttpError(404, not_found)
    obj = queryset.filter(id=object_id).first()
    if obj is None:
        raise HttpError(404, not_found)
    return obj
