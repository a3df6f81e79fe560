"""
Text helpers: slugs and reading time.
"""

import math
import re

from django.db.models import Model

WORDS_PER_MINUTE = 200


def slugify(text: str) -> str:
    """Generate slug from text."""
    text = text.lower().strip()
    text = re.sub(r"[^\w\s-]", "", text)
    text = re.sub(r"[-\s_]+", "-", text)
    return text.strip("-")


def unique_slug(model: type[Model], base: str, exclude_id=None) -> str:
    """Return `base`, or `base-1`, `base-2`, ... whichever is free."""
    queryset = model.objects.all()
    if exclude_id is not None:
        queryset = queryset.exclude(id=exclude_id)

    candidate = base
    counter = 1
    while queryset.filter(slug=candidate).exists():
        candidate = f"{base}-{counter}"
        counter += 1
    return candidate


def word_count(text: str | None) -> int:
    return len((text or "").split())


def reading_time(text: str | None) -> int:
    """Estimated minutes to read, at least one."""
    return max(1, math.ceil(word_count(text) / WORDS_PER_MINUTE))
