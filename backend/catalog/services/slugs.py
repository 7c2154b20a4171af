"""
Slug generation for shop items.
"""
from collections.abc import Collection

from slugify import slugify

# Item slugs share a path level with these shop routes
RESERVED_SLUGS = frozenset({"stats", "to"})

MAX_SLUG_LENGTH = 200


def unique_slug(name: str, taken: Collection[str], fallback: str = "item") -> str:
    """Slugify ``name`` and suffix -2, -3, ... until it is free and not reserved."""
    base = slugify(name or "", max_length=MAX_SLUG_LENGTH) or fallback

    candidate = base
    counter = 2
    while candidate in taken or candidate in RESERVED_SLUGS:
        candidate = f"{base}-{counter}"
        counter += 1
    return candidate
