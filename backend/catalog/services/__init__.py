"""
Services package - URL, retailer and presentation derivations, search
projection, slugs, and photo import.
"""
from catalog.services.domains import is_sponsored, resolve_domain
from catalog.services.presentation import button_class, button_text, description_html
from catalog.services.search_index import project_index_document
from catalog.services.slugs import RESERVED_SLUGS, unique_slug
from catalog.services.urls import canonical_url, internal_url, tracked_url

__all__ = [
    "resolve_domain",
    "is_sponsored",
    "button_text",
    "button_class",
    "description_html",
    "internal_url",
    "tracked_url",
    "canonical_url",
    "project_index_document",
    "unique_slug",
    "RESERVED_SLUGS",
]
