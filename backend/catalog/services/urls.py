"""
Site-relative, tracked and canonical URLs for shop items.
"""
from typing import Optional
from urllib.parse import quote_plus

from catalog.core.config import settings

# Path segment of the outbound-click redirect route
REDIRECT_SEGMENT = "to"


def internal_url(shop_base_url: str, slug: str) -> str:
    """Site-relative URL of an item: ``{shop_base_url}/{slug}``."""
    return f"{shop_base_url}/{slug}"


def tracked_url(item_internal_url: str, outbound_url: Optional[str]) -> str:
    """
    Click-tracking redirect link for an outbound URL.

    The outbound URL is form-encoded with no safe characters, so reading the
    ``url`` query parameter back yields the original string exactly. Lone
    surrogates survive via ``surrogatepass``; a missing URL encodes as empty.
    """
    encoded = quote_plus(outbound_url or "", safe="", errors="surrogatepass")
    return f"{item_internal_url}/{REDIRECT_SEGMENT}?website&url={encoded}"


def canonical_url(path: str, base_url: Optional[str] = None) -> str:
    """Fully qualify a site-relative path against the public site root."""
    root = (base_url if base_url is not None else settings.app_url).rstrip("/")
    return f"{root}/{path.lstrip('/')}"
