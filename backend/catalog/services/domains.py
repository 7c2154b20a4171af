"""
Retailer resolution for outbound item URLs.

Maps an item's external URL to the name shown to shoppers: the registrable
domain, title-cased, unless a retailer override applies.
"""
import re
from typing import Optional
from urllib.parse import urlsplit

import tldextract

# Affiliate redirect host; all of its traffic lands on Chewy.
AFFILIATE_HOST = "prf.hn"

# Checked before the generic fallback. Values are returned verbatim.
DOMAIN_OVERRIDES: dict[str, str] = {
    AFFILIATE_HOST: "Chewy.com",
    "barnesandnoble.com": "Barnes & Noble",
}

# Bundled public suffix snapshot only: resolution never hits the network.
_extract = tldextract.TLDExtract(suffix_list_urls=())

_WORD_START = re.compile(r"(^|\s)(\S)")


def _capitalize_words(value: str) -> str:
    """Upper-case the first character of every word, leaving the rest alone."""
    return _WORD_START.sub(lambda m: m.group(1) + m.group(2).upper(), value)


def registrable_domain(url: Optional[str]) -> Optional[str]:
    """
    Extract the registrable domain from a URL.

    ``https://www.example.co.uk/x`` gives ``example.co.uk``. Hosts without a
    known public suffix (``localhost``, bare IPs) are returned as-is.
    Returns None when the URL has no parseable host.
    """
    if not url or not isinstance(url, str):
        return None

    try:
        host = urlsplit(url.strip()).hostname
    except ValueError:
        return None
    if not host:
        return None

    parts = _extract(host)
    if parts.domain and parts.suffix:
        return f"{parts.domain}.{parts.suffix}"
    return host


def resolve_domain(url: Optional[str]) -> Optional[str]:
    """Resolve the retailer display name for an outbound URL."""
    domain = registrable_domain(url)
    if domain is None:
        return None

    override = DOMAIN_OVERRIDES.get(domain)
    if override is not None:
        return override

    return _capitalize_words(domain)


def is_sponsored(url: Optional[str]) -> bool:
    """Sponsored links go through the affiliate redirect host."""
    return bool(url) and AFFILIATE_HOST in url
