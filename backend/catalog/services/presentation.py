"""
Buy-button and description rendering for shop items.
"""
import html
import re
from typing import Optional

BARNES_AND_NOBLE = "Barnes & Noble"

# Retailers whose label reads "Buy at ..." rather than "Buy on ..."
BUY_AT_RETAILERS = frozenset({BARNES_AND_NOBLE})

# Label used when the item URL yields no retailer
FALLBACK_BUTTON_TEXT = "Buy Now"

BUTTON_CLASSES: dict[str, str] = {
    "Amazon.com": "amazon",
    BARNES_AND_NOBLE: "bn",
    "Chewy.com": "chewy",
    "Etsy.com": "etsy",
}
DEFAULT_BUTTON_CLASS = "primary"

_LINE_BREAK = re.compile(r"(\r\n|\n\r|\n|\r)")


def button_text(domain: Optional[str]) -> str:
    """Label for the item's buy button."""
    if not domain:
        return FALLBACK_BUTTON_TEXT
    if domain in BUY_AT_RETAILERS:
        return f"Buy at {domain}"
    return f"Buy on {domain}"


def button_class(domain: Optional[str]) -> str:
    """Style identifier for the item's buy button."""
    if domain is None:
        return DEFAULT_BUTTON_CLASS
    return BUTTON_CLASSES.get(domain, DEFAULT_BUTTON_CLASS)


def description_html(description: Optional[str]) -> str:
    """Escape a plain-text description and keep its line breaks visible."""
    if not description:
        return ""
    return _LINE_BREAK.sub(r"<br />\1", html.escape(description))
