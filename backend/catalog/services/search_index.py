"""
Search index projection for shop items.

The indexer stores whatever this returns alongside the item's id, so the
document holds both the searchable text and the fields the results page needs.
"""
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from catalog.models.shop_item import ShopItem


def build_searchable(shop_name: str, item_name: str, category_name: Optional[str]) -> str:
    """Single search string with ampersands spelled out."""
    searchable = f"{shop_name} {item_name} {category_name or ''}".strip()
    return searchable.replace("&", "and")


def project_index_document(
    item: "ShopItem",
    shop_name: str,
    category_name: Optional[str] = None,
) -> dict[str, Any]:
    """Flat search document for an item. The id is added by the indexer."""
    return {
        "searchable": build_searchable(shop_name, item.name, category_name),
        "name": item.name,
        "shop_id": item.shop_id,
        "category_id": item.category_id,
    }
