"""
Pydantic schemas package.
"""
from catalog.schemas.shop import ShopResponse, ShopStatsResponse
from catalog.schemas.shop_item import (
    ShopItemCreate,
    ShopItemResponse,
    ShopItemStatsResponse,
)

__all__ = [
    # Shop
    "ShopResponse",
    "ShopStatsResponse",
    # Shop item
    "ShopItemCreate",
    "ShopItemResponse",
    "ShopItemStatsResponse",
]
