"""
Repository package for data access layer.
"""
from catalog.repositories.base import BaseRepository
from catalog.repositories.shop import ShopRepository
from catalog.repositories.shop_item import ShopItemRepository
from catalog.repositories.shop_item_stats import ShopItemStatsRepository

__all__ = [
    "BaseRepository",
    "ShopRepository",
    "ShopItemRepository",
    "ShopItemStatsRepository",
]
