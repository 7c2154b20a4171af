"""
SQLAlchemy models package.
All models are imported here for easy access and Alembic discovery.
"""
from catalog.models.favorite import FavoriteShopItem
from catalog.models.photo import Photo
from catalog.models.shop import Shop
from catalog.models.shop_category import ShopCategory
from catalog.models.shop_item import ShopItem
from catalog.models.shop_item_stats import ShopItemStats
from catalog.models.user import User
from catalog.models.wishlist import Wishlist, WishlistItem

__all__ = [
    "Shop",
    "ShopCategory",
    "ShopItem",
    "ShopItemStats",
    "Photo",
    "User",
    "Wishlist",
    "WishlistItem",
    "FavoriteShopItem",
]
