"""
Favorite shop items - association object between users and shop items.
"""
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.core.database import Base

if TYPE_CHECKING:
    from catalog.models.shop_item import ShopItem
    from catalog.models.user import User


class FavoriteShopItem(Base):
    """A user's favorite, denormalized with the item's shop for per-shop counts."""

    __tablename__ = "favorite_shop_items"

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )
    shop_item_id: Mapped[int] = mapped_column(
        ForeignKey("shop_items.id", ondelete="CASCADE"),
        primary_key=True,
    )
    shop_id: Mapped[int] = mapped_column(
        ForeignKey("shops.id", ondelete="CASCADE"),
        index=True,
    )
    favorited_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
    )

    user: Mapped["User"] = relationship("User", back_populates="favorite_shop_items")
    shop_item: Mapped["ShopItem"] = relationship("ShopItem", back_populates="favorites")
