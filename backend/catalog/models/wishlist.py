"""
Wishlist models.

Wishlist entries are polymorphic: ``entity_type`` names the kind of thing
saved and ``entity_id`` its primary key, so no foreign key backs entity_id.
"""
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.core.database import Base

if TYPE_CHECKING:
    from catalog.models.user import User


class Wishlist(Base):
    __tablename__ = "wishlists"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
    )

    user: Mapped["User"] = relationship("User", back_populates="wishlists")
    entries: Mapped[list["WishlistItem"]] = relationship(
        "WishlistItem",
        back_populates="wishlist",
        cascade="all, delete-orphan",
        order_by="WishlistItem.weight",
    )

    def __repr__(self) -> str:
        return f"<Wishlist {self.name}>"


class WishlistItem(Base):
    """Pivot row placing an entity on a wishlist."""

    __tablename__ = "wishlist_items"

    SHOP_ITEM = "shop_item"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    wishlist_id: Mapped[int] = mapped_column(
        ForeignKey("wishlists.id", ondelete="CASCADE"),
        index=True,
    )
    entity_type: Mapped[str] = mapped_column(String(50), nullable=False)
    entity_id: Mapped[int] = mapped_column(Integer, nullable=False)

    weight: Mapped[int] = mapped_column(Integer, default=0)
    added_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
    )

    __table_args__ = (
        Index("idx_wishlist_items_entity", "entity_type", "entity_id"),
    )

    wishlist: Mapped["Wishlist"] = relationship("Wishlist", back_populates="entries")

    def __repr__(self) -> str:
        return f"<WishlistItem {self.entity_type}:{self.entity_id}>"
