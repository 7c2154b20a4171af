"""
Daily view and click counters for shop items.
"""
import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Date, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.core.database import Base

if TYPE_CHECKING:
    from catalog.models.shop_item import ShopItem


class ShopItemStats(Base):
    """One row per item per day."""

    __tablename__ = "shop_item_stats"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    shop_id: Mapped[int] = mapped_column(
        ForeignKey("shops.id", ondelete="CASCADE"),
        index=True,
    )
    shop_item_id: Mapped[int] = mapped_column(
        ForeignKey("shop_items.id", ondelete="CASCADE"),
        index=True,
    )
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False)

    views: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    clicks: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    __table_args__ = (
        UniqueConstraint("shop_item_id", "date", name="uq_shop_item_stats_item_date"),
    )

    shop_item: Mapped["ShopItem"] = relationship("ShopItem", back_populates="stats")

    def __repr__(self) -> str:
        return f"<ShopItemStats item={self.shop_item_id} {self.date}>"
