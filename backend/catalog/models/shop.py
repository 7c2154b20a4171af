"""
Shop model - a third-party shop listed in the catalog.
"""
from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.core.database import Base

if TYPE_CHECKING:
    from catalog.models.shop_item import ShopItem


class Shop(Base):
    """Shop owning a set of listed items."""

    __tablename__ = "shops"

    # Site-relative root of all shop pages
    url_prefix = "/shops"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False,
    )
    website: Mapped[Optional[str]] = mapped_column(Text)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
    )

    # Relationships
    items: Mapped[list["ShopItem"]] = relationship(
        "ShopItem",
        back_populates="shop",
        cascade="all, delete-orphan",
    )

    @property
    def url(self) -> str:
        """Site-relative base URL of the shop."""
        return f"{self.url_prefix}/{self.slug}"

    def __repr__(self) -> str:
        return f"<Shop {self.slug}>"
