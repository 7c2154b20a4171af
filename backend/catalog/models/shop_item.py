"""
ShopItem model - a product listed by a shop, linking out to the retailer.
"""
from datetime import datetime
from typing import TYPE_CHECKING, Any, Optional

from sqlalchemy import (
    BigInteger,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from catalog.core.database import Base
from catalog.core.exceptions import ReservedSlugError
from catalog.services import domains, presentation, urls
from catalog.services.search_index import project_index_document
from catalog.services.slugs import RESERVED_SLUGS

if TYPE_CHECKING:
    from catalog.models.favorite import FavoriteShopItem
    from catalog.models.photo import Photo
    from catalog.models.shop import Shop
    from catalog.models.shop_category import ShopCategory
    from catalog.models.shop_item_stats import ShopItemStats
    from catalog.models.user import User
    from catalog.models.wishlist import Wishlist

META_DESCRIPTION_LENGTH = 160


class ShopItem(Base):
    """
    Shop item with derived presentation attributes.

    ``url`` is the external destination. Everything the storefront renders
    about the outbound link (retailer name, button, tracked link) derives
    from it and from the owning shop's base URL.
    """

    __tablename__ = "shop_items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    shop_id: Mapped[int] = mapped_column(
        ForeignKey("shops.id", ondelete="CASCADE"),
        index=True,
    )
    category_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("shop_categories.id", ondelete="SET NULL"),
        index=True,
    )

    # Details
    name: Mapped[str] = mapped_column(String(500), nullable=False)
    original_name: Mapped[Optional[str]] = mapped_column(String(500))
    slug: Mapped[str] = mapped_column(String(255), nullable=False)
    url: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    weight: Mapped[int] = mapped_column(Integer, default=0)

    # Media
    photo_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("photos.id", ondelete="SET NULL"),
    )
    etsy_id: Mapped[Optional[int]] = mapped_column(BigInteger, index=True)

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
    deleted_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        index=True,
    )

    __table_args__ = (
        UniqueConstraint("shop_id", "slug", name="uq_shop_items_shop_slug"),
    )

    # Relationships
    shop: Mapped["Shop"] = relationship("Shop", back_populates="items", lazy="selectin")
    category: Mapped[Optional["ShopCategory"]] = relationship(
        "ShopCategory",
        back_populates="items",
        lazy="selectin",
    )
    photo: Mapped[Optional["Photo"]] = relationship("Photo")
    stats: Mapped[list["ShopItemStats"]] = relationship(
        "ShopItemStats",
        back_populates="shop_item",
        cascade="all, delete-orphan",
    )
    wishlists: Mapped[list["Wishlist"]] = relationship(
        "Wishlist",
        secondary="wishlist_items",
        primaryjoin=(
            "and_(ShopItem.id == foreign(WishlistItem.entity_id), "
            "WishlistItem.entity_type == 'shop_item')"
        ),
        secondaryjoin="Wishlist.id == foreign(WishlistItem.wishlist_id)",
        viewonly=True,
    )
    favorites: Mapped[list["FavoriteShopItem"]] = relationship(
        "FavoriteShopItem",
        back_populates="shop_item",
        cascade="all, delete-orphan",
    )
    favorited_by_users: Mapped[list["User"]] = relationship(
        "User",
        secondary="favorite_shop_items",
        viewonly=True,
    )

    @validates("slug")
    def _validate_slug(self, key: str, slug: str) -> str:
        if slug in RESERVED_SLUGS:
            raise ReservedSlugError(slug)
        return slug

    # Soft deletes

    @property
    def is_trashed(self) -> bool:
        return self.deleted_at is not None

    # Links

    @property
    def internal_url(self) -> str:
        return urls.internal_url(self.shop.url, self.slug)

    @property
    def tracked_url(self) -> str:
        return urls.tracked_url(self.internal_url, self.url)

    @property
    def canonical_url(self) -> str:
        return urls.canonical_url(self.internal_url)

    # Presentation

    @property
    def domain(self) -> Optional[str]:
        """Retailer name for the external URL, None if it has no host."""
        return domains.resolve_domain(self.url)

    @property
    def button_text(self) -> str:
        return presentation.button_text(self.domain)

    @property
    def button_class(self) -> str:
        return presentation.button_class(self.domain)

    @property
    def description_html(self) -> str:
        return presentation.description_html(self.description)

    @property
    def is_sponsored(self) -> bool:
        return domains.is_sponsored(self.url)

    # Page metadata

    @property
    def title(self) -> str:
        return self.name

    @property
    def meta_title(self) -> str:
        return self.original_name or self.name

    @property
    def meta_description(self) -> str:
        text = " ".join((self.description or "").split())
        return text[:META_DESCRIPTION_LENGTH].rstrip()

    def stats_columns(self) -> dict[str, Any]:
        """Columns identifying this item's rows in shop_item_stats."""
        return {
            "shop_id": self.shop_id,
            "shop_item_id": self.id,
        }

    def index_document(self) -> dict[str, Any]:
        """Search index document; the indexer adds the id."""
        category_name = self.category.name if self.category else None
        return project_index_document(self, self.shop.name, category_name)

    def __repr__(self) -> str:
        return f"<ShopItem {self.slug}>"
