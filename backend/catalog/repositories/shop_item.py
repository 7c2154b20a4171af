"""
Shop item repository for data access operations.

Soft-deleted items are excluded from every lookup unless asked for.
"""
from datetime import datetime, timezone
from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from catalog.core.exceptions import SlugTakenError, UnknownCategoryError
from catalog.models.photo import Photo
from catalog.models.shop import Shop
from catalog.models.shop_category import ShopCategory
from catalog.models.shop_item import ShopItem
from catalog.models.user import User
from catalog.repositories.base import BaseRepository
from catalog.services.photo_import import (
    ListingDetailsSource,
    PhotoProcessor,
    import_photo_from_etsy,
)
from catalog.services.slugs import unique_slug


class ShopItemRepository(BaseRepository[ShopItem]):
    """Repository for ShopItem model operations."""

    model = ShopItem

    async def get_by_slug(
        self,
        shop: Shop,
        slug: str,
        *,
        with_trashed: bool = False,
    ) -> Optional[ShopItem]:
        """Get an item by slug within its shop."""
        stmt = select(ShopItem).where(
            ShopItem.shop_id == shop.id,
            ShopItem.slug == slug,
        )
        if not with_trashed:
            stmt = stmt.where(ShopItem.deleted_at.is_(None))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_for_shop(self, shop: Shop) -> list[ShopItem]:
        """Live items of a shop, heaviest weight last."""
        stmt = (
            select(ShopItem)
            .where(
                ShopItem.shop_id == shop.id,
                ShopItem.deleted_at.is_(None),
            )
            .order_by(ShopItem.weight, ShopItem.name)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create_for_shop(self, shop: Shop, data: dict[str, Any]) -> ShopItem:
        """
        Create an item in a shop.

        A slug is generated from the name when none is given. Explicit slugs
        must be free in the shop; reserved ones are rejected by the model.
        """
        data = dict(data)
        category_id = data.get("category_id")
        if category_id is not None and await self.session.get(ShopCategory, category_id) is None:
            raise UnknownCategoryError(category_id)

        taken = await self._slugs_in_use(shop)
        if not data.get("slug"):
            data["slug"] = unique_slug(data["name"], taken)
        elif data["slug"] in taken:
            raise SlugTakenError(data["slug"])
        data.setdefault("original_name", data["name"])

        item = ShopItem(shop=shop, **data)
        self.session.add(item)
        try:
            await self.session.flush()
        except IntegrityError as e:
            # Another request claimed the slug after _slugs_in_use ran
            await self.session.rollback()
            raise SlugTakenError(data["slug"]) from e
        await self.session.refresh(item)
        return item

    async def import_photo(
        self,
        item: ShopItem,
        *,
        listings: ListingDetailsSource,
        processor: PhotoProcessor,
        user: Optional[User] = None,
    ) -> Optional[Photo]:
        """Backfill an item's photo from its Etsy listing."""
        return await import_photo_from_etsy(
            self.session,
            item,
            listings=listings,
            processor=processor,
            user=user,
        )

    async def soft_delete(self, item: ShopItem) -> ShopItem:
        """Mark an item deleted without removing the row."""
        item.deleted_at = datetime.now(timezone.utc)
        await self.session.flush()
        return item

    async def restore(self, item: ShopItem) -> ShopItem:
        """Bring a soft-deleted item back."""
        item.deleted_at = None
        await self.session.flush()
        return item

    async def _slugs_in_use(self, shop: Shop) -> set[str]:
        # Trashed rows still hold their slug in the unique constraint
        stmt = select(ShopItem.slug).where(ShopItem.shop_id == shop.id)
        result = await self.session.execute(stmt)
        return set(result.scalars().all())
