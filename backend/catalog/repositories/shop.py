"""
Shop repository for data access operations.
"""
from typing import Optional

from sqlalchemy import select

from catalog.models.shop import Shop
from catalog.repositories.base import BaseRepository


class ShopRepository(BaseRepository[Shop]):
    """Repository for Shop model operations."""

    model = Shop

    async def get_by_slug(self, slug: str) -> Optional[Shop]:
        """Get a shop by its URL slug."""
        stmt = select(Shop).where(Shop.slug == slug)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
