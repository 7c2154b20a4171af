"""
Shop item stats repository - daily view and click counters.
"""
from datetime import datetime, timezone
from typing import Literal

from sqlalchemy import func, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.models.shop import Shop
from catalog.models.shop_item import ShopItem
from catalog.models.shop_item_stats import ShopItemStats
from catalog.repositories.base import BaseRepository

Counter = Literal["views", "clicks"]


def _insert_for(session: AsyncSession):
    """Dialect insert construct supporting ON CONFLICT for the session's database."""
    if session.get_bind().dialect.name == "sqlite":
        return sqlite.insert
    return postgresql.insert


class ShopItemStatsRepository(BaseRepository[ShopItemStats]):
    """Repository for ShopItemStats model operations."""

    model = ShopItemStats

    async def record(self, item: ShopItem, counter: Counter) -> ShopItemStats:
        """
        Increment today's counter for an item, creating the row if needed.

        The increment runs as a single upsert so concurrent hits on the same
        item and day neither lose counts nor collide on the daily row.
        """
        today = datetime.now(timezone.utc).date()
        column = getattr(ShopItemStats, counter)

        values = {**item.stats_columns(), "date": today, "views": 0, "clicks": 0}
        values[counter] = 1

        stmt = _insert_for(self.session)(ShopItemStats).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[ShopItemStats.shop_item_id, ShopItemStats.date],
            set_={counter: column + 1},
        )
        await self.session.execute(stmt)

        result = await self.session.execute(
            select(ShopItemStats)
            .where(
                ShopItemStats.shop_item_id == item.id,
                ShopItemStats.date == today,
            )
            .execution_options(populate_existing=True)
        )
        return result.scalar_one()

    async def list_for_item(self, item: ShopItem) -> list[ShopItemStats]:
        """Daily rows for an item, newest first."""
        stmt = (
            select(ShopItemStats)
            .where(ShopItemStats.shop_item_id == item.id)
            .order_by(ShopItemStats.date.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def totals_for_shop(self, shop: Shop) -> dict[str, int]:
        """Summed views and clicks across a shop's items."""
        stmt = select(
            func.coalesce(func.sum(ShopItemStats.views), 0),
            func.coalesce(func.sum(ShopItemStats.clicks), 0),
        ).where(ShopItemStats.shop_id == shop.id)
        result = await self.session.execute(stmt)
        views, clicks = result.one()
        return {"views": int(views), "clicks": int(clicks)}
