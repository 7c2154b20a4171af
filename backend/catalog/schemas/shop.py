"""
Shop Pydantic schemas for request/response validation.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from catalog.schemas.shop_item import ShopItemResponse


class ShopResponse(BaseModel):
    """Schema for shop API responses."""

    id: int
    name: str
    slug: str
    url: str
    website: Optional[str] = None
    items: list[ShopItemResponse] = Field(default_factory=list)

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )


class ShopStatsResponse(BaseModel):
    """Aggregated counters across a shop's items."""

    shop_id: int = Field(alias="shopId")
    views: int
    clicks: int

    model_config = ConfigDict(populate_by_name=True)
