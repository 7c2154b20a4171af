"""
Shop item Pydantic schemas for request/response validation.
"""
import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ShopItemCreate(BaseModel):
    """Schema for listing a new item in a shop."""

    name: str = Field(..., min_length=1, max_length=500)
    url: str = Field(..., min_length=8, pattern=r"^https?://\S+$")
    slug: Optional[str] = Field(None, min_length=1, max_length=255, pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
    original_name: Optional[str] = Field(None, alias="originalName", max_length=500)
    description: Optional[str] = None
    category_id: Optional[int] = Field(None, alias="categoryId")
    etsy_id: Optional[int] = Field(None, alias="etsyId")
    weight: int = 0

    model_config = ConfigDict(populate_by_name=True)


class ShopItemResponse(BaseModel):
    """Schema for shop item API responses, including derived link and button fields."""

    id: int
    shop_id: int = Field(alias="shopId")
    category_id: Optional[int] = Field(None, alias="categoryId")
    photo_id: Optional[int] = Field(None, alias="photoId")
    name: str
    slug: str
    url: str
    description: Optional[str] = None
    description_html: str = Field(alias="descriptionHtml")
    weight: int

    domain: Optional[str] = None
    button_text: str = Field(alias="buttonText")
    button_class: str = Field(alias="buttonClass")
    is_sponsored: bool = Field(alias="isSponsored")

    internal_url: str = Field(alias="internalUrl")
    tracked_url: str = Field(alias="trackedUrl")
    canonical_url: str = Field(alias="canonicalUrl")

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )


class ShopItemStatsResponse(BaseModel):
    """One day of counters for an item."""

    date: datetime.date
    views: int
    clicks: int

    model_config = ConfigDict(from_attributes=True)
