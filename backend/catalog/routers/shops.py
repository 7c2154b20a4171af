"""
Shop and shop item routes.

Item pages live directly under their shop (``/shops/{shop}/{item}``), which
is why item slugs may not be ``to`` or ``stats``.
"""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import RedirectResponse

from catalog.core.database import DbSession
from catalog.core.logging import get_logger
from catalog.models.shop import Shop
from catalog.models.shop_item import ShopItem
from catalog.repositories.shop import ShopRepository
from catalog.repositories.shop_item import ShopItemRepository
from catalog.repositories.shop_item_stats import ShopItemStatsRepository
from catalog.schemas.shop import ShopResponse, ShopStatsResponse
from catalog.schemas.shop_item import (
    ShopItemCreate,
    ShopItemResponse,
    ShopItemStatsResponse,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/shops", tags=["shops"])


async def get_shop(shop_slug: str, session: DbSession) -> Shop:
    """Dependency resolving the shop in the path, 404 if unknown."""
    shop = await ShopRepository(session).get_by_slug(shop_slug)
    if not shop:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Shop not found",
        )
    return shop


CurrentShop = Annotated[Shop, Depends(get_shop)]


async def get_shop_item(item_slug: str, shop: CurrentShop, session: DbSession) -> ShopItem:
    """Dependency resolving a live item of the shop, 404 if unknown or deleted."""
    item = await ShopItemRepository(session).get_by_slug(shop, item_slug)
    if not item:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Item not found",
        )
    return item


CurrentItem = Annotated[ShopItem, Depends(get_shop_item)]


@router.get("/{shop_slug}", response_model=ShopResponse)
async def get_shop_page(shop: CurrentShop, session: DbSession) -> ShopResponse:
    """Shop details with its live items."""
    items = await ShopItemRepository(session).list_for_shop(shop)
    return ShopResponse(
        id=shop.id,
        name=shop.name,
        slug=shop.slug,
        url=shop.url,
        website=shop.website,
        items=[ShopItemResponse.model_validate(item) for item in items],
    )


@router.get("/{shop_slug}/to")
async def visit_shop_website(shop: CurrentShop) -> RedirectResponse:
    """Redirect to the shop's own website."""
    if not shop.website:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Shop has no website",
        )
    return RedirectResponse(shop.website, status_code=status.HTTP_307_TEMPORARY_REDIRECT)


@router.get("/{shop_slug}/stats", response_model=ShopStatsResponse)
async def get_shop_stats(shop: CurrentShop, session: DbSession) -> ShopStatsResponse:
    """View and click totals across the shop's items."""
    totals = await ShopItemStatsRepository(session).totals_for_shop(shop)
    return ShopStatsResponse(shop_id=shop.id, **totals)


@router.post(
    "/{shop_slug}/items",
    response_model=ShopItemResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_shop_item(
    item_data: ShopItemCreate,
    shop: CurrentShop,
    session: DbSession,
) -> ShopItemResponse:
    """List a new item in the shop."""
    data = item_data.model_dump(exclude_unset=True, by_alias=False)
    item = await ShopItemRepository(session).create_for_shop(shop, data)

    logger.info("Created shop item", shop=shop.slug, slug=item.slug)
    return ShopItemResponse.model_validate(item)


@router.get("/{shop_slug}/{item_slug}", response_model=ShopItemResponse)
async def get_shop_item_page(item: CurrentItem, session: DbSession) -> ShopItemResponse:
    """Item details; counts as a view."""
    await ShopItemStatsRepository(session).record(item, "views")
    return ShopItemResponse.model_validate(item)


@router.delete("/{shop_slug}/{item_slug}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_shop_item(item: CurrentItem, session: DbSession) -> None:
    """Soft-delete an item. Its slug stays taken."""
    await ShopItemRepository(session).soft_delete(item)
    logger.info("Deleted shop item", shop_id=item.shop_id, slug=item.slug)


@router.get("/{shop_slug}/{item_slug}/to")
async def visit_shop_item(item: CurrentItem, session: DbSession) -> RedirectResponse:
    """
    Outbound click redirect.

    Always forwards to the stored item URL; the ``url`` query parameter in
    tracked links is informational only.
    """
    await ShopItemStatsRepository(session).record(item, "clicks")
    logger.info("Outbound click", shop_item_id=item.id, domain=item.domain)
    return RedirectResponse(item.url, status_code=status.HTTP_307_TEMPORARY_REDIRECT)


@router.get("/{shop_slug}/{item_slug}/stats", response_model=list[ShopItemStatsResponse])
async def get_shop_item_stats(item: CurrentItem, session: DbSession) -> list[ShopItemStatsResponse]:
    """Daily counters for an item, newest first."""
    rows = await ShopItemStatsRepository(session).list_for_item(item)
    return [ShopItemStatsResponse.model_validate(row) for row in rows]
