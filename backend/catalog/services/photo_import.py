"""
Photo backfill for Etsy-sourced shop items.

Fetching listing details and processing images belong to external
collaborators; this module only decides which image to use and records it.
"""
from typing import Any, Optional, Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.logging import get_logger
from catalog.models.photo import Photo
from catalog.models.shop import Shop
from catalog.models.shop_item import ShopItem
from catalog.models.user import User

logger = get_logger(__name__)

PHOTO_DIRECTORY = "shops"


class ListingDetailsSource(Protocol):
    """Marketplace client returning a listing's details, including ``images``."""

    async def get_listing_details(self, item: ShopItem) -> dict[str, Any]:
        ...


class PhotoProcessor(Protocol):
    """Downloads, processes and stores an image, returning an unsaved Photo."""

    async def from_url(
        self,
        url: str,
        *,
        directory: str,
        entity: Shop,
        user: Optional[User] = None,
    ) -> Photo:
        ...


async def import_photo_from_etsy(
    session: AsyncSession,
    item: ShopItem,
    *,
    listings: ListingDetailsSource,
    processor: PhotoProcessor,
    user: Optional[User] = None,
) -> Optional[Photo]:
    """
    Attach the first usable Etsy listing image to an item.

    Does nothing when the item already has a photo or has no Etsy id.
    Returns the new photo, or None when nothing was imported.
    """
    if item.photo_id:
        logger.debug("Item already has a photo", shop_item_id=item.id)
        return None

    if not item.etsy_id:
        logger.debug("Item has no Etsy listing", shop_item_id=item.id)
        return None

    details = await listings.get_listing_details(item)
    images = details.get("images") or []
    if not images:
        logger.debug("Etsy listing has no images", shop_item_id=item.id, etsy_id=item.etsy_id)
        return None

    for image in images:
        url = image.get("url_fullxfull")
        if not url:
            continue

        photo = await processor.from_url(
            url,
            directory=PHOTO_DIRECTORY,
            entity=item.shop,
            user=user,
        )
        photo.etsy_id = image.get("listing_image_id")
        session.add(photo)
        await session.flush()

        item.photo_id = photo.id
        await session.flush()

        logger.info(
            "Imported Etsy photo",
            shop_item_id=item.id,
            photo_id=photo.id,
            etsy_image_id=photo.etsy_id,
        )
        return photo

    return None
