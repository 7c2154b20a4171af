"""
Tests for the Etsy photo backfill.
"""
from typing import Any, Optional

import pytest

from catalog.models import Photo, Shop, ShopItem, User
from catalog.repositories import ShopItemRepository
from catalog.services.photo_import import PHOTO_DIRECTORY, import_photo_from_etsy


class FakeListings:
    def __init__(self, details: dict[str, Any]) -> None:
        self.details = details
        self.calls: list[ShopItem] = []

    async def get_listing_details(self, item: ShopItem) -> dict[str, Any]:
        self.calls.append(item)
        return self.details


class FakeProcessor:
    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []

    async def from_url(
        self,
        url: str,
        *,
        directory: str,
        entity: Shop,
        user: Optional[User] = None,
    ) -> Photo:
        self.calls.append({"url": url, "directory": directory, "entity": entity, "user": user})
        return Photo(
            directory=directory,
            source_url=url,
            entity_type="shop",
            entity_id=entity.id,
            user_id=user.id if user else None,
        )


@pytest.fixture
async def etsy_item(db_session, shop) -> ShopItem:
    item = ShopItem(
        shop=shop,
        name="Mug",
        slug="mug",
        url="https://www.etsy.com/listing/111/mug",
        etsy_id=111,
    )
    db_session.add(item)
    await db_session.flush()
    return item


async def test_imports_first_usable_image(db_session, etsy_item, shop):
    listings = FakeListings({
        "images": [
            {"listing_image_id": 1, "url_570xN": "https://i.etsystatic.com/small.jpg"},
            {"listing_image_id": 2, "url_fullxfull": "https://i.etsystatic.com/full-2.jpg"},
            {"listing_image_id": 3, "url_fullxfull": "https://i.etsystatic.com/full-3.jpg"},
        ]
    })
    processor = FakeProcessor()

    photo = await import_photo_from_etsy(db_session, etsy_item, listings=listings, processor=processor)

    assert photo is not None
    assert photo.etsy_id == 2
    assert photo.source_url == "https://i.etsystatic.com/full-2.jpg"
    assert etsy_item.photo_id == photo.id
    assert len(processor.calls) == 1
    assert processor.calls[0]["directory"] == PHOTO_DIRECTORY
    assert processor.calls[0]["entity"] is shop


async def test_passes_acting_user(db_session, etsy_item):
    user = User(name="Admin", email="admin@example.com")
    db_session.add(user)
    await db_session.flush()
    processor = FakeProcessor()

    photo = await import_photo_from_etsy(
        db_session,
        etsy_item,
        listings=FakeListings({"images": [{"listing_image_id": 9, "url_fullxfull": "https://i.etsystatic.com/9.jpg"}]}),
        processor=processor,
        user=user,
    )

    assert processor.calls[0]["user"] is user
    assert photo.user_id == user.id


async def test_noop_when_photo_already_set(db_session, etsy_item):
    existing = await import_photo_from_etsy(
        db_session,
        etsy_item,
        listings=FakeListings({"images": [{"listing_image_id": 1, "url_fullxfull": "https://i.etsystatic.com/1.jpg"}]}),
        processor=FakeProcessor(),
    )
    listings = FakeListings({"images": [{"listing_image_id": 2, "url_fullxfull": "https://i.etsystatic.com/2.jpg"}]})

    again = await import_photo_from_etsy(db_session, etsy_item, listings=listings, processor=FakeProcessor())

    assert again is None
    assert listings.calls == []
    assert etsy_item.photo_id == existing.id


async def test_noop_without_etsy_id(db_session, shop):
    item = ShopItem(shop=shop, name="Lamp", slug="lamp", url="https://www.amazon.com/dp/B000")
    listings = FakeListings({"images": []})

    assert await import_photo_from_etsy(db_session, item, listings=listings, processor=FakeProcessor()) is None
    assert listings.calls == []


@pytest.mark.parametrize(
    "details",
    [
        {"images": []},
        {},
        {"images": [{"listing_image_id": 1}, {"listing_image_id": 2, "url_fullxfull": ""}]},
    ],
)
async def test_noop_without_usable_images(db_session, etsy_item, details):
    processor = FakeProcessor()

    photo = await import_photo_from_etsy(db_session, etsy_item, listings=FakeListings(details), processor=processor)

    assert photo is None
    assert etsy_item.photo_id is None
    assert processor.calls == []


async def test_repository_import_photo(db_session, etsy_item):
    listings = FakeListings({"images": [{"listing_image_id": 5, "url_fullxfull": "https://i.etsystatic.com/5.jpg"}]})

    photo = await ShopItemRepository(db_session).import_photo(
        etsy_item,
        listings=listings,
        processor=FakeProcessor(),
    )

    assert photo.etsy_id == 5
    assert etsy_item.photo_id == photo.id
    assert listings.calls == [etsy_item]
