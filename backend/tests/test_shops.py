"""
Tests for shop and shop item endpoints.
"""
from httpx import AsyncClient


async def test_get_shop(async_client: AsyncClient, catalog_data: dict):
    """Shop page lists its items by weight."""
    response = await async_client.get("/shops/acme")

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Acme & Co"
    assert data["url"] == "/shops/acme"
    assert [item["slug"] for item in data["items"]] == ["chew-toy", "dog-training-book"]


async def test_get_shop_not_found(async_client: AsyncClient, catalog_data: dict):
    response = await async_client.get("/shops/nowhere")

    assert response.status_code == 404
    assert response.json() == {"detail": "Shop not found"}


async def test_shop_website_redirect(async_client: AsyncClient, catalog_data: dict):
    response = await async_client.get("/shops/acme/to?website")

    assert response.status_code == 307
    assert response.headers["location"] == "https://acme.example"


async def test_get_item(async_client: AsyncClient, catalog_data: dict):
    """Item payload carries the derived link and button fields."""
    response = await async_client.get("/shops/acme/chew-toy")

    assert response.status_code == 200
    data = response.json()
    assert data["domain"] == "Chewy.com"
    assert data["buttonText"] == "Buy on Chewy.com"
    assert data["buttonClass"] == "chewy"
    assert data["isSponsored"] is True
    assert data["internalUrl"] == "/shops/acme/chew-toy"
    assert data["trackedUrl"].startswith("/shops/acme/chew-toy/to?website&url=https%3A%2F%2Fprf.hn%2F")
    assert data["canonicalUrl"] == "https://catalog.test/shops/acme/chew-toy"
    assert data["descriptionHtml"] == "Tough &amp; squeaky.<br />\nDishwasher safe."


async def test_get_barnes_and_noble_item(async_client: AsyncClient, catalog_data: dict):
    data = (await async_client.get("/shops/acme/dog-training-book")).json()

    assert data["buttonText"] == "Buy at Barnes & Noble"
    assert data["buttonClass"] == "bn"
    assert data["isSponsored"] is False


async def test_get_item_not_found(async_client: AsyncClient, catalog_data: dict):
    response = await async_client.get("/shops/acme/missing")

    assert response.status_code == 404
    assert response.json()["detail"] == "Item not found"


async def test_tracked_url_redirects_and_counts_click(async_client: AsyncClient, catalog_data: dict):
    item = (await async_client.get("/shops/acme/dog-training-book")).json()

    response = await async_client.get(item["trackedUrl"])

    assert response.status_code == 307
    assert response.headers["location"] == "https://www.barnesandnoble.com/w/book"

    stats = (await async_client.get("/shops/acme/dog-training-book/stats")).json()
    assert len(stats) == 1
    assert stats[0]["views"] == 1
    assert stats[0]["clicks"] == 1


async def test_redirect_ignores_url_parameter(async_client: AsyncClient, catalog_data: dict):
    response = await async_client.get(
        "/shops/acme/dog-training-book/to",
        params={"website": "", "url": "https://evil.example"},
    )

    assert response.status_code == 307
    assert response.headers["location"] == "https://www.barnesandnoble.com/w/book"


async def test_shop_stats(async_client: AsyncClient, catalog_data: dict):
    await async_client.get("/shops/acme/chew-toy")
    await async_client.get("/shops/acme/chew-toy")
    await async_client.get("/shops/acme/dog-training-book/to")

    response = await async_client.get("/shops/acme/stats")

    assert response.status_code == 200
    assert response.json() == {"shopId": catalog_data["shop"].id, "views": 2, "clicks": 1}


async def test_create_item(async_client: AsyncClient, catalog_data: dict):
    response = await async_client.post(
        "/shops/acme/items",
        json={
            "name": "Ceramic Mug",
            "url": "https://www.etsy.com/listing/123/ceramic-mug",
            "categoryId": catalog_data["category"].id,
            "etsyId": 123,
        },
    )

    assert response.status_code == 201
    data = response.json()
    assert data["slug"] == "ceramic-mug"
    assert data["categoryId"] == catalog_data["category"].id
    assert data["buttonText"] == "Buy on Etsy.com"
    assert data["buttonClass"] == "etsy"

    assert (await async_client.get("/shops/acme/ceramic-mug")).status_code == 200


async def test_create_item_reserved_slug(async_client: AsyncClient, catalog_data: dict):
    response = await async_client.post(
        "/shops/acme/items",
        json={"name": "Stats Board", "slug": "stats", "url": "https://example.com/board"},
    )

    assert response.status_code == 422
    assert response.json()["type"] == "ReservedSlugError"


async def test_create_item_taken_slug(async_client: AsyncClient, catalog_data: dict):
    response = await async_client.post(
        "/shops/acme/items",
        json={"name": "Another Toy", "slug": "chew-toy", "url": "https://example.com/toy"},
    )

    assert response.status_code == 409
    assert response.json()["type"] == "SlugTakenError"


async def test_create_item_unknown_category(async_client: AsyncClient, catalog_data: dict):
    response = await async_client.post(
        "/shops/acme/items",
        json={"name": "Widget", "url": "https://example.com/widget", "categoryId": 999},
    )

    assert response.status_code == 422
    assert response.json()["type"] == "UnknownCategoryError"


async def test_create_item_requires_absolute_url(async_client: AsyncClient, catalog_data: dict):
    response = await async_client.post(
        "/shops/acme/items",
        json={"name": "Widget", "url": "/relative/path"},
    )

    assert response.status_code == 422


async def test_delete_item(async_client: AsyncClient, catalog_data: dict):
    """Deleted items disappear from the shop but keep their slug."""
    response = await async_client.delete("/shops/acme/chew-toy")
    assert response.status_code == 204

    assert (await async_client.get("/shops/acme/chew-toy")).status_code == 404
    shop = (await async_client.get("/shops/acme")).json()
    assert [item["slug"] for item in shop["items"]] == ["dog-training-book"]

    recreated = await async_client.post(
        "/shops/acme/items",
        json={"name": "Chew Toy", "url": "https://prf.hn/click/xyz"},
    )
    assert recreated.json()["slug"] == "chew-toy-2"


async def test_request_id_is_echoed(async_client: AsyncClient, catalog_data: dict):
    response = await async_client.get("/shops/acme", headers={"X-Request-ID": "req-123"})

    assert response.headers["x-request-id"] == "req-123"
