"""
Tests for the search index projection.
"""
import pytest

from catalog.models import Shop, ShopCategory, ShopItem
from catalog.services.search_index import build_searchable, project_index_document


def test_ampersand_in_shop_name():
    item = ShopItem(name="Widget", shop_id=3, category_id=None)

    document = project_index_document(item, "Joe's & Sons", None)

    assert document == {
        "searchable": "Joe's and Sons Widget",
        "name": "Widget",
        "shop_id": 3,
        "category_id": None,
    }


@pytest.mark.parametrize(
    ("shop_name", "item_name", "category_name"),
    [
        ("A&B", "Salt & Pepper", "Home & Garden"),
        ("Shop", "R&D Kit", None),
        ("&", "&", "&"),
    ],
)
def test_searchable_never_contains_ampersand(shop_name, item_name, category_name):
    assert "&" not in build_searchable(shop_name, item_name, category_name)


def test_searchable_is_trimmed():
    assert build_searchable("Acme", "Widget", None) == "Acme Widget"
    assert build_searchable("Acme", "Widget", "Toys") == "Acme Widget Toys"


def test_name_is_left_untouched():
    item = ShopItem(name="Salt & Pepper", shop_id=1, category_id=2)

    document = project_index_document(item, "Acme", "Kitchen")

    assert document["name"] == "Salt & Pepper"
    assert document["searchable"] == "Acme Salt and Pepper Kitchen"


def test_item_index_document_uses_relations():
    shop = Shop(name="Acme & Co", slug="acme")
    category = ShopCategory(name="Home & Garden", slug="home-garden")
    item = ShopItem(name="Planter", shop=shop, category=category, shop_id=1, category_id=4)

    assert item.index_document() == {
        "searchable": "Acme and Co Planter Home and Garden",
        "name": "Planter",
        "shop_id": 1,
        "category_id": 4,
    }
