"""
Catalog exception hierarchy.

Each exception carries the HTTP status the error middleware answers with.
"""


class CatalogError(Exception):
    """Base class for expected, client-facing catalog errors."""

    status_code: int = 400


class ReservedSlugError(CatalogError):
    """Raised when an item slug would shadow a shop-level route."""

    status_code = 422

    def __init__(self, slug: str) -> None:
        self.slug = slug
        super().__init__(f"Slug '{slug}' is reserved")


class SlugTakenError(CatalogError):
    """Raised when an explicit slug is already used within the shop."""

    status_code = 409

    def __init__(self, slug: str) -> None:
        self.slug = slug
        super().__init__(f"Slug '{slug}' is already taken in this shop")


class UnknownCategoryError(CatalogError):
    """Raised when an item references a category that does not exist."""

    status_code = 422

    def __init__(self, category_id: int) -> None:
        self.category_id = category_id
        super().__init__(f"Category {category_id} does not exist")
