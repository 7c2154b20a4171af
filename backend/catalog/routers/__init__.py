"""
API routers package.
"""
from catalog.routers.health import router as health_router
from catalog.routers.shops import router as shops_router

__all__ = [
    "health_router",
    "shops_router",
]
