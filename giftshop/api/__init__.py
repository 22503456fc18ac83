"""API layer module.

Contains FastAPI routers and request/response schemas.
"""

from giftshop.api.categories import router as categories_router
from giftshop.api.health import router as health_router
from giftshop.api.products import router as products_router

__all__ = [
    "categories_router",
    "health_router",
    "products_router",
]
