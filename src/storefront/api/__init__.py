"""Book page API package."""

from storefront.api.routes import get_registry, page_router

__all__ = ["page_router", "get_registry"]
