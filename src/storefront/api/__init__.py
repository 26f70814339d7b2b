"""Storefront domain API package."""

from storefront.api.errors import register_error_handlers
from storefront.api.routes import booking_router, product_router

__all__ = ["booking_router", "product_router", "register_error_handlers"]
