"""Ordering domain API package."""

from ordering.api.routes import cart_router, live_router, order_router, product_router, user_router

__all__ = ["user_router", "product_router", "cart_router", "order_router", "live_router"]
