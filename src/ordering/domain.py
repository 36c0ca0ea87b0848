"""Ordering bounded context: users, catalogue, shopping carts and orders.

Converts a user's cart into a persisted order, publishes order status
messages to the broker and relays processed statuses to live clients.
"""

import structlog
from protean.domain import Domain

ordering = Domain(name="ordering")

logger = structlog.get_logger(__name__)
