"""Lookup failures raised by the ordering services.

Both are plain "entity not found" faults: nothing retries them, the unit of
work rolls back and the caller decides what to report.
"""

from protean.exceptions import ObjectNotFoundError


class UserNotFoundError(ObjectNotFoundError):
    """No user is registered under the requested username."""


class ProductNotFoundError(ObjectNotFoundError):
    """A cart or order line references a product id that does not exist."""
