"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Identifier, Integer, String

from ordering.domain import ordering


@ordering.event(part_of="Order")
class OrderPlaced:
    """A new order was created from a user's shopping cart."""

    __version__ = "v1"

    order_id = Identifier(required=True)
    username = String(required=True)
    status = String(required=True)
    line_item_count = Integer(required=True)
    placed_at = DateTime(required=True)
