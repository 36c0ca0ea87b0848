"""Order aggregate: a persisted purchase built from a shopping cart.

Line items snapshot the product price at the moment the order is placed, so
later catalogue changes never alter an existing order. After creation the
status is driven by an external order processor; this service only assigns
CREATED and relays whatever the processor reports.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from ordering.domain import ordering
from ordering.order.events import OrderPlaced


class OrderStatus(Enum):
    CREATED = "CREATED"
    PROCESSING = "PROCESSING"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


@ordering.entity(part_of="Order")
class OrderLineItem:
    """One product entry within an order, priced as it was at checkout."""

    product_id = Identifier(required=True)
    price = Float(required=True, min_value=0.0)
    qty = Integer(required=True, min_value=1)
    color = String(max_length=50)
    material = String(max_length=50)


@ordering.aggregate
class Order:
    order_date = DateTime(required=True)
    status = String(choices=OrderStatus, default=OrderStatus.CREATED.value)
    user_id = Identifier(required=True)
    username = String(required=True, max_length=50)
    line_items = HasMany(OrderLineItem)

    @classmethod
    def place(cls, user_id, username, line_items):
        """Create a new order in CREATED status.

        Args:
            user_id: Identity of the ordering user.
            username: The ordering user's username, kept for lookups.
            line_items: Non-empty list of `OrderLineItem`.
        """
        if not line_items:
            raise ValidationError({"line_items": ["An order needs at least one line item"]})

        now = datetime.now(UTC)
        order = cls(
            order_date=now,
            status=OrderStatus.CREATED.value,
            user_id=user_id,
            username=username,
            line_items=line_items,
        )

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                username=username,
                status=order.status,
                line_item_count=len(line_items),
                placed_at=now,
            )
        )
        return order

    @property
    def total(self):
        return sum(item.price * item.qty for item in self.line_items)


@ordering.repository(part_of=Order)
class OrderRepository:
    def find_by_username(self, username: str) -> list[Order]:
        """All orders placed by `username`, in repository order."""
        return self._dao.query.filter(username=username).all().items
