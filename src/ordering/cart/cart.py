"""Shopping Cart aggregate: the per-user selection that becomes an Order.

Each user owns at most one cart. Lines are merged when the same product is
added again with the same color and material; the cart is emptied once an
order has been placed from it.
"""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer, String

from ordering.cart.events import CartCleared, CartItemAdded, CartItemRemoved
from ordering.domain import ordering


@ordering.entity(part_of="ShoppingCart")
class CartLineItem:
    product_id = Identifier(required=True)
    qty = Integer(required=True, min_value=1)
    color = String(max_length=50)
    material = String(max_length=50)

    def matches(self, product_id, color, material):
        return str(self.product_id) == str(product_id) and self.color == color and self.material == material


@ordering.aggregate
class ShoppingCart:
    username = String(required=True, max_length=50)
    items = HasMany(CartLineItem)
    updated_at = DateTime()

    @classmethod
    def create(cls, username):
        return cls(username=username, updated_at=datetime.now(UTC))

    @property
    def is_empty(self):
        return not self.items

    def add_item(self, product_id, qty, color=None, material=None):
        """Add a line to the cart, or increase the quantity of a matching line."""
        existing = next((i for i in self.items if i.matches(product_id, color, material)), None)

        if existing:
            existing.qty += qty
            item_id = str(existing.id)
        else:
            item = CartLineItem(product_id=product_id, qty=qty, color=color, material=material)
            self.add_items(item)
            item_id = str(item.id)

        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartItemAdded(
                cart_id=str(self.id),
                item_id=item_id,
                product_id=str(product_id),
                qty=qty,
            )
        )
        return item_id

    def remove_item(self, item_id):
        item = next((i for i in self.items if str(i.id) == str(item_id)), None)
        if item is None:
            raise ValidationError({"item_id": ["Item not found in cart"]})

        self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(CartItemRemoved(cart_id=str(self.id), item_id=str(item_id)))

    def clear(self):
        """Drop every line. Clearing an empty cart is a no-op."""
        if self.is_empty:
            return

        for item in list(self.items):
            self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(CartCleared(cart_id=str(self.id), username=self.username))


@ordering.repository(part_of=ShoppingCart)
class ShoppingCartRepository:
    def for_user(self, username: str) -> ShoppingCart | None:
        """Return the cart owned by `username`, or None if the user never had one."""
        carts = self._dao.query.filter(username=username).all().items
        return carts[0] if carts else None
