"""Order service: places orders from carts and lists a user's orders.

Collaborators are handed in explicitly so that the service can be composed
with any repositories and publisher; `OrderService.for_domain` builds the
production wiring from a Protean domain.
"""

import structlog
from protean import UnitOfWork
from protean.exceptions import ObjectNotFoundError

from ordering.cart.cart import ShoppingCart
from ordering.catalogue.product import Product
from ordering.customer.user import User
from ordering.exceptions import ProductNotFoundError, UserNotFoundError
from ordering.order.messages import OrderStatusMessage
from ordering.order.order import Order, OrderLineItem
from ordering.order.publishing import BrokerStatusPublisher, OrderStatusPublisher
from ordering.order.views import OrderLineItemSummary, OrderSummary

logger = structlog.get_logger(__name__)


class OrderService:
    def __init__(self, orders, users, products, carts, publisher: OrderStatusPublisher):
        self.orders = orders
        self.users = users
        self.products = products
        self.carts = carts
        self.publisher = publisher

    @classmethod
    def for_domain(cls, domain, publisher: OrderStatusPublisher | None = None) -> "OrderService":
        if publisher is None:
            publisher = BrokerStatusPublisher(domain.brokers["default"])
        return cls(
            orders=domain.repository_for(Order),
            users=domain.repository_for(User),
            products=domain.repository_for(Product),
            carts=domain.repository_for(ShoppingCart),
            publisher=publisher,
        )

    def create_order(self, username: str) -> str | None:
        """Turn the user's cart into an order.

        Returns the new order id, or None when the cart is empty. Everything
        happens in one unit of work: a missing user or product rolls it back
        and leaves both the cart and the order store untouched.
        """
        with UnitOfWork():
            cart = self.carts.for_user(username)
            if cart is None or cart.is_empty:
                logger.info("Can't create order for empty cart", username=username)
                return None

            user = self._find_user(username)
            line_items = [
                OrderLineItem(
                    product_id=item.product_id,
                    price=self._find_product(item.product_id).price,
                    qty=item.qty,
                    color=item.color,
                    material=item.material,
                )
                for item in cart.items
            ]

            order = Order.place(user_id=user.id, username=user.username, line_items=line_items)
            self.orders.add(order)

            cart.clear()
            self.carts.add(cart)

            self.publisher.publish(OrderStatusMessage(order_id=str(order.id), status=order.status))

        logger.info(
            "Order created",
            order_id=str(order.id),
            username=username,
            line_items=len(line_items),
        )
        return str(order.id)

    def find_orders_by_username(self, username: str) -> list[OrderSummary]:
        names: dict[str, str] = {}
        return [self._summarize(order, names) for order in self.orders.find_by_username(username)]

    def _summarize(self, order, names) -> OrderSummary:
        line_items = []
        for item in order.line_items:
            product_id = str(item.product_id)
            if product_id not in names:
                names[product_id] = self._find_product(product_id).name
            line_items.append(
                OrderLineItemSummary(
                    id=str(item.id),
                    order_id=str(order.id),
                    product_id=product_id,
                    product_name=names[product_id],
                    price=item.price,
                    qty=item.qty,
                    color=item.color,
                    material=item.material,
                )
            )

        return OrderSummary(
            id=str(order.id),
            order_date=order.order_date,
            status=order.status,
            username=order.username,
            line_items=line_items,
        )

    def _find_user(self, username):
        user = self.users.find_by_username(username)
        if user is None:
            raise UserNotFoundError(f"User not found: {username}")
        return user

    def _find_product(self, product_id):
        try:
            return self.products.get(product_id)
        except ObjectNotFoundError as exc:
            raise ProductNotFoundError(f"No product with id {product_id}") from exc
