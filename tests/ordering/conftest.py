"""Shared fixtures for the Ordering tests."""

import pytest
from ordering.cart.cart import ShoppingCart
from ordering.catalogue.product import Product
from ordering.customer.user import User
from ordering.order.service import OrderService
from protean import current_domain


class RecordingPublisher:
    """Collects published status messages instead of sending them to a broker."""

    def __init__(self):
        self.messages = []

    def publish(self, message):
        self.messages.append(message)


@pytest.fixture()
def publisher():
    return RecordingPublisher()


@pytest.fixture()
def service(publisher):
    return OrderService.for_domain(current_domain, publisher=publisher)


@pytest.fixture()
def make_user():
    def _make(username="alice"):
        user = User.register(username)
        current_domain.repository_for(User).add(user)
        return user

    return _make


@pytest.fixture()
def make_product():
    def _make(name="Oak desk", price=120.0):
        product = Product(name=name, price=price)
        current_domain.repository_for(Product).add(product)
        return product

    return _make


@pytest.fixture()
def fill_cart():
    """Store a cart for `username` holding (product_id, qty, color, material) lines."""

    def _fill(username, lines):
        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.for_user(username)
        if cart is None:
            cart = ShoppingCart.create(username)
        for product_id, qty, color, material in lines:
            cart.add_item(product_id=product_id, qty=qty, color=color, material=material)
        repo.add(cart)
        return cart

    return _fill
