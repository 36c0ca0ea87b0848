"""Shared BDD fixtures and step definitions for order placement."""

import pytest
from ordering.cart.cart import ShoppingCart
from ordering.order.order import Order
from protean import current_domain
from pytest_bdd import given, parsers, then


@pytest.fixture()
def products():
    """Products created by the scenario, keyed by name."""
    return {}


@pytest.fixture()
def error():
    """Container for an exception captured by a When step."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a registered user "{username}"'))
def registered_user(make_user, username):
    make_user(username)


@given(parsers.cfparse('a product "{name}" priced at {price:f}'))
def product_priced(make_product, products, name, price):
    products[name] = make_product(name, price)


@given(parsers.cfparse('"{username}" has {qty:d} of "{name}" in the cart'))
def item_in_cart(fill_cart, products, username, qty, name):
    fill_cart(username, [(products[name].id, qty, None, None)])


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("an order is placed")
def order_placed(order_id):
    assert order_id is not None
    assert current_domain.repository_for(Order).get(order_id) is not None


@then("no order is placed")
def no_order_placed(order_id):
    assert order_id is None
    assert current_domain.repository_for(Order)._dao.query.all().items == []


@then(parsers.cfparse("the order has {count:d} line items"))
def order_line_item_count(order_id, count):
    assert len(current_domain.repository_for(Order).get(order_id).line_items) == count


@then(parsers.cfparse("the order total is {amount:f}"))
def order_total(order_id, amount):
    assert current_domain.repository_for(Order).get(order_id).total == pytest.approx(amount)


@then(parsers.cfparse('the cart of "{username}" is empty'))
def cart_is_empty(username):
    assert current_domain.repository_for(ShoppingCart).for_user(username).is_empty


@then(parsers.cfparse('a "{status}" status message is published for the order'))
def status_message_published(publisher, order_id, status):
    assert [(m.order_id, m.status) for m in publisher.messages] == [(order_id, status)]


@then("no status message is published")
def no_status_message(publisher):
    assert publisher.messages == []
