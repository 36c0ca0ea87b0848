"""Integration tests for the order endpoints via TestClient."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from ordering.api.routes import cart_router, order_router, product_router, user_router
from ordering.order.order import Order
from protean import current_domain


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(user_router)
    app.include_router(product_router)
    app.include_router(cart_router)
    app.include_router(order_router)
    return TestClient(app)


def _register(client, username="alice"):
    response = client.post("/users", json={"username": username})
    assert response.status_code == 201
    return response.json()["user_id"]


def _add_product(client, name="Oak desk", price=120.0):
    response = client.post("/products", json={"name": name, "price": price})
    assert response.status_code == 201
    return response.json()["product_id"]


def _add_to_cart(client, username, product_id, qty=1):
    response = client.post(f"/carts/{username}/items", json={"product_id": product_id, "qty": qty})
    assert response.status_code == 201
    return response.json()["item_id"]


class TestCreateOrder:
    def test_create_order(self, client):
        _register(client)
        _add_to_cart(client, "alice", _add_product(client), qty=2)

        response = client.post("/orders/alice")

        assert response.status_code == 201
        order = current_domain.repository_for(Order).get(response.json()["order_id"])
        assert order.username == "alice"
        assert len(order.line_items) == 1

    def test_empty_cart(self, client):
        _register(client)

        response = client.post("/orders/alice")

        assert response.status_code == 200
        assert response.json() == {"status": "empty_cart"}

    def test_unknown_user(self, client):
        _add_to_cart(client, "ghost", _add_product(client))

        response = client.post("/orders/ghost")

        assert response.status_code == 404

    def test_cart_is_emptied(self, client):
        _register(client)
        _add_to_cart(client, "alice", _add_product(client))

        client.post("/orders/alice")

        assert client.get("/carts/alice").json()["items"] == []


class TestListOrders:
    def test_no_orders(self, client):
        response = client.get("/orders/alice")

        assert response.status_code == 200
        assert response.json() == []

    def test_lists_orders_with_line_items(self, client):
        _register(client)
        product_id = _add_product(client, "Brass lamp", 35.5)
        _add_to_cart(client, "alice", product_id, qty=3)
        order_id = client.post("/orders/alice").json()["order_id"]

        [order] = client.get("/orders/alice").json()

        assert order["id"] == order_id
        assert order["status"] == "CREATED"
        assert order["username"] == "alice"
        [item] = order["line_items"]
        assert item["order_id"] == order_id
        assert item["product_id"] == product_id
        assert item["product_name"] == "Brass lamp"
        assert item["price"] == 35.5
        assert item["qty"] == 3

    def test_order_keeps_price_after_price_change(self, client):
        _register(client)
        product_id = _add_product(client, price=120.0)
        _add_to_cart(client, "alice", product_id)
        client.post("/orders/alice")

        client.put(f"/products/{product_id}/price", json={"price": 99.0})

        [order] = client.get("/orders/alice").json()
        assert order["line_items"][0]["price"] == 120.0
