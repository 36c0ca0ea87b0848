"""FastAPI routes for the Ordering domain: users, products, carts and orders."""

from fastapi import APIRouter, HTTPException, WebSocket, WebSocketDisconnect
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from ordering.api.schemas import (
    AddProductRequest,
    AddToCartRequest,
    CartItemIdResponse,
    CartLineItemSchema,
    CartResponse,
    ChangePriceRequest,
    OrderIdResponse,
    ProductIdResponse,
    RegisterUserRequest,
    StatusResponse,
    UserIdResponse,
)
from ordering.cart.cart import ShoppingCart
from ordering.cart.items import AddToCart, ClearCart, RemoveFromCart
from ordering.catalogue.management import AddProduct, ChangeProductPrice
from ordering.customer.registration import RegisterUser
from ordering.exceptions import ProductNotFoundError, UserNotFoundError
from ordering.live.channel import client_channel
from ordering.order.messages import ORDER_STATUS_DESTINATION
from ordering.order.service import OrderService
from ordering.order.views import OrderSummary

# ---------------------------------------------------------------------------
# User Router
# ---------------------------------------------------------------------------
user_router = APIRouter(prefix="/users", tags=["users"])


@user_router.post("", status_code=201, response_model=UserIdResponse)
async def register_user(body: RegisterUserRequest) -> UserIdResponse:
    try:
        result = current_domain.process(RegisterUser(username=body.username), asynchronous=False)
    except ValidationError as exc:
        raise HTTPException(status_code=409, detail=exc.messages) from exc
    return UserIdResponse(user_id=result)


# ---------------------------------------------------------------------------
# Product Router
# ---------------------------------------------------------------------------
product_router = APIRouter(prefix="/products", tags=["products"])


@product_router.post("", status_code=201, response_model=ProductIdResponse)
async def add_product(body: AddProductRequest) -> ProductIdResponse:
    result = current_domain.process(AddProduct(name=body.name, price=body.price), asynchronous=False)
    return ProductIdResponse(product_id=result)


@product_router.put("/{product_id}/price", response_model=StatusResponse)
async def change_product_price(product_id: str, body: ChangePriceRequest) -> StatusResponse:
    try:
        current_domain.process(ChangeProductPrice(product_id=product_id, price=body.price), asynchronous=False)
    except ObjectNotFoundError as exc:
        raise HTTPException(status_code=404, detail="Product not found") from exc
    return StatusResponse()


# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/carts", tags=["carts"])


@cart_router.get("/{username}", response_model=CartResponse)
async def get_cart(username: str) -> CartResponse:
    cart = current_domain.repository_for(ShoppingCart).for_user(username)
    if cart is None:
        return CartResponse(username=username)

    return CartResponse(
        username=username,
        items=[
            CartLineItemSchema(
                id=str(item.id),
                product_id=str(item.product_id),
                qty=item.qty,
                color=item.color,
                material=item.material,
            )
            for item in cart.items
        ],
    )


@cart_router.post("/{username}/items", status_code=201, response_model=CartItemIdResponse)
async def add_cart_item(username: str, body: AddToCartRequest) -> CartItemIdResponse:
    command = AddToCart(
        username=username,
        product_id=body.product_id,
        qty=body.qty,
        color=body.color,
        material=body.material,
    )
    try:
        item_id = current_domain.process(command, asynchronous=False)
    except ProductNotFoundError as exc:
        raise HTTPException(status_code=404, detail="Product not found") from exc
    return CartItemIdResponse(item_id=item_id)


@cart_router.delete("/{username}/items/{item_id}", response_model=StatusResponse)
async def remove_cart_item(username: str, item_id: str) -> StatusResponse:
    try:
        current_domain.process(RemoveFromCart(username=username, item_id=item_id), asynchronous=False)
    except ValidationError as exc:
        raise HTTPException(status_code=404, detail=exc.messages) from exc
    return StatusResponse()


@cart_router.delete("/{username}", response_model=StatusResponse)
async def clear_cart(username: str) -> StatusResponse:
    current_domain.process(ClearCart(username=username), asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.post("/{username}", status_code=201, response_model=OrderIdResponse)
async def create_order(username: str):
    service = OrderService.for_domain(current_domain)
    try:
        order_id = service.create_order(username)
    except UserNotFoundError as exc:
        raise HTTPException(status_code=404, detail="User not found") from exc
    except ProductNotFoundError as exc:
        raise HTTPException(status_code=404, detail="Product not found") from exc

    if order_id is None:
        return JSONResponse(status_code=200, content={"status": "empty_cart"})
    return OrderIdResponse(order_id=order_id)


@order_router.get("/{username}", response_model=list[OrderSummary])
async def list_orders(username: str) -> list[OrderSummary]:
    return OrderService.for_domain(current_domain).find_orders_by_username(username)


# ---------------------------------------------------------------------------
# Live order status
# ---------------------------------------------------------------------------
live_router = APIRouter(tags=["live"])


@live_router.websocket(ORDER_STATUS_DESTINATION)
async def order_status_updates(websocket: WebSocket):
    """Stream relayed order status messages to a connected client."""
    await websocket.accept()
    queue = client_channel.subscribe(ORDER_STATUS_DESTINATION)
    try:
        while True:
            payload = await queue.get()
            await websocket.send_json(payload)
    except WebSocketDisconnect:
        pass
    finally:
        client_channel.unsubscribe(ORDER_STATUS_DESTINATION, queue)
