"""Pydantic request/response schemas for the Ordering API.

These are external contracts (anti-corruption layer), separate from
internal Protean commands.
"""

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Users & products
# ---------------------------------------------------------------------------
class RegisterUserRequest(BaseModel):
    username: str = Field(min_length=1, max_length=50)


class UserIdResponse(BaseModel):
    user_id: str


class AddProductRequest(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    price: float = Field(ge=0)


class ChangePriceRequest(BaseModel):
    price: float = Field(ge=0)


class ProductIdResponse(BaseModel):
    product_id: str


# ---------------------------------------------------------------------------
# Cart
# ---------------------------------------------------------------------------
class AddToCartRequest(BaseModel):
    product_id: str
    qty: int = Field(ge=1, default=1)
    color: str | None = None
    material: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "product_id": "3f1c2a4e-0000-0000-0000-000000000001",
                    "qty": 2,
                    "color": "black",
                    "material": "oak",
                }
            ]
        }
    }


class CartLineItemSchema(BaseModel):
    id: str
    product_id: str
    qty: int
    color: str | None = None
    material: str | None = None


class CartResponse(BaseModel):
    username: str
    items: list[CartLineItemSchema] = []


class CartItemIdResponse(BaseModel):
    item_id: str


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
class OrderIdResponse(BaseModel):
    order_id: str


class StatusResponse(BaseModel):
    status: str = "ok"
