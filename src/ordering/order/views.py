"""Flat read models returned by order listing."""

from datetime import datetime

from pydantic import BaseModel


class OrderLineItemSummary(BaseModel):
    id: str
    order_id: str
    product_id: str
    product_name: str
    price: float
    qty: int
    color: str | None = None
    material: str | None = None


class OrderSummary(BaseModel):
    id: str
    order_date: datetime
    status: str
    username: str
    line_items: list[OrderLineItemSummary]
