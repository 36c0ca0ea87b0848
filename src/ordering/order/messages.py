"""Order status messages exchanged with the external order processor.

The wire format keeps the processor's camelCase field names:
``{"orderId": "...", "status": "CREATED"}``.
"""

from pydantic import BaseModel, ConfigDict, Field

# Broker routing
ORDER_EXCHANGE = "order.exchange"
NEW_ORDER_ROUTING_KEY = "new_order"
PROCESSED_ORDER_QUEUE = "processed.order.queue"

# Client-facing destination for live status updates
ORDER_STATUS_DESTINATION = "/order_out/order"


class OrderStatusMessage(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    order_id: str = Field(alias="orderId")
    status: str

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True)
