"""Inbound order status relay: broker queue to live client subscriptions.

The external order processor publishes status updates to the processed
order queue. Each update is forwarded unchanged to the client-facing
destination; nothing is persisted here and delivery semantics are the
broker's own.
"""

import structlog

from ordering.domain import ordering
from ordering.live.channel import client_channel
from ordering.order.messages import ORDER_STATUS_DESTINATION, PROCESSED_ORDER_QUEUE, OrderStatusMessage

logger = structlog.get_logger(__name__)


@ordering.subscriber(stream=PROCESSED_ORDER_QUEUE)
class OrderStatusSubscriber:
    channel = client_channel

    def __call__(self, payload: dict) -> None:
        message = OrderStatusMessage.model_validate(payload)
        logger.info(
            "New order status received",
            order_id=message.order_id,
            status=message.status,
        )
        delivered = self.channel.send(ORDER_STATUS_DESTINATION, message.to_payload())
        logger.debug("Order status relayed", destination=ORDER_STATUS_DESTINATION, delivered=delivered)
