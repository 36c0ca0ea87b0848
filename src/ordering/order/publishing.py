"""Outbound order status publishing."""

from typing import Protocol

import structlog

from ordering.order.messages import NEW_ORDER_ROUTING_KEY, ORDER_EXCHANGE, OrderStatusMessage

logger = structlog.get_logger(__name__)


class OrderStatusPublisher(Protocol):
    def publish(self, message: OrderStatusMessage) -> None: ...


def routing_stream(exchange: str, routing_key: str) -> str:
    """Broker stream that stands in for an exchange + routing key pair."""
    return f"{exchange}::{routing_key}"


class BrokerStatusPublisher:
    """Publishes status messages to a Protean broker stream."""

    def __init__(self, broker, exchange=ORDER_EXCHANGE, routing_key=NEW_ORDER_ROUTING_KEY):
        self.broker = broker
        self.stream = routing_stream(exchange, routing_key)

    def publish(self, message: OrderStatusMessage) -> None:
        self.broker.publish(self.stream, message.to_payload())
        logger.info(
            "Order status published",
            stream=self.stream,
            order_id=message.order_id,
            status=message.status,
        )
