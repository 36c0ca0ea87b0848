"""In-process publish/subscribe hub for pushing updates to connected clients.

Destinations are plain path strings such as ``/order_out/order``. Every
subscriber gets its own bounded ``asyncio.Queue``; the WebSocket endpoint
drains it. A queue belongs to the event loop it was subscribed on, and sends
from any other thread or loop are handed over to that loop.
"""

import asyncio
from collections import defaultdict

import structlog

logger = structlog.get_logger(__name__)

DEFAULT_MAX_PENDING = 100


def _running_loop() -> asyncio.AbstractEventLoop | None:
    try:
        return asyncio.get_running_loop()
    except RuntimeError:
        return None


class ClientChannel:
    def __init__(self, max_pending: int = DEFAULT_MAX_PENDING) -> None:
        self.max_pending = max_pending
        self._queues: dict[str, list[asyncio.Queue]] = defaultdict(list)
        self._owners: dict[asyncio.Queue, asyncio.AbstractEventLoop | None] = {}

    def subscribe(self, destination: str) -> asyncio.Queue:
        queue: asyncio.Queue = asyncio.Queue(maxsize=self.max_pending)
        self._queues[destination].append(queue)
        self._owners[queue] = _running_loop()
        logger.debug("Client subscribed", destination=destination, subscribers=len(self._queues[destination]))
        return queue

    def unsubscribe(self, destination: str, queue: asyncio.Queue) -> None:
        queues = self._queues.get(destination, [])
        if queue in queues:
            queues.remove(queue)
        self._owners.pop(queue, None)
        if not queues:
            self._queues.pop(destination, None)

    def subscriber_count(self, destination: str) -> int:
        return len(self._queues.get(destination, []))

    def send(self, destination: str, payload: dict) -> int:
        """Deliver `payload` to every subscriber of `destination`.

        Returns the number of subscribers the message was handed to; zero
        when nobody is listening (the message is dropped). A subscriber whose
        queue is full misses the message.
        """
        queues = list(self._queues.get(destination, []))
        current = _running_loop()
        for queue in queues:
            owner = self._owners.get(queue)
            if owner is None or owner is current:
                self._deliver(destination, queue, payload)
            elif not owner.is_closed():
                owner.call_soon_threadsafe(self._deliver, destination, queue, payload)
        return len(queues)

    def _deliver(self, destination: str, queue: asyncio.Queue, payload: dict) -> None:
        try:
            queue.put_nowait(payload)
        except asyncio.QueueFull:
            logger.warning("Client is not keeping up, message dropped", destination=destination)


client_channel = ClientChannel()
