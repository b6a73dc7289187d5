"""
In-process insert feed.

Services call ``realtime_hub.publish(table, row)`` after committing an insert;
every subscription whose (table, column, value) filter matches the row gets a
copy. Delivery is at-least-once from the subscriber's point of view: nothing
is replayed on reconnect and nothing is deduplicated.
"""
import asyncio
import logging
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from fastapi.encoders import jsonable_encoder

logger = logging.getLogger(__name__)


@dataclass
class Subscription:
    table: str
    column: str
    value: str
    loop: asyncio.AbstractEventLoop
    queue: "asyncio.Queue[Dict[str, Any]]" = field(default_factory=asyncio.Queue)
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    def matches(self, table: str, row: Dict[str, Any]) -> bool:
        return table == self.table and str(row.get(self.column)) == self.value

    async def next_event(self, timeout: Optional[float] = None) -> Dict[str, Any]:
        """Wait for the next delivered event"""
        if timeout is None:
            return await self.queue.get()
        return await asyncio.wait_for(self.queue.get(), timeout)


class RealtimeHub:
    """Registry of insert subscriptions filtered by a single column match"""

    def __init__(self):
        self.subscriptions: Dict[str, Subscription] = {}

    def subscribe(self, table: str, column: str, value: str) -> Subscription:
        """Register a subscription; must be called from a running event loop"""
        subscription = Subscription(
            table=table,
            column=column,
            value=str(value),
            loop=asyncio.get_running_loop(),
        )
        self.subscriptions[subscription.id] = subscription
        logger.info(f"[RT] Subscribed {subscription.id} to {table} where {column}={value}")
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        if self.subscriptions.pop(subscription.id, None) is not None:
            logger.info(f"[RT] Unsubscribed {subscription.id}")

    def publish(self, table: str, row: Any) -> int:
        """
        Push an inserted row to matching subscribers.

        Safe to call from worker threads. Returns the number of subscriptions
        the event was queued for.
        """
        payload = jsonable_encoder(row)
        event = {"event": "INSERT", "table": table, "row": payload}
        delivered = 0
        for subscription in list(self.subscriptions.values()):
            if not subscription.matches(table, payload):
                continue
            try:
                subscription.loop.call_soon_threadsafe(subscription.queue.put_nowait, event)
                delivered += 1
            except RuntimeError as e:
                # Event loop already closed; the socket is gone
                logger.warning(f"[RT] Dropping subscription {subscription.id}: {e}")
                self.unsubscribe(subscription)
        logger.debug(f"[RT] Published {table} insert to {delivered} subscriber(s)")
        return delivered


# Global instance for app-wide usage
realtime_hub = RealtimeHub()
