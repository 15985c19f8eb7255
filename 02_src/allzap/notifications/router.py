"""NotificationRouter and the default in-memory notification sink."""

from collections import deque
from datetime import datetime, timezone
from typing import Protocol

from ..event_bus import IEventBus
from ..logging_config import get_logger
from ..models import BusMessage, Notification, Topic

logger = get_logger(__name__)


class INotificationSink(Protocol):
    """Anything that can surface an alert to the user (toast, title badge)."""

    async def notify(self, notification: Notification) -> None:
        """Deliver one notification."""
        ...


class NotificationInbox:
    """Keeps delivered notifications and an unseen counter for the title badge."""

    def __init__(self, capacity: int = 100):
        self._items: deque[Notification] = deque(maxlen=capacity)
        self._unseen = 0

    async def notify(self, notification: Notification) -> None:
        self._items.append(notification)
        self._unseen += 1

    @property
    def unseen_count(self) -> int:
        return self._unseen

    def latest(self) -> Notification | None:
        return self._items[-1] if self._items else None

    def recent(self, limit: int = 20) -> list[Notification]:
        """Newest first."""
        return list(reversed(self._items))[:limit]

    def mark_seen(self) -> None:
        self._unseen = 0

    def clear(self) -> None:
        self._items.clear()
        self._unseen = 0


class INotificationRouter(Protocol):
    """Turns inbound messages into user notifications."""

    async def start(self) -> None:
        """Subscribe to EventBus topic: INBOUND."""
        ...

    async def stop(self) -> None:
        """Unsubscribe from EventBus."""
        ...


class NotificationRouter:
    """Routes simulated inbound messages to the notification sink."""

    def __init__(self, event_bus: IEventBus, sink: INotificationSink):
        self._event_bus = event_bus
        self._sink = sink

    async def start(self) -> None:
        """Subscribe to INBOUND topic."""
        self._event_bus.subscribe(Topic.INBOUND, self._handle_inbound)

    async def stop(self) -> None:
        """Unsubscribe from INBOUND topic."""
        self._event_bus.unsubscribe(Topic.INBOUND, self._handle_inbound)

    async def _handle_inbound(self, bus_message: BusMessage) -> None:
        """Title is the contact name, body is the message text."""
        payload = bus_message.payload
        notification = Notification(
            title=payload.get("contact_name", ""),
            message=payload.get("text", ""),
            timestamp=datetime.now(timezone.utc),
            account_id=payload.get("account_id"),
            conversation_id=payload.get("conversation_id"),
        )
        await self._sink.notify(notification)
        logger.debug("Notification raised for %s", notification.title)
