"""Tracker implementation for the in-memory activity log."""

import uuid
from collections import deque
from datetime import datetime, timezone
from typing import Protocol

from ..config import TRACE_LOG_CAPACITY
from ..event_bus import IEventBus
from ..models import BusMessage, Topic, TraceEvent


class ITracker(Protocol):
    """Creating TraceEvents. Two channels: EventBus subscription + direct calls."""

    async def track(self, event_type: str, actor: str, data: dict) -> None:
        """Create a TraceEvent and append it to the activity log."""
        ...

    def get_trace_events(
        self,
        after: datetime | None = None,
        event_types: list[str] | None = None,
        actor: str | None = None,
        limit: int = 100,
    ) -> list[TraceEvent]:
        """Get trace events (newest first) with optional filters."""
        ...


class Tracker:
    """Records every bus message and direct track() calls, oldest dropped first."""

    def __init__(self, event_bus: IEventBus, capacity: int = TRACE_LOG_CAPACITY):
        self._event_bus = event_bus
        self._events: deque[TraceEvent] = deque(maxlen=capacity)

    async def start(self) -> None:
        """Subscribe to all EventBus topics."""
        for topic in Topic:
            self._event_bus.subscribe(topic, self._handle_bus_message)

    async def stop(self) -> None:
        """Unsubscribe from all EventBus topics."""
        for topic in Topic:
            self._event_bus.unsubscribe(topic, self._handle_bus_message)

    async def _handle_bus_message(self, bus_message: BusMessage) -> None:
        """Turn a store change into an activity log entry."""
        data = dict(bus_message.payload)
        event_type = data.pop("action", "bus_message_published")
        data["topic"] = bus_message.topic.value

        await self.track(event_type=event_type, actor=bus_message.source, data=data)

    async def track(self, event_type: str, actor: str, data: dict) -> None:
        """Create a TraceEvent and append it to the activity log."""
        self._events.append(
            TraceEvent(
                id=str(uuid.uuid4()),
                event_type=event_type,
                actor=actor,
                data=data,
                timestamp=datetime.now(timezone.utc),
            )
        )

    def get_trace_events(
        self,
        after: datetime | None = None,
        event_types: list[str] | None = None,
        actor: str | None = None,
        limit: int = 100,
    ) -> list[TraceEvent]:
        """Get trace events (newest first) with optional filters."""
        result = []
        for event in reversed(self._events):
            if after and event.timestamp <= after:
                continue
            if event_types and event.event_type not in event_types:
                continue
            if actor and event.actor != actor:
                continue
            result.append(event)
            if len(result) >= limit:
                break
        return result

    def clear(self) -> None:
        self._events.clear()
