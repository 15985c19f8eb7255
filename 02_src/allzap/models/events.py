"""Bus, tracing and notification data models."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class Topic(str, Enum):
    """EventBus topics."""

    ACCOUNTS = "accounts"
    CONVERSATIONS = "conversations"
    INBOUND = "inbound"


@dataclass
class BusMessage:
    """A change notification exchanged through EventBus."""

    id: str
    topic: Topic
    payload: dict  # always carries "action"
    source: str  # component that published
    timestamp: datetime


@dataclass
class TraceEvent:
    """A single entry of the activity log."""

    id: str
    event_type: str  # e.g. "message_sent", "sim_started"
    actor: str
    data: dict
    timestamp: datetime


@dataclass
class Notification:
    """A user-visible alert raised for an inbound message."""

    title: str
    message: str
    timestamp: datetime
    account_id: str | None = None
    conversation_id: str | None = None
