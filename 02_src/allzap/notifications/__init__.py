"""Notifications module."""

from .router import (
    INotificationRouter,
    INotificationSink,
    NotificationInbox,
    NotificationRouter,
)

__all__ = [
    "INotificationRouter",
    "INotificationSink",
    "NotificationInbox",
    "NotificationRouter",
]
