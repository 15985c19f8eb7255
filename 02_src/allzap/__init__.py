"""Allzap core: multi-account conversation store and pipeline board."""

from .app import Application, IApplication
from .event_bus import EventBus, IEventBus
from .models import (
    Account,
    Attachment,
    BusMessage,
    Contact,
    Conversation,
    Message,
    Notification,
    Topic,
    TraceEvent,
    UploadedFile,
    WorkflowStage,
)
from .notifications import INotificationSink, NotificationInbox, NotificationRouter
from .store import (
    AccountRegistry,
    ConversationStore,
    IAccountRegistry,
    IConversationStore,
    WorkflowStageRegistry,
)
from .tracker import ITracker, Tracker

__all__ = [
    # Application
    "Application",
    "IApplication",
    # Models
    "Account",
    "Contact",
    "UploadedFile",
    "Conversation",
    "Message",
    "Attachment",
    "WorkflowStage",
    "BusMessage",
    "Topic",
    "TraceEvent",
    "Notification",
    # Components
    "IEventBus",
    "EventBus",
    "ITracker",
    "Tracker",
    "IAccountRegistry",
    "AccountRegistry",
    "IConversationStore",
    "ConversationStore",
    "WorkflowStageRegistry",
    "INotificationSink",
    "NotificationInbox",
    "NotificationRouter",
]
