"""Core data models for Allzap."""

from .accounts import Account, AccountTheme, Contact, UploadedFile
from .events import BusMessage, Notification, Topic, TraceEvent
from .messages import Attachment, AttachmentType, Conversation, Message
from .workflow import WorkflowStage

__all__ = [
    # Accounts
    "Account",
    "AccountTheme",
    "Contact",
    "UploadedFile",
    # Messages
    "Attachment",
    "AttachmentType",
    "Conversation",
    "Message",
    # Workflow
    "WorkflowStage",
    # Events
    "BusMessage",
    "Notification",
    "Topic",
    "TraceEvent",
]
