"""Message-related data models."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal

AttachmentType = Literal["image", "video", "audio", "file"]


@dataclass
class Attachment:
    """An attachment to a message (image, video, audio, file)."""

    id: str
    type: AttachmentType
    url: str
    file_name: str | None = None
    mime_type: str | None = None


@dataclass
class Message:
    """A single message in a conversation."""

    id: str
    text: str
    timestamp: datetime
    sender: Literal["user", "contact"]
    attachment: Attachment | None = None
    is_edited: bool = False


@dataclass
class Conversation:
    """The message history between an account-visible contact and the system."""

    id: str
    contact_id: str
    workflow_stage_id: str
    messages: list[Message] = field(default_factory=list)
    unread_count: int = 0

    def find_message(self, message_id: str) -> Message | None:
        for msg in self.messages:
            if msg.id == message_id:
                return msg
        return None
