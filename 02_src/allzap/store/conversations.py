"""Conversation store: conversations, their message logs and pipeline stage."""

import uuid
from datetime import datetime, timezone
from typing import Iterable, Literal, Protocol

from ..event_bus import IEventBus
from ..logging_config import get_logger
from ..models import Attachment, Conversation, Message, Topic

logger = get_logger(__name__)

SOURCE = "conversation_store"


class IConversationStore(Protocol):
    """Owns conversations and messages. Every mutator tolerates unknown IDs."""

    def list_conversations(self) -> list[Conversation]:
        """Get all conversations in insertion order."""
        ...

    def get_conversation(self, conversation_id: str) -> Conversation | None:
        """Get a conversation by ID."""
        ...

    async def send_message(
        self, conversation_id: str, text: str, attachment: Attachment | None = None
    ) -> Message | None:
        """Append an outbound message. Unread count is left alone."""
        ...

    async def receive_message(self, conversation_id: str, text: str) -> Message | None:
        """Append an inbound message and bump the unread count."""
        ...

    async def edit_message(
        self, conversation_id: str, message_id: str, new_text: str
    ) -> None:
        """Replace message text and flag it as edited."""
        ...

    async def delete_message(self, conversation_id: str, message_id: str) -> None:
        """Remove a message from the conversation."""
        ...

    async def delete_conversation(self, conversation_id: str) -> None:
        """Remove the conversation entirely."""
        ...

    async def mark_as_read(self, conversation_id: str) -> None:
        """Set unread count to 0."""
        ...

    async def mark_as_unread(self, conversation_id: str) -> None:
        """Set unread count to 1."""
        ...

    async def move_to_stage(self, conversation_id: str, new_stage_id: str) -> None:
        """Reassign the workflow stage."""
        ...


class ConversationStore:
    """In-memory conversation store.

    Each mutator finishes its change before the first await (the change
    announcement on the EventBus), so mutations never interleave.
    """

    def __init__(self, event_bus: IEventBus):
        self._event_bus = event_bus
        self._conversations: dict[str, Conversation] = {}

    def load(self, conversations: Iterable[Conversation]) -> None:
        """Replace the store contents (used for seeding and reset)."""
        self._conversations = {conv.id: conv for conv in conversations}

    # Queries
    def list_conversations(self) -> list[Conversation]:
        """Get all conversations in insertion order."""
        return list(self._conversations.values())

    def get_conversation(self, conversation_id: str) -> Conversation | None:
        """Get a conversation by ID."""
        return self._conversations.get(conversation_id)

    def __len__(self) -> int:
        return len(self._conversations)

    # Messages
    async def send_message(
        self, conversation_id: str, text: str, attachment: Attachment | None = None
    ) -> Message | None:
        """Append an outbound message. Unread count is left alone."""
        return await self._append(conversation_id, text, "user", attachment)

    async def receive_message(self, conversation_id: str, text: str) -> Message | None:
        """Append an inbound message and bump the unread count."""
        return await self._append(conversation_id, text, "contact")

    async def _append(
        self,
        conversation_id: str,
        text: str,
        sender: Literal["user", "contact"],
        attachment: Attachment | None = None,
    ) -> Message | None:
        conv = self._conversations.get(conversation_id)
        if conv is None:
            logger.debug("append: unknown conversation %s", conversation_id)
            return None

        message = Message(
            id=str(uuid.uuid4()),
            text=text,
            timestamp=datetime.now(timezone.utc),
            sender=sender,
            attachment=attachment,
        )
        conv.messages.append(message)
        if sender == "contact":
            conv.unread_count += 1

        await self._emit(
            "message_sent" if sender == "user" else "message_received",
            conversation_id,
            message_id=message.id,
            unread_count=conv.unread_count,
        )
        return message

    async def edit_message(
        self, conversation_id: str, message_id: str, new_text: str
    ) -> None:
        """Replace message text and flag it as edited."""
        conv = self._conversations.get(conversation_id)
        message = conv.find_message(message_id) if conv else None
        if message is None:
            logger.debug("edit_message: %s/%s not found", conversation_id, message_id)
            return

        message.text = new_text
        message.is_edited = True
        await self._emit("message_edited", conversation_id, message_id=message_id)

    async def delete_message(self, conversation_id: str, message_id: str) -> None:
        """Remove a message from the conversation."""
        conv = self._conversations.get(conversation_id)
        message = conv.find_message(message_id) if conv else None
        if message is None:
            logger.debug("delete_message: %s/%s not found", conversation_id, message_id)
            return

        conv.messages.remove(message)
        await self._emit("message_deleted", conversation_id, message_id=message_id)

    # Conversations
    async def delete_conversation(self, conversation_id: str) -> None:
        """Remove the conversation entirely."""
        if self._conversations.pop(conversation_id, None) is None:
            logger.debug("delete_conversation: unknown conversation %s", conversation_id)
            return

        logger.info(
            "Conversation deleted", extra={"context": {"conversation_id": conversation_id}}
        )
        await self._emit("conversation_deleted", conversation_id)

    async def mark_as_read(self, conversation_id: str) -> None:
        """Set unread count to 0."""
        await self._set_unread(conversation_id, 0, "conversation_read")

    async def mark_as_unread(self, conversation_id: str) -> None:
        """Set unread count to 1 (absolute, not an increment)."""
        await self._set_unread(conversation_id, 1, "conversation_unread")

    async def _set_unread(self, conversation_id: str, value: int, action: str) -> None:
        conv = self._conversations.get(conversation_id)
        if conv is None:
            logger.debug("%s: unknown conversation %s", action, conversation_id)
            return

        conv.unread_count = value
        await self._emit(action, conversation_id, unread_count=value)

    async def move_to_stage(self, conversation_id: str, new_stage_id: str) -> None:
        """Reassign the workflow stage. The stage id is not validated."""
        conv = self._conversations.get(conversation_id)
        if conv is None:
            logger.debug("move_to_stage: unknown conversation %s", conversation_id)
            return

        previous = conv.workflow_stage_id
        conv.workflow_stage_id = new_stage_id
        await self._emit(
            "conversation_moved",
            conversation_id,
            from_stage_id=previous,
            to_stage_id=new_stage_id,
        )

    async def _emit(self, action: str, conversation_id: str, **data) -> None:
        await self._event_bus.emit(
            Topic.CONVERSATIONS,
            SOURCE,
            {"action": action, "conversation_id": conversation_id, **data},
        )
