"""Conversation API routes.

Mutations answer "ok" for unknown ids: the store ignores them.
"""

import uuid

from pydantic import BaseModel
from fastapi import APIRouter, HTTPException

from ...app import Application
from ...models import Attachment, AttachmentType
from ..schemas import ConversationResponse, StatusResponse


class AttachmentRequest(BaseModel):
    """Attachment sent along with a message. The id is optional."""

    id: str | None = None
    type: AttachmentType
    url: str
    file_name: str | None = None
    mime_type: str | None = None


class SendMessageRequest(BaseModel):
    """Request model for sending a message."""

    text: str = ""
    attachment: AttachmentRequest | None = None


class EditMessageRequest(BaseModel):
    """Request model for editing a message."""

    text: str


class MoveRequest(BaseModel):
    """Request model for moving a conversation on the board."""

    stage_id: str


def create_conversations_router(app: Application) -> APIRouter:
    """Create conversations router."""
    router = APIRouter(prefix="/api/conversations", tags=["conversations"])

    @router.get("/{conversation_id}", response_model=ConversationResponse)
    async def get_conversation(conversation_id: str):
        """Get one conversation with its messages."""
        conv = app.conversations.get_conversation(conversation_id)
        if conv is None:
            raise HTTPException(status_code=404, detail="Conversation not found")
        return conv

    @router.delete("/{conversation_id}", response_model=StatusResponse)
    async def delete_conversation(conversation_id: str) -> dict:
        await app.conversations.delete_conversation(conversation_id)
        return {"status": "ok"}

    @router.post("/{conversation_id}/messages", response_model=StatusResponse)
    async def send_message(conversation_id: str, request: SendMessageRequest) -> dict:
        """Send a message; text may only be empty when an attachment is sent."""
        text = request.text.strip()
        if not text and request.attachment is None:
            raise HTTPException(status_code=400, detail="Message text cannot be empty")

        attachment = None
        if request.attachment is not None:
            data = request.attachment.model_dump()
            data["id"] = data["id"] or str(uuid.uuid4())
            attachment = Attachment(**data)

        await app.conversations.send_message(conversation_id, text, attachment)
        return {"status": "ok"}

    @router.patch(
        "/{conversation_id}/messages/{message_id}", response_model=StatusResponse
    )
    async def edit_message(
        conversation_id: str, message_id: str, request: EditMessageRequest
    ) -> dict:
        text = request.text.strip()
        if not text:
            raise HTTPException(status_code=400, detail="Message text cannot be empty")
        await app.conversations.edit_message(conversation_id, message_id, text)
        return {"status": "ok"}

    @router.delete(
        "/{conversation_id}/messages/{message_id}", response_model=StatusResponse
    )
    async def delete_message(conversation_id: str, message_id: str) -> dict:
        await app.conversations.delete_message(conversation_id, message_id)
        return {"status": "ok"}

    @router.post("/{conversation_id}/read", response_model=StatusResponse)
    async def mark_as_read(conversation_id: str) -> dict:
        await app.conversations.mark_as_read(conversation_id)
        return {"status": "ok"}

    @router.post("/{conversation_id}/unread", response_model=StatusResponse)
    async def mark_as_unread(conversation_id: str) -> dict:
        await app.conversations.mark_as_unread(conversation_id)
        return {"status": "ok"}

    @router.post("/{conversation_id}/stage", response_model=StatusResponse)
    async def move_to_stage(conversation_id: str, request: MoveRequest) -> dict:
        """Move a conversation to another pipeline stage."""
        await app.conversations.move_to_stage(conversation_id, request.stage_id)
        return {"status": "ok"}

    return router
