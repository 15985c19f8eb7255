"""Pydantic models shared by the API routes."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from ..models import AccountTheme, AttachmentType


class StatusResponse(BaseModel):
    """Response model for status."""

    status: str


class ORMModel(BaseModel):
    """Base for responses built from the store's dataclasses."""

    model_config = ConfigDict(from_attributes=True)


class ContactResponse(ORMModel):
    id: str
    name: str
    phone: str
    avatar_url: str


class UploadedFileResponse(ORMModel):
    id: str
    name: str
    type: str
    url: str
    size: str


class AccountResponse(ORMModel):
    id: str
    name: str
    phone: str
    avatar_url: str
    description: str | None = None
    theme_color: AccountTheme
    contacts: list[ContactResponse]
    files: list[UploadedFileResponse]


class AttachmentModel(ORMModel):
    id: str
    type: AttachmentType
    url: str
    file_name: str | None = None
    mime_type: str | None = None


class MessageResponse(ORMModel):
    id: str
    text: str
    timestamp: datetime
    sender: Literal["user", "contact"]
    attachment: AttachmentModel | None = None
    is_edited: bool = False


class ConversationResponse(ORMModel):
    id: str
    contact_id: str
    workflow_stage_id: str
    unread_count: int = Field(ge=0)
    messages: list[MessageResponse]


class WorkflowStageResponse(ORMModel):
    id: str
    title: str
