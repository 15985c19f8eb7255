"""Observability API routes."""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel
from fastapi import APIRouter, HTTPException, Query

from ...app import Application
from ..schemas import StatusResponse


class TraceEventResponse(BaseModel):
    """Response model for trace event."""

    id: str
    event_type: str
    actor: str
    data: dict[str, Any]
    timestamp: datetime


class NotificationResponse(BaseModel):
    title: str
    message: str
    timestamp: datetime
    account_id: str | None = None
    conversation_id: str | None = None


class NotificationListResponse(BaseModel):
    """Recent notifications plus the unseen badge count."""

    unseen: int
    items: list[NotificationResponse]


def create_observability_router(app: Application) -> APIRouter:
    """Create observability router."""
    router = APIRouter(prefix="/api", tags=["observability"])

    @router.get("/trace-events", response_model=list[TraceEventResponse])
    async def get_trace_events(
        after: str | None = Query(None, description="ISO timestamp filter"),
        limit: int = Query(100, ge=1, le=1000),
        event_type: str | None = Query(None, description="Filter by event type"),
        actor: str | None = Query(None, description="Filter by actor"),
    ) -> list[dict]:
        """Get activity log entries, newest first."""
        after_dt = None
        if after:
            try:
                after_dt = datetime.fromisoformat(after)
            except ValueError:
                raise HTTPException(
                    status_code=400, detail="Invalid after timestamp format"
                )
            if after_dt.tzinfo is None:
                after_dt = after_dt.replace(tzinfo=timezone.utc)

        events = app.tracker.get_trace_events(
            after=after_dt,
            event_types=[event_type] if event_type else None,
            actor=actor,
            limit=limit,
        )
        return [
            {
                "id": e.id,
                "event_type": e.event_type,
                "actor": e.actor,
                "data": e.data,
                "timestamp": e.timestamp.isoformat(),
            }
            for e in events
        ]

    @router.get("/notifications", response_model=NotificationListResponse)
    async def get_notifications(limit: int = Query(20, ge=1, le=100)) -> dict:
        return {
            "unseen": app.inbox.unseen_count,
            "items": app.inbox.recent(limit),
        }

    @router.post("/notifications/seen", response_model=StatusResponse)
    async def mark_notifications_seen() -> dict:
        """Clear the unseen badge."""
        app.inbox.mark_seen()
        return {"status": "ok"}

    return router
