"""Workflow board and report API routes."""

from datetime import timedelta, timezone

from pydantic import BaseModel
from fastapi import APIRouter, HTTPException, Query

from ...app import Application
from ...store import board, pipeline_report
from ..schemas import ConversationResponse, WorkflowStageResponse


class BoardColumnResponse(BaseModel):
    """One board column: a stage and the conversations sitting in it."""

    stage: WorkflowStageResponse
    conversations: list[ConversationResponse]


class ReportResponse(BaseModel):
    """Response model for the pipeline report."""

    total_conversations: int
    new_leads: int
    converted: int
    lost: int
    active_chats: int
    unread_conversations: int
    conversion_rate: float
    lost_rate: float
    avg_response_seconds: float | None
    messages_per_hour: list[int]


def create_workflow_router(app: Application) -> APIRouter:
    """Create workflow router."""
    router = APIRouter(prefix="/api", tags=["workflow"])

    @router.get("/workflow/stages", response_model=list[WorkflowStageResponse])
    async def list_stages() -> list:
        """List pipeline stages in board order."""
        return app.stages.list_stages()

    @router.get(
        "/workflow/stages/{stage_id}/conversations",
        response_model=list[ConversationResponse],
    )
    async def stage_conversations(
        stage_id: str,
        account_id: str | None = Query(None, description="Scope to one account"),
    ) -> list:
        """Conversations in a stage."""
        if stage_id not in app.stages:
            raise HTTPException(status_code=404, detail="Stage not found")
        return app.conversations_for_stage(stage_id, account_id)

    @router.get("/workflow/board", response_model=list[BoardColumnResponse])
    async def get_board(
        account_id: str | None = Query(None, description="Scope to one account"),
    ) -> list[dict]:
        """Every stage with its conversations."""
        stages = app.stages.list_stages()
        columns = board(
            stages,
            app.accounts.list_accounts(),
            app.conversations.list_conversations(),
            account_id,
        )
        return [
            {"stage": stage, "conversations": columns[stage.id]} for stage in stages
        ]

    @router.get("/reports/summary", response_model=ReportResponse)
    async def get_report(
        account_id: str | None = Query(None, description="Scope to one account"),
        utc_offset: int = Query(
            0, ge=-12 * 60, le=14 * 60, description="Hourly buckets offset, minutes"
        ),
    ):
        """Pipeline report computed from the live conversations."""
        return pipeline_report(
            app.accounts.list_accounts(),
            app.conversations.list_conversations(),
            account_id,
            tz=timezone(timedelta(minutes=utc_offset)),
        )

    return router
