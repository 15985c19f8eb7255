"""Account API routes."""

from pydantic import BaseModel
from fastapi import APIRouter, HTTPException, Query

from ...app import Application
from ...store import broadcast
from ..schemas import (
    AccountResponse,
    AccountTheme,
    ContactResponse,
    ConversationResponse,
    StatusResponse,
)

NON_NULLABLE_FIELDS = frozenset({"name", "avatar_url", "theme_color"})


class AccountUpdateRequest(BaseModel):
    """Partial update; only fields present in the body are applied.

    Only description may be cleared with null.
    """

    name: str | None = None
    avatar_url: str | None = None
    description: str | None = None
    theme_color: AccountTheme | None = None


class BroadcastRequest(BaseModel):
    """Request model for a bulk message."""

    contact_ids: list[str]
    text: str


class BroadcastResponse(BaseModel):
    """Response model for a bulk message."""

    sent: int


def create_accounts_router(app: Application) -> APIRouter:
    """Create accounts router."""
    router = APIRouter(prefix="/api/accounts", tags=["accounts"])

    def _require_account(account_id: str):
        account = app.accounts.get_account(account_id)
        if account is None:
            raise HTTPException(status_code=404, detail="Account not found")
        return account

    @router.get("", response_model=list[AccountResponse])
    async def list_accounts() -> list:
        """List connected accounts."""
        return app.accounts.list_accounts()

    @router.post("", response_model=AccountResponse, status_code=201)
    async def create_account():
        """Connect a new account."""
        return await app.accounts.create_account()

    @router.patch("/{account_id}", response_model=StatusResponse)
    async def update_account(account_id: str, request: AccountUpdateRequest) -> dict:
        """Customize an account. Unknown accounts are ignored."""
        changes = request.model_dump(exclude_unset=True)
        if "name" in changes and not (changes["name"] or "").strip():
            raise HTTPException(status_code=400, detail="Account name cannot be empty")
        cleared = sorted(
            key for key in NON_NULLABLE_FIELDS if key in changes and changes[key] is None
        )
        if cleared:
            raise HTTPException(
                status_code=400, detail=f"Fields cannot be null: {', '.join(cleared)}"
            )
        await app.accounts.update_account(account_id, **changes)
        return {"status": "ok"}

    @router.get("/{account_id}/contacts", response_model=list[ContactResponse])
    async def list_contacts(
        account_id: str,
        search: str = Query("", description="Case-insensitive name filter"),
    ) -> list:
        """List the account's roster."""
        _require_account(account_id)
        return app.accounts.search_contacts(account_id, search)

    @router.get(
        "/{account_id}/conversations", response_model=list[ConversationResponse]
    )
    async def list_conversations(account_id: str) -> list:
        """Conversations with contacts on the account's roster."""
        return app.conversations_for_account(account_id)

    @router.post("/{account_id}/broadcast", response_model=BroadcastResponse)
    async def send_broadcast(account_id: str, request: BroadcastRequest) -> dict:
        """Send one message to several contacts."""
        text = request.text.strip()
        if not request.contact_ids or not text:
            raise HTTPException(
                status_code=400,
                detail="Select at least one contact and write a message",
            )
        sent = await broadcast(
            app.accounts, app.conversations, account_id, request.contact_ids, text
        )
        return {"sent": sent}

    return router
