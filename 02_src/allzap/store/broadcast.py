"""Bulk message sending to several contacts of one account."""

from typing import Iterable

from ..logging_config import get_logger
from .accounts import IAccountRegistry
from .conversations import IConversationStore

logger = get_logger(__name__)


async def broadcast(
    accounts: IAccountRegistry,
    conversations: IConversationStore,
    account_id: str,
    contact_ids: Iterable[str],
    text: str,
) -> int:
    """Send text to every conversation of the selected roster contacts.

    Contacts outside the account's roster are skipped. Returns the number of
    contacts that received at least one message.
    """
    account = accounts.get_account(account_id)
    if account is None:
        logger.debug("broadcast: unknown account %s", account_id)
        return 0

    selected = set(contact_ids) & account.contact_ids()
    reached: set[str] = set()
    for conv in conversations.list_conversations():
        if conv.contact_id not in selected:
            continue
        if await conversations.send_message(conv.id, text) is not None:
            reached.add(conv.contact_id)

    logger.info(
        "Broadcast sent to %s contacts",
        len(reached),
        extra={"context": {"account_id": account_id, "selected": len(selected)}},
    )
    return len(reached)
