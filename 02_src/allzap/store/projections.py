"""Read-only views derived from current store state.

Nothing here is cached: every call recomputes from the lists it is given,
so a deleted or moved conversation is reflected immediately.
"""

from dataclasses import dataclass, field
from datetime import timezone, tzinfo
from typing import Iterable, Sequence

from ..models import Account, Conversation, WorkflowStage

NEW_LEAD_STAGES = frozenset({"s2"})
CONVERTED_STAGES = frozenset({"s4", "s5"})
LOST_STAGES = frozenset({"s7"})


def _find_account(accounts: Iterable[Account], account_id: str) -> Account | None:
    return next((acc for acc in accounts if acc.id == account_id), None)


def conversations_for_account(
    accounts: Iterable[Account],
    conversations: Iterable[Conversation],
    account_id: str,
) -> list[Conversation]:
    """Conversations whose contact is on the account's roster."""
    account = _find_account(accounts, account_id)
    if account is None:
        return []
    roster = account.contact_ids()
    return [conv for conv in conversations if conv.contact_id in roster]


def conversations_for_stage(
    accounts: Iterable[Account],
    conversations: Iterable[Conversation],
    stage_id: str,
    account_id: str | None = None,
) -> list[Conversation]:
    """Conversations in a stage, optionally scoped to one account's roster.

    An account id that resolves to nothing leaves the stage filter alone.
    """
    result = [conv for conv in conversations if conv.workflow_stage_id == stage_id]

    if account_id:
        account = _find_account(accounts, account_id)
        if account is not None:
            roster = account.contact_ids()
            result = [conv for conv in result if conv.contact_id in roster]

    return result


def board(
    stages: Sequence[WorkflowStage],
    accounts: Iterable[Account],
    conversations: Iterable[Conversation],
    account_id: str | None = None,
) -> dict[str, list[Conversation]]:
    """Stage id -> conversations, in stage order."""
    accounts = list(accounts)
    conversations = list(conversations)
    return {
        stage.id: conversations_for_stage(accounts, conversations, stage.id, account_id)
        for stage in stages
    }


@dataclass
class PipelineReport:
    """Pipeline summary computed from the live conversations."""

    total_conversations: int = 0
    new_leads: int = 0
    converted: int = 0
    lost: int = 0
    active_chats: int = 0
    unread_conversations: int = 0
    conversion_rate: float = 0.0  # percent of total
    lost_rate: float = 0.0
    avg_response_seconds: float | None = None
    messages_per_hour: list[int] = field(default_factory=lambda: [0] * 24)


def pipeline_report(
    accounts: Iterable[Account],
    conversations: Iterable[Conversation],
    account_id: str | None = None,
    tz: tzinfo = timezone.utc,
) -> PipelineReport:
    """Summarize the pipeline, optionally for a single account.

    messages_per_hour buckets message timestamps by hour of day in tz.
    """
    if account_id:
        convs = conversations_for_account(accounts, conversations, account_id)
    else:
        convs = list(conversations)

    report = PipelineReport(total_conversations=len(convs))
    response_gaps: list[float] = []

    for conv in convs:
        stage = conv.workflow_stage_id
        if stage in NEW_LEAD_STAGES:
            report.new_leads += 1
        elif stage in CONVERTED_STAGES:
            report.converted += 1
        elif stage in LOST_STAGES:
            report.lost += 1

        if conv.unread_count > 0:
            report.unread_conversations += 1

        waiting_since = None
        for msg in conv.messages:
            report.messages_per_hour[msg.timestamp.astimezone(tz).hour] += 1
            if msg.sender == "contact":
                if waiting_since is None:
                    waiting_since = msg.timestamp
            elif waiting_since is not None:
                response_gaps.append((msg.timestamp - waiting_since).total_seconds())
                waiting_since = None

    report.active_chats = report.total_conversations - report.converted - report.lost
    if report.total_conversations:
        report.conversion_rate = round(
            100 * report.converted / report.total_conversations, 1
        )
        report.lost_rate = round(100 * report.lost / report.total_conversations, 1)
    if response_gaps:
        report.avg_response_seconds = sum(response_gaps) / len(response_gaps)

    return report
