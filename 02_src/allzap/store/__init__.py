"""In-memory stores for accounts, conversations and workflow stages."""

from .accounts import AccountRegistry, IAccountRegistry
from .broadcast import broadcast
from .conversations import ConversationStore, IConversationStore
from .projections import (
    PipelineReport,
    board,
    conversations_for_account,
    conversations_for_stage,
    pipeline_report,
)
from .seed import INBOUND_PHRASES, WORKFLOW_STAGES, seed_data
from .workflow import WorkflowStageRegistry

__all__ = [
    "AccountRegistry",
    "IAccountRegistry",
    "ConversationStore",
    "IConversationStore",
    "WorkflowStageRegistry",
    "PipelineReport",
    "board",
    "broadcast",
    "conversations_for_account",
    "conversations_for_stage",
    "pipeline_report",
    "INBOUND_PHRASES",
    "WORKFLOW_STAGES",
    "seed_data",
]
