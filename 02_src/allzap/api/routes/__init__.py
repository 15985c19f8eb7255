"""API route factories."""

from .accounts import create_accounts_router
from .control import create_control_router
from .conversations import create_conversations_router
from .observability import create_observability_router
from .workflow import create_workflow_router

__all__ = [
    "create_accounts_router",
    "create_control_router",
    "create_conversations_router",
    "create_observability_router",
    "create_workflow_router",
]
