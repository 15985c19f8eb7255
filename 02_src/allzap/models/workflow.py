"""Workflow pipeline data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class WorkflowStage:
    """One slot in the sales pipeline a conversation occupies."""

    id: str
    title: str
