"""Workflow stage registry."""

from typing import Iterable

from ..models import WorkflowStage


class WorkflowStageRegistry:
    """Fixed, ordered catalog of pipeline stages."""

    def __init__(self, stages: Iterable[WorkflowStage]):
        self._stages: tuple[WorkflowStage, ...] = tuple(stages)
        self._by_id = {stage.id: stage for stage in self._stages}
        if len(self._by_id) != len(self._stages):
            raise ValueError("Workflow stage ids must be unique")

    def list_stages(self) -> list[WorkflowStage]:
        return list(self._stages)

    def get_stage(self, stage_id: str) -> WorkflowStage | None:
        return self._by_id.get(stage_id)

    def __contains__(self, stage_id: object) -> bool:
        return stage_id in self._by_id

    def __len__(self) -> int:
        return len(self._stages)
