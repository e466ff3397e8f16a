from __future__ import annotations

import logging
from typing import Any

import inject
from pydantic import BaseModel, ValidationError

from taskdesk.domain.exceptions import PayloadValidationError
from taskdesk.domain.models import Dashboard, Task, TaskPage
from taskdesk.infrastructure.bridge.codecs import DateTimeCodec
from taskdesk.infrastructure.bridge.outputs import (
    CreateTaskOutput,
    GetDashboardOutput,
    GetTaskOutput,
    ListTasksOutput,
    WireTask,
)

logger = logging.getLogger(__name__)


class BridgeMapper:
    """Single conversion boundary from hydrated wire envelopes to the UI models.

    Date-times are decoded here with the injected codec; the hydrator leaves
    them untouched.
    """

    def __init__(self, codec: DateTimeCodec | None = None) -> None:
        self._codec = codec or inject.instance(DateTimeCodec)

    def to_task(self, wire: WireTask | None) -> Task | None:
        if wire is None:
            return None
        if not isinstance(wire, WireTask):
            raise PayloadValidationError(
                "Task", [{"type": "model_type", "msg": f"Expected a task object, got {type(wire).__name__}"}]
            )
        return self._build(
            Task,
            id=wire.id,
            title=wire.title,
            status=wire.status,
            # The backend sends "" for a task without priority.
            priority=wire.priority or None,
            created_at=self._codec.decode(wire.created_at),
            due_date=self._codec.decode(wire.due_date),
        )

    def to_tasks(self, wires: list[WireTask] | None) -> list[Task]:
        if wires is None:
            return []
        if not isinstance(wires, list):
            raise PayloadValidationError(
                "Task", [{"type": "list_type", "msg": f"Expected a task list, got {type(wires).__name__}"}]
            )
        tasks = [task for task in map(self.to_task, wires) if task is not None]
        dropped = len(wires) - len(tasks)
        if dropped:
            logger.debug("Null entries dropped from task list", extra={"dropped": dropped})
        return tasks

    def to_created_id(self, output: CreateTaskOutput) -> str:
        if not isinstance(output.id, str) or not output.id:
            raise PayloadValidationError(
                "CreateTaskOutput", [{"type": "missing", "loc": ("id",), "msg": "Task id is missing"}]
            )
        return output.id

    def to_task_page(self, output: ListTasksOutput) -> TaskPage:
        tasks = self.to_tasks(output.tasks)
        total = output.total if output.total is not None else len(tasks)
        return self._build(TaskPage, tasks=tasks, total=total)

    def to_dashboard(self, output: GetDashboardOutput) -> Dashboard:
        return self._build(
            Dashboard,
            active_count=output.active_count,
            completed_count=output.completed_count,
            overdue_count=output.overdue_count,
            due_today=self.to_tasks(output.due_today),
            due_this_week=self.to_tasks(output.due_this_week),
            recent_tasks=self.to_tasks(output.recent_tasks),
        )

    def to_found_task(self, output: GetTaskOutput) -> Task | None:
        return self.to_task(output.task)

    @staticmethod
    def _build(model: type[BaseModel], **data: Any) -> Any:
        try:
            return model.model_validate(data)
        except ValidationError as exc:
            raise PayloadValidationError(model.__name__, exc.errors(include_url=False)) from exc
