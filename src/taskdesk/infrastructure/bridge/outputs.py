"""Typed envelopes for the task backend's responses.

Every class doubles as a shape descriptor for the hydrator and as the
schema checked by the strict validation stage.
"""
from __future__ import annotations

from typing import Annotated, Any, Self

from pydantic import BaseModel, ConfigDict, Field

from taskdesk.infrastructure.bridge.hydrator import create_from
from taskdesk.infrastructure.bridge.shapes import OpaqueField


class WireModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    @classmethod
    def create_from(cls, source: Any = None) -> Self:
        """Hydrate an instance from a raw payload, decoded or JSON text."""
        return create_from(cls, source)


class WireTask(WireModel):
    """A task in the backend's own field naming."""

    id: str = Field(alias="ID")
    title: str = Field(alias="Title")
    status: str = Field(alias="Status")
    created_at: Annotated[Any, OpaqueField()] = Field(alias="CreatedAt")
    due_date: Annotated[Any, OpaqueField()] = Field(default=None, alias="DueDate")
    priority: str = Field(alias="Priority")


class CreateTaskOutput(WireModel):
    id: str = Field(description="Identifier of the created task.")


class GetTaskOutput(WireModel):
    task: WireTask | None = Field(default=None, description="The task, null when not found.")


class ListTasksOutput(WireModel):
    tasks: list[WireTask] | None = Field(description="Matching tasks in backend order.")
    total: int = Field(ge=0, description="Total matches; may exceed len(tasks).")


class GetDashboardOutput(WireModel):
    active_count: int = Field(ge=0)
    completed_count: int = Field(ge=0)
    overdue_count: int = Field(ge=0)
    due_today: list[WireTask] | None
    due_this_week: list[WireTask] | None
    recent_tasks: list[WireTask] | None
