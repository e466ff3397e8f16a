from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from taskdesk.domain.models.priority import Priority
from taskdesk.domain.models.task_status import TaskStatus


class Task(BaseModel):
    """A task as consumed by UI code."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Unique task identifier assigned by the backend.")
    title: str = Field(description="Short task title.")
    status: str = Field(
        description=f"Lifecycle state; known values: {', '.join(s.value for s in TaskStatus)}."
    )
    priority: str | None = Field(
        default=None,
        description=(
            f"Priority label, one of {', '.join(p.value for p in Priority)}; "
            "absent when the backend sent none."
        ),
    )
    created_at: datetime = Field(description="When the task was created.")
    due_date: datetime | None = Field(default=None, description="When the task is due.")
