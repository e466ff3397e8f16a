from pydantic import BaseModel, ConfigDict, Field

from taskdesk.domain.models.task import Task


class Dashboard(BaseModel):
    """Read-only summary snapshot computed by the backend."""

    model_config = ConfigDict(frozen=True)

    active_count: int = Field(ge=0, description="Number of active tasks.")
    completed_count: int = Field(ge=0, description="Number of completed tasks.")
    overdue_count: int = Field(ge=0, description="Number of active tasks past due.")
    due_today: list[Task] = Field(default_factory=list)
    due_this_week: list[Task] = Field(default_factory=list)
    recent_tasks: list[Task] = Field(default_factory=list)
