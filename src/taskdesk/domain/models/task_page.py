from pydantic import BaseModel, ConfigDict, Field

from taskdesk.domain.models.task import Task


class TaskPage(BaseModel):
    """Compact representation used for task listing screens."""

    model_config = ConfigDict(frozen=True)

    tasks: list[Task] = Field(default_factory=list, description="Tasks in backend order.")
    total: int = Field(ge=0, description="Total matches; may exceed len(tasks).")
