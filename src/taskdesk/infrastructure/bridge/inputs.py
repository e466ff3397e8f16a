"""Request envelopes sent to the task backend."""
from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from taskdesk.domain.models.list_filter import ListFilter
from taskdesk.infrastructure.bridge.codecs import DateTimeCodec


class WireInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    def to_wire(self, codec: DateTimeCodec) -> dict[str, Any]:
        """Serialize to the backend's JSON body, omitting absent optional fields."""
        body: dict[str, Any] = {}
        for key, value in self.model_dump(exclude_none=True).items():
            if isinstance(value, datetime):
                value = codec.encode(value)
            elif isinstance(value, Enum):
                value = value.value
            body[key] = value
        return body


class CreateTaskInput(WireInput):
    title: str
    # Empty lets the backend apply its default priority.
    priority: str = ""
    due_date: datetime | None = None


class UpdateTaskInput(WireInput):
    id: str
    title: str | None = None
    status: str | None = None
    priority: str | None = None
    due_date: datetime | None = None


class CompleteTaskInput(WireInput):
    id: str


class GetTaskInput(WireInput):
    id: str


class DeleteTaskInput(WireInput):
    id: str


class ListTasksInput(WireInput):
    status: str | None = None
    priority: str | None = None
    filter: ListFilter | None = Field(default=None, description="Due-date window.")
