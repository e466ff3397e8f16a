import logging
from collections.abc import Awaitable, Callable
from datetime import datetime
from typing import Any, TypeVar, cast

import inject

from taskdesk.domain.models import Dashboard, ListFilter, Priority, Task, TaskPage, TaskStatus
from taskdesk.domain.repositories import TaskBackendRepository
from taskdesk.infrastructure.bridge.codecs import DateTimeCodec
from taskdesk.infrastructure.bridge.hydrator import decode_json
from taskdesk.infrastructure.bridge.inputs import (
    CompleteTaskInput,
    CreateTaskInput,
    DeleteTaskInput,
    GetTaskInput,
    ListTasksInput,
    UpdateTaskInput,
)
from taskdesk.infrastructure.bridge.key_adapter import canonicalize_keys
from taskdesk.infrastructure.bridge.mappers import BridgeMapper
from taskdesk.infrastructure.bridge.outputs import (
    CreateTaskOutput,
    GetDashboardOutput,
    GetTaskOutput,
    ListTasksOutput,
    WireModel,
)
from taskdesk.infrastructure.bridge.validation import validate_payload
from taskdesk.setup.bridge_config import BridgeSettings

logger = logging.getLogger(__name__)

WireT = TypeVar("WireT", bound=WireModel)


class TaskService:
    """UI-facing façade over the task backend.

    Each call serializes its input envelope, awaits the backend and turns
    the raw response into the UI models.
    """

    def __init__(
        self,
        backend: TaskBackendRepository | None = None,
        codec: DateTimeCodec | None = None,
        settings: BridgeSettings | None = None,
    ) -> None:
        self._backend = backend or cast(
            TaskBackendRepository, inject.instance(TaskBackendRepository)
        )
        self._codec = codec or cast(DateTimeCodec, inject.instance(DateTimeCodec))
        self._settings = settings or cast(BridgeSettings, inject.instance(BridgeSettings))
        self._mapper = BridgeMapper(self._codec)

    async def create_task(
        self,
        title: str,
        priority: Priority | str | None = None,
        due_date: datetime | None = None,
    ) -> str:
        """Create a task and return the identifier the backend assigned."""
        request = CreateTaskInput(title=title, priority=priority or "", due_date=due_date)
        raw = await self._call("create_task", self._backend.create_task, request.to_wire(self._codec))
        return self._mapper.to_created_id(self._receive(raw, CreateTaskOutput))

    async def get_task(self, task_id: str) -> Task | None:
        """Return the task identified by ``task_id``, or None if the backend sent none."""
        request = GetTaskInput(id=task_id)
        raw = await self._call("get_task", self._backend.get_task, request.to_wire(self._codec))
        return self._mapper.to_found_task(self._receive(raw, GetTaskOutput))

    async def list_tasks(
        self,
        status: TaskStatus | str | None = None,
        priority: Priority | str | None = None,
        filter: ListFilter | str | None = None,
    ) -> TaskPage:
        # Unknown filters fail validation here, before the backend is called.
        request = ListTasksInput(status=status, priority=priority, filter=filter)
        raw = await self._call("list_tasks", self._backend.list_tasks, request.to_wire(self._codec))
        return self._mapper.to_task_page(self._receive(raw, ListTasksOutput))

    async def get_dashboard(self) -> Dashboard:
        raw = await self._call("get_dashboard", self._backend.get_dashboard)
        return self._mapper.to_dashboard(self._receive(raw, GetDashboardOutput))

    async def update_task(
        self,
        task_id: str,
        title: str | None = None,
        status: TaskStatus | str | None = None,
        priority: Priority | str | None = None,
        due_date: datetime | None = None,
    ) -> None:
        """Send a partial update; fields left as None are not changed."""
        request = UpdateTaskInput(
            id=task_id, title=title, status=status, priority=priority, due_date=due_date
        )
        await self._call("update_task", self._backend.update_task, request.to_wire(self._codec))

    async def complete_task(self, task_id: str) -> None:
        request = CompleteTaskInput(id=task_id)
        await self._call("complete_task", self._backend.complete_task, request.to_wire(self._codec))

    async def delete_task(self, task_id: str) -> None:
        request = DeleteTaskInput(id=task_id)
        await self._call("delete_task", self._backend.delete_task, request.to_wire(self._codec))

    async def _call(self, operation: str, method: Callable[..., Awaitable[Any]], *args: Any) -> Any:
        try:
            return await method(*args)
        except Exception:
            logger.exception("Task backend call failed", extra={"operation": operation})
            raise

    def _receive(self, raw: Any, shape: type[WireT]) -> WireT:
        if isinstance(raw, (str, bytes, bytearray)):
            raw = decode_json(raw)
        if self._settings.ACCEPT_LEGACY_TASK_KEYS:
            raw = canonicalize_keys(raw, shape)
        if self._settings.STRICT_PAYLOADS:
            validate_payload(raw, shape)
        logger.debug("Hydrating backend payload", extra={"shape": shape.__name__})
        return shape.create_from(raw)
