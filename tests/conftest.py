from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from taskdesk.domain.exceptions import TaskNotFoundError
from taskdesk.domain.repositories import TaskBackendRepository
from taskdesk.infrastructure.bridge.codecs import DateTimeCodec, RFC3339Codec
from taskdesk.setup.bridge_config import BridgeSettings


def wire_task(task_id: str = "t1", **overrides: Any) -> dict[str, Any]:
    """Build a task payload the way the backend serializes it."""
    payload = {
        "ID": task_id,
        "Title": "Write spec",
        "Status": "active",
        "CreatedAt": "2024-01-01T00:00:00Z",
        "DueDate": None,
        "Priority": "high",
    }
    payload.update(overrides)
    return payload


class StubTaskBackend(TaskBackendRepository):
    """Simple in-memory backend replacement that replays canned responses."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, dict[str, Any] | None]] = []
        self.responses: dict[str, Any] = {
            "create_task": {"id": "task_1"},
            "get_task": {"task": None},
            "list_tasks": {"tasks": [], "total": 0},
            "get_dashboard": {
                "active_count": 0,
                "completed_count": 0,
                "overdue_count": 0,
                "due_today": [],
                "due_this_week": [],
                "recent_tasks": [],
            },
        }
        self.missing_ids: set[str] = set()

    def _record(self, operation: str, payload: dict[str, Any] | None) -> Any:
        self.calls.append((operation, payload))
        if payload is not None and payload.get("id") in self.missing_ids:
            raise TaskNotFoundError(payload["id"])
        return self.responses.get(operation)

    async def create_task(self, payload: dict[str, Any]) -> Any:
        return self._record("create_task", payload)

    async def get_task(self, payload: dict[str, Any]) -> Any:
        return self._record("get_task", payload)

    async def list_tasks(self, payload: dict[str, Any]) -> Any:
        return self._record("list_tasks", payload)

    async def get_dashboard(self) -> Any:
        return self._record("get_dashboard", None)

    async def update_task(self, payload: dict[str, Any]) -> Any:
        return self._record("update_task", payload)

    async def complete_task(self, payload: dict[str, Any]) -> Any:
        return self._record("complete_task", payload)

    async def delete_task(self, payload: dict[str, Any]) -> Any:
        return self._record("delete_task", payload)


@pytest.fixture
def backend() -> StubTaskBackend:
    return StubTaskBackend()


@pytest.fixture
def codec() -> RFC3339Codec:
    return RFC3339Codec()


@pytest.fixture
def bridge_settings(monkeypatch: pytest.MonkeyPatch) -> BridgeSettings:
    """Settings built from a clean environment."""
    for name in ("STRICT_PAYLOADS", "ACCEPT_LEGACY_TASK_KEYS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return BridgeSettings(_env_file=None)


def _patch_inject_instance(
    monkeypatch: pytest.MonkeyPatch,
    backend: StubTaskBackend,
    codec: DateTimeCodec,
    settings: BridgeSettings,
) -> Callable[[object], object]:
    """Patch `inject.instance` to always return the stubs."""
    import inject

    def fake_instance(interface: object) -> object:
        if interface is TaskBackendRepository:
            return backend
        if interface is DateTimeCodec:
            return codec
        if interface is BridgeSettings:
            return settings
        raise RuntimeError(f"Unexpected dependency request: {interface}")

    monkeypatch.setattr(inject, "instance", fake_instance)
    return fake_instance


@pytest.fixture
def stubbed_inject(
    monkeypatch: pytest.MonkeyPatch,
    backend: StubTaskBackend,
    codec: RFC3339Codec,
    bridge_settings: BridgeSettings,
) -> StubTaskBackend:
    """Route DI lookups to the stub backend, the default codec and clean settings."""
    _patch_inject_instance(monkeypatch, backend, codec, bridge_settings)
    return backend


@pytest.fixture
def make_wire_task() -> Callable[..., dict[str, Any]]:
    return wire_task
