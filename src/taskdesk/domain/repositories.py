from __future__ import annotations

from typing import Any, Protocol


class TaskBackendRepository(Protocol):
    """Contract of the external task backend.

    Every method receives the serialized input envelope and returns the raw
    response, either already JSON-decoded or as a JSON string.
    """

    async def create_task(self, payload: dict[str, Any]) -> Any:
        """Create a task and return ``{"id": ...}``."""

    async def get_task(self, payload: dict[str, Any]) -> Any:
        """Return ``{"task": ...}``; the task is null when nothing matched."""

    async def list_tasks(self, payload: dict[str, Any]) -> Any:
        """Return ``{"tasks": [...], "total": ...}`` for the given filters."""

    async def get_dashboard(self) -> Any:
        """Return the dashboard counters and task sequences."""

    async def update_task(self, payload: dict[str, Any]) -> Any:
        """Apply a partial update to a task."""

    async def complete_task(self, payload: dict[str, Any]) -> Any:
        """Mark a task as completed."""

    async def delete_task(self, payload: dict[str, Any]) -> Any:
        """Delete a task."""
