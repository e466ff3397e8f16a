from typing import Any


class BridgeError(Exception):
    """Base class for errors raised while exchanging payloads with the task backend."""


class PayloadDecodeError(BridgeError, ValueError):
    """Raised when a raw backend payload cannot be decoded."""


class DateTimeDecodeError(PayloadDecodeError):
    """Raised when a serialized date-time value is malformed."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Cannot decode date-time value {value!r}.")
        self.value = value


class PayloadValidationError(BridgeError, ValueError):
    """Raised when a payload does not satisfy the schema of its shape."""

    def __init__(self, shape: str, errors: list[Any]) -> None:
        super().__init__(f"Payload does not match '{shape}' ({len(errors)} error(s)).")
        self.shape = shape
        self.errors = errors


class TaskNotFoundError(BridgeError):
    """A ``TaskBackendRepository`` implementation found no task with ``task_id``.

    ``TaskService`` logs it and lets it propagate to the UI.
    """

    def __init__(self, task_id: str) -> None:
        super().__init__(f"Task backend has no task '{task_id}'.")
        self.task_id = task_id
