from enum import Enum


class TaskStatus(str, Enum):
    """Lifecycle states known to the task backend.

    ``Task.status`` stays a plain string so values added by the backend
    later still pass through.
    """

    ACTIVE = "active"
    COMPLETED = "completed"
