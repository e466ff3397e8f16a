from taskdesk.domain.models.dashboard import Dashboard
from taskdesk.domain.models.list_filter import ListFilter
from taskdesk.domain.models.priority import Priority
from taskdesk.domain.models.task import Task
from taskdesk.domain.models.task_page import TaskPage
from taskdesk.domain.models.task_status import TaskStatus

__all__ = [
    "Task",
    "TaskStatus",
    "Priority",
    "ListFilter",
    "TaskPage",
    "Dashboard",
]
