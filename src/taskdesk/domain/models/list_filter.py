from enum import Enum


class ListFilter(str, Enum):
    """Due-date windows the backend can filter a task listing by."""

    TODAY = "today"
    WEEK = "week"
    OVERDUE = "overdue"
