"""Functional core - pure business logic with no I/O."""

from .tasks import (
    DEFAULT_PRIORITY,
    Priority,
    Task,
    filter_completed,
    find_task,
    new_task_id,
    sort_by_priority,
)

__all__ = [
    "DEFAULT_PRIORITY",
    "Priority",
    "Task",
    "filter_completed",
    "find_task",
    "new_task_id",
    "sort_by_priority",
]
