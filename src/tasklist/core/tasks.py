"""Pure task domain logic - no I/O dependencies."""

import time
from dataclasses import dataclass
from enum import IntEnum


class Priority(IntEnum):
    """Task priority level. Stored as its integer value."""

    LOW = 1
    MEDIUM = 2
    HIGH = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def from_int(cls, value: int) -> "Priority":
        """Clamp any integer into the Low..High range."""
        if value <= cls.LOW:
            return cls.LOW
        if value >= cls.HIGH:
            return cls.HIGH
        return cls.MEDIUM

    @classmethod
    def parse(cls, text: str) -> "Priority":
        """
        Parse a label ("high") or a digit ("3").

        Digits are clamped like stored values; unknown labels raise ValueError.
        """
        text = text.strip()
        try:
            return cls.from_int(int(text))
        except ValueError:
            pass
        try:
            return cls[text.upper()]
        except KeyError:
            raise ValueError(f"Unknown priority: {text!r}") from None


DEFAULT_PRIORITY = Priority.MEDIUM


@dataclass
class Task:
    """A single to-do item."""

    id: str
    name: str
    completed: bool = False
    priority: int = DEFAULT_PRIORITY

    def __post_init__(self):
        self.priority = int(Priority.from_int(self.priority))

    @property
    def level(self) -> Priority:
        return Priority(self.priority)

    def to_record(self) -> dict:
        """Serialize to the persisted record shape."""
        return {
            "id": self.id,
            "name": self.name,
            "completed": self.completed,
            "priority": self.priority,
        }

    @classmethod
    def from_record(cls, data: dict) -> "Task":
        """
        Create Task from a persisted record.

        Missing `completed` defaults to False, missing or non-numeric
        `priority` to Medium. Raises KeyError/TypeError when `id` or `name`
        is missing or not a string, ValueError when `name` is blank.
        """
        task_id = data["id"]
        name = data["name"]
        if not isinstance(task_id, str) or not isinstance(name, str):
            raise TypeError("task id and name must be strings")
        if not name.strip():
            raise ValueError("task name is blank")
        return cls(
            id=task_id,
            name=name,
            completed=data.get("completed") is True,
            priority=_coerce_priority(data.get("priority")),
        )


def _coerce_priority(raw) -> int:
    # bool is an int subclass; treat it as garbage
    if isinstance(raw, bool) or raw is None:
        return DEFAULT_PRIORITY
    try:
        return int(raw)
    except OverflowError:
        # +/-Infinity clamp like any other out-of-range value
        return Priority.HIGH if raw > 0 else Priority.LOW
    except (TypeError, ValueError):
        return DEFAULT_PRIORITY


def new_task_id(taken: set[str] | None = None, after: int = 0) -> str:
    """
    Generate a task id from the current time in microseconds.

    The value is bumped until it is greater than `after` and not in `taken`.
    """
    candidate = max(time.time_ns() // 1000, after + 1)
    taken = taken or set()
    while str(candidate) in taken:
        candidate += 1
    return str(candidate)


def sort_by_priority(tasks: list[Task], descending: bool = True) -> list[Task]:
    """
    Sort tasks by priority.

    Stable: tasks with equal priority keep their relative order.
    Pure function - no I/O.
    """
    return sorted(tasks, key=lambda t: t.priority, reverse=descending)


def find_task(tasks: list[Task], task_id: str) -> Task | None:
    """Find a task by id."""
    for task in tasks:
        if task.id == task_id:
            return task
    return None


def filter_completed(tasks: list[Task], completed: bool = True) -> list[Task]:
    """Filter tasks by completion state."""
    return [t for t in tasks if t.completed == completed]
