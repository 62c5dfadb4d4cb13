"""In-memory task list with save-after-every-mutation persistence."""

import logging
from collections.abc import Iterator

from .core.tasks import DEFAULT_PRIORITY, Task, find_task, new_task_id, sort_by_priority
from .gateway import PersistenceGateway

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Ordered task list backed by a PersistenceGateway.

    Order only changes on append (add) or an explicit sort. Invalid input
    (blank name, unknown id) is ignored rather than raised; methods report
    it through their return value.
    """

    def __init__(
        self,
        gateway: PersistenceGateway,
        sort_high_first: bool = True,
        sort_on_add: bool = False,
    ):
        self.gateway = gateway
        self.sort_high_first = sort_high_first
        self.sort_on_add = sort_on_add
        self._tasks: list[Task] = []
        self._last_id = 0

    def load(self) -> None:
        """Replace the in-memory list with what the gateway has stored."""
        self._tasks = self.gateway.load_tasks()
        logger.debug(f"Hydrated store with {len(self._tasks)} task(s)")

    def _save(self) -> None:
        self.gateway.save_tasks(self._tasks)

    @property
    def tasks(self) -> list[Task]:
        """Snapshot of the current order."""
        return list(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    def get(self, task_id: str) -> Task | None:
        return find_task(self._tasks, task_id)

    def add(self, name: str, priority: int = DEFAULT_PRIORITY) -> str | None:
        """Append a new task. Returns its id, or None if the name is blank."""
        name = name.strip()
        if not name:
            logger.debug("Ignoring add with blank name")
            return None

        task_id = new_task_id({t.id for t in self._tasks}, after=self._last_id)
        self._last_id = int(task_id)
        task = Task(id=task_id, name=name, priority=priority)
        self._tasks.append(task)
        logger.info(f"Added task {task.id} ({task.level.label}): {task.name}")

        if self.sort_on_add:
            self.sort_by_priority()
        else:
            self._save()
        return task.id

    def toggle_complete(self, task_id: str, value: bool) -> bool:
        """Set the completed flag. Returns False if the id is unknown."""
        task = self.get(task_id)
        if task is not None:
            task.completed = value
            logger.info(f"Marked task {task_id} completed={value}")
        else:
            logger.debug(f"Ignoring toggle for unknown task {task_id}")
        self._save()
        return task is not None

    def delete(self, task_id: str) -> bool:
        """Remove a task. Returns False if the id is unknown."""
        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if t.id != task_id]
        found = len(self._tasks) < before
        if found:
            logger.info(f"Deleted task {task_id}")
        else:
            logger.debug(f"Ignoring delete for unknown task {task_id}")
        self._save()
        return found

    def toggle_sort_direction(self) -> bool:
        """Flip the sort direction. Returns True if now high-first."""
        self.sort_high_first = not self.sort_high_first
        return self.sort_high_first

    def sort_by_priority(self, descending: bool | None = None) -> None:
        """Stable sort by priority; defaults to the current direction."""
        if descending is None:
            descending = self.sort_high_first
        self._tasks = sort_by_priority(self._tasks, descending=descending)
        logger.info(f"Sorted {len(self._tasks)} task(s) {'high' if descending else 'low'} first")
        self._save()
