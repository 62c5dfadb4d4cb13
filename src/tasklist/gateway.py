"""Persistence gateway - task list and theme flag in a key-value store."""

import json
import logging

from .core.tasks import Task
from .ports.kv_store import KeyValueStore

logger = logging.getLogger(__name__)

TASKS_KEY = "tasks"
THEME_KEY = "isDark"


def encode_tasks(tasks: list[Task]) -> str:
    """Serialize tasks to the stored JSON array string."""
    return json.dumps([t.to_record() for t in tasks], ensure_ascii=False)


def decode_tasks(raw: str | None) -> list[Task]:
    """
    Deserialize the stored JSON array string.

    Absent, empty, or corrupt input yields an empty list. Malformed records
    are skipped; for duplicate ids the first record wins.
    """
    if not raw:
        return []
    try:
        data = json.loads(raw)
    except (ValueError, RecursionError) as e:
        logger.warning(f"Stored tasks are not valid JSON, starting empty: {e}")
        return []
    if not isinstance(data, list):
        logger.warning("Stored tasks are not a JSON array, starting empty")
        return []

    tasks: list[Task] = []
    seen: set[str] = set()
    for i, record in enumerate(data):
        if not isinstance(record, dict):
            logger.warning(f"Skipping stored task #{i}: not an object")
            continue
        try:
            task = Task.from_record(record)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Skipping stored task #{i}: {e}")
            continue
        if task.id in seen:
            logger.warning(f"Skipping stored task #{i}: duplicate id {task.id}")
            continue
        seen.add(task.id)
        tasks.append(task)
    return tasks


class PersistenceGateway:
    """
    Reads and writes app state through a KeyValueStore.

    Every save is a full snapshot overwriting the previous value. Write
    errors from the underlying store propagate.
    """

    def __init__(self, kv: KeyValueStore):
        self.kv = kv

    def load_tasks(self) -> list[Task]:
        tasks = decode_tasks(self.kv.get_string(TASKS_KEY))
        logger.debug(f"Loaded {len(tasks)} task(s)")
        return tasks

    def save_tasks(self, tasks: list[Task]) -> None:
        self.kv.set_string(TASKS_KEY, encode_tasks(tasks))
        logger.debug(f"Saved {len(tasks)} task(s)")

    def load_theme_flag(self) -> bool:
        return self.kv.get_bool(THEME_KEY) or False

    def save_theme_flag(self, value: bool) -> None:
        self.kv.set_bool(THEME_KEY, value)
