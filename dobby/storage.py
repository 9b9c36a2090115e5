"""Storage layer for dobby.

This module provides an abstract storage interface and a JSON file
implementation for persisting the task list. JsonStorage holds an fcntl
lock on the file while reading or writing it.
"""

import fcntl
import json
import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional

from dobby.errors import StorageError
from dobby.models import Task, TaskKind

logger = logging.getLogger(__name__)

DEFAULT_DATA_PATH = os.path.join("data", "tasks.json")


class Storage(ABC):
    """Abstract base class for task storage implementations."""

    @abstractmethod
    def save(self, tasks: List[Task]) -> bool:
        """Save tasks to storage.

        Args:
            tasks: Tasks in display order

        Returns:
            True if the tasks were written, False otherwise
        """
        pass

    @abstractmethod
    def load(self) -> List[Task]:
        """Load tasks from storage.

        Returns:
            Tasks in display order; empty if nothing was saved yet
        """
        pass


class JsonStorage(Storage):
    """JSON file-based storage implementation with file locking.

    Attributes:
        file_path: Path to the JSON storage file
    """

    def __init__(self, file_path: Optional[str] = None):
        """Initialize JsonStorage with a file path.

        Args:
            file_path: Path to the JSON file for storage. If None, uses
                      DOBBY_DATA_PATH environment variable or defaults to
                      data/tasks.json
        """
        if file_path is None:
            file_path = os.environ.get("DOBBY_DATA_PATH", DEFAULT_DATA_PATH)
        self.file_path = Path(file_path)

    def save(self, tasks: List[Task]) -> bool:
        """Save tasks to the JSON file with file locking.

        A failed write is logged and reported through the return value;
        it never raises.
        """
        records = [task_to_record(task) for task in tasks]

        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.file_path, "w", encoding="utf-8") as f:
                fcntl.flock(f.fileno(), fcntl.LOCK_EX)
                try:
                    json.dump(records, f, indent=2)
                finally:
                    fcntl.flock(f.fileno(), fcntl.LOCK_UN)
        except OSError as e:
            logger.warning("Could not save tasks to %s: %s", self.file_path, e)
            return False

        logger.debug("Saved %d tasks to %s", len(records), self.file_path)
        return True

    def load(self) -> List[Task]:
        """Load tasks from the JSON file with file locking.

        Returns:
            Tasks in display order. Returns an empty list if the file
            doesn't exist or is empty. Records that cannot be understood
            are skipped with a warning.

        Raises:
            StorageError: If the file exists but is unreadable or is not
                a JSON array
        """
        if not self.file_path.exists():
            logger.debug("No task file at %s, starting empty", self.file_path)
            return []

        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                fcntl.flock(f.fileno(), fcntl.LOCK_SH)
                try:
                    content = f.read().strip()
                finally:
                    fcntl.flock(f.fileno(), fcntl.LOCK_UN)
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"cannot read {self.file_path}: {e}") from e

        if not content:
            return []

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise StorageError(f"{self.file_path} is not valid JSON: {e}") from e
        if not isinstance(data, list):
            raise StorageError(f"{self.file_path} does not hold a list of tasks")

        tasks = []
        for position, record in enumerate(data, start=1):
            try:
                tasks.append(task_from_record(record))
            except (KeyError, TypeError, ValueError) as e:
                logger.warning("Skipping task record %d in %s: %s", position, self.file_path, e)

        logger.debug("Loaded %d tasks from %s", len(tasks), self.file_path)
        return tasks


def task_to_record(task: Task) -> Dict[str, Any]:
    """Convert a Task to its JSON-serializable form."""
    record: Dict[str, Any] = {
        "type": task.kind.value,
        "done": task.done,
        "description": task.description,
    }
    if task.kind == TaskKind.DEADLINE:
        record["by"] = task.by
    elif task.kind == TaskKind.EVENT:
        record["from"] = task.start
        record["to"] = task.end
    return record


def task_from_record(record: Dict[str, Any]) -> Task:
    """Build a Task from its JSON form.

    Raises:
        KeyError: If a field required by the task type is missing
        ValueError: If the type glyph is unknown
        TypeError: If the record is not a mapping or a field has the wrong type
    """
    if not isinstance(record, dict):
        raise TypeError(f"expected an object, got {type(record).__name__}")

    kind = TaskKind(record["type"])
    description = _text(record, "description")
    if kind == TaskKind.DEADLINE:
        task = Task.deadline(description, _text(record, "by"))
    elif kind == TaskKind.EVENT:
        task = Task.event(description, _text(record, "from"), _text(record, "to"))
    else:
        task = Task.todo(description)

    done = record.get("done", False)
    if not isinstance(done, bool):
        raise TypeError("'done' must be true or false")
    if done:
        task.mark_as_done()
    return task


def _text(record: Dict[str, Any], key: str) -> str:
    value = record[key]
    if not isinstance(value, str):
        raise TypeError(f"{key!r} must be a string")
    return value
