"""Task list engine for dobby.

This module provides the TaskList class, the ordered collection of tasks
and the validated operations applied to it. Task numbers are 1-based
positions computed at the moment of each call, so deleting a task shifts
every later task down by one.
"""

from typing import Iterable, List, Optional, Tuple

from dobby.errors import (
    EmptyListError,
    InvalidTaskNumberError,
    TaskAlreadyMarkedError,
    TaskAlreadyUnmarkedError,
)
from dobby.models import Task


class TaskList:
    """Ordered, in-memory collection of tasks.

    The TaskList owns its Task objects. Callers receive tasks for display
    only and should not keep them across a later mutation.
    """

    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        """Initialize TaskList.

        Args:
            tasks: Initial tasks in display order, e.g. loaded from storage.
                   If None, the list starts empty.
        """
        self._tasks: List[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    @property
    def tasks(self) -> List[Task]:
        """Snapshot of the tasks in display order."""
        return list(self._tasks)

    def list_tasks(self) -> List[Tuple[int, Task]]:
        """Get every task with its task number.

        Returns:
            List of (task number, Task) pairs in display order

        Raises:
            EmptyListError: If there are no tasks
        """
        if not self._tasks:
            raise EmptyListError("the task list is empty")
        return list(enumerate(self._tasks, start=1))

    def add(self, task: Task) -> int:
        """Append a task.

        Returns:
            The number of tasks after adding
        """
        self._tasks.append(task)
        return len(self._tasks)

    def delete(self, number: int) -> Tuple[Task, int]:
        """Remove the task at ``number``.

        Returns:
            The removed Task and the number of tasks remaining

        Raises:
            InvalidTaskNumberError: If number is outside the list
        """
        index = self._index_of(number)
        task = self._tasks.pop(index)
        return task, len(self._tasks)

    def mark(self, number: int) -> Task:
        """Mark the task at ``number`` as done.

        Raises:
            InvalidTaskNumberError: If number is outside the list
            TaskAlreadyMarkedError: If the task is already done
        """
        task = self._tasks[self._index_of(number)]
        if task.is_done():
            raise TaskAlreadyMarkedError(f"task {number} is already done")
        task.mark_as_done()
        return task

    def unmark(self, number: int) -> Task:
        """Mark the task at ``number`` as not done.

        Raises:
            InvalidTaskNumberError: If number is outside the list
            TaskAlreadyUnmarkedError: If the task is not done
        """
        task = self._tasks[self._index_of(number)]
        if not task.is_done():
            raise TaskAlreadyUnmarkedError(f"task {number} is not done")
        task.unmark_as_done()
        return task

    def find(self, keyword: str) -> List[Task]:
        """Get the tasks whose description contains ``keyword``.

        Matching is a case-sensitive substring test, so an empty keyword
        matches every task. Order follows the list.
        """
        return [task for task in self._tasks if keyword in task.description]

    def is_valid_task_number(self, number: int) -> bool:
        return 0 < number <= len(self._tasks)

    def _index_of(self, number: int) -> int:
        if not self.is_valid_task_number(number):
            raise InvalidTaskNumberError(
                f"task number {number} is not between 1 and {len(self._tasks)}"
            )
        return number - 1
