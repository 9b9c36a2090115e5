"""Comprehensive tests for the task list engine."""

import pytest

from dobby.errors import (
    EmptyListError,
    InvalidTaskNumberError,
    TaskAlreadyMarkedError,
    TaskAlreadyUnmarkedError,
)
from dobby.models import Task
from dobby.tasklist import TaskList


class TestTaskList:
    """Test suite for TaskList."""

    @pytest.fixture
    def tasks(self):
        """Create a task list with one task of each kind."""
        return TaskList([
            Task.todo("read book"),
            Task.deadline("submit report", "Sunday"),
            Task.event("book fair", "Monday", "Friday"),
        ])

    def test_starts_empty(self):
        """Test that a new list has no tasks."""
        assert len(TaskList()) == 0

    def test_list_empty_raises(self):
        """Test listing an empty list."""
        with pytest.raises(EmptyListError):
            TaskList().list_tasks()

    def test_add_returns_new_size(self):
        """Test that add reports the size after adding."""
        tasks = TaskList()
        assert tasks.add(Task.todo("a")) == 1
        assert tasks.add(Task.todo("a")) == 2

    def test_list_preserves_insertion_order(self):
        """Test that list numbers tasks by insertion position."""
        tasks = TaskList()
        added = [Task.todo(f"task {i}") for i in range(5)]
        for task in added:
            tasks.add(task)

        listed = tasks.list_tasks()
        assert [number for number, _ in listed] == [1, 2, 3, 4, 5]
        assert [task for _, task in listed] == added

    def test_duplicates_allowed(self):
        """Test that duplicate descriptions are kept."""
        tasks = TaskList()
        tasks.add(Task.todo("same"))
        tasks.add(Task.todo("same"))
        assert len(tasks) == 2

    def test_delete_shifts_later_tasks(self, tasks):
        """Test that deleting renumbers the tasks after it."""
        removed, size = tasks.delete(2)

        assert removed == Task.deadline("submit report", "Sunday")
        assert size == 2
        listed = tasks.list_tasks()
        assert listed[1] == (2, Task.event("book fair", "Monday", "Friday"))
        assert removed not in [task for _, task in listed]

    @pytest.mark.parametrize("number", [0, -1, 4, 100])
    def test_delete_out_of_range(self, tasks, number):
        """Test deleting a task number outside the list."""
        with pytest.raises(InvalidTaskNumberError):
            tasks.delete(number)
        assert len(tasks) == 3

    def test_range_uses_current_size(self, tasks):
        """Test that the range check follows deletions."""
        tasks.delete(3)
        with pytest.raises(InvalidTaskNumberError):
            tasks.mark(3)

    def test_mark_on_empty_list(self):
        """Test marking when there are no tasks."""
        with pytest.raises(InvalidTaskNumberError):
            TaskList().mark(1)

    def test_mark(self, tasks):
        """Test marking a task as done."""
        task = tasks.mark(1)
        assert task.is_done()
        assert tasks.list_tasks()[0][1].is_done()

    def test_mark_already_marked(self, tasks):
        """Test that marking twice fails and leaves the task done."""
        tasks.mark(1)
        with pytest.raises(TaskAlreadyMarkedError):
            tasks.mark(1)
        assert tasks.list_tasks()[0][1].is_done()

    def test_unmark(self, tasks):
        """Test unmarking a done task."""
        tasks.mark(2)
        task = tasks.unmark(2)
        assert not task.is_done()

    def test_unmark_already_unmarked(self, tasks):
        """Test that unmarking a pending task fails and changes nothing."""
        with pytest.raises(TaskAlreadyUnmarkedError):
            tasks.unmark(2)
        assert not tasks.list_tasks()[1][1].is_done()

    def test_unmark_out_of_range(self, tasks):
        """Test unmarking a task number outside the list."""
        with pytest.raises(InvalidTaskNumberError):
            tasks.unmark(9)

    def test_find_empty_keyword_matches_all(self, tasks):
        """Test that the empty keyword returns every task in order."""
        assert tasks.find("") == tasks.tasks

    def test_find_substring(self, tasks):
        """Test that find returns only matching tasks in list order."""
        found = tasks.find("book")
        assert [task.description for task in found] == ["read book", "book fair"]

    def test_find_is_case_sensitive(self, tasks):
        """Test that matching respects case."""
        assert tasks.find("Book") == []

    def test_find_ignores_extra_fields(self, tasks):
        """Test that only descriptions are searched."""
        assert tasks.find("Sunday") == []

    def test_find_does_not_mutate(self, tasks):
        """Test that find leaves the list unchanged."""
        before = tasks.tasks
        tasks.find("book")
        assert tasks.tasks == before

    def test_tasks_snapshot_is_a_copy(self, tasks):
        """Test that changing the snapshot does not change the list."""
        snapshot = tasks.tasks
        snapshot.clear()
        assert len(tasks) == 3

    def test_is_valid_task_number(self, tasks):
        """Test task number bounds."""
        assert tasks.is_valid_task_number(1)
        assert tasks.is_valid_task_number(3)
        assert not tasks.is_valid_task_number(0)
        assert not tasks.is_valid_task_number(4)
