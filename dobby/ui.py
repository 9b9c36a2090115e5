"""Console output for dobby.

Every response is printed as a block framed by separator lines, with
message lines indented by four spaces.
"""

import sys
from typing import Dict, List, Optional, Sequence, TextIO, Tuple, Type

from dobby.errors import (
    DobbyError,
    EmptyListError,
    InvalidCommandError,
    InvalidTaskNumberError,
    MissingDescriptionError,
    TaskAlreadyMarkedError,
    TaskAlreadyUnmarkedError,
)
from dobby.models import Task

SEPARATOR = "  " + "_" * 60
INDENT = "    "

ERROR_MESSAGES: Dict[Type[DobbyError], str] = {
    MissingDescriptionError: "Dobby thinks master should add a description here!",
    InvalidCommandError: "Dobby doesn't understand master's command!",
    InvalidTaskNumberError: "Dobby says that task number does not exist!",
    TaskAlreadyMarkedError: "Dobby says master's task is already marked!",
    TaskAlreadyUnmarkedError: "Dobby says master's task is already unmarked!",
    EmptyListError: "Dobby says master's list is empty!",
}

class Ui:
    """Writes response blocks to an output stream.

    Attributes:
        out: Stream to write to. If None, sys.stdout at the time of writing.
    """

    def __init__(self, out: Optional[TextIO] = None):
        self.out = out

    def show_welcome(self) -> None:
        self._block(["Hello! Dobby is Dobby!", "What can Dobby do for master?"])

    def show_goodbye(self) -> None:
        self._block(["Thank you master, Dobby is free!!!"])

    def show_added(self, task: Task, size: int) -> None:
        self._block([
            "Dobby has added this task:",
            f"  {task.render()}",
            f"Dobby says master has {size} tasks in the list!",
        ])

    def show_deleted(self, task: Task, size: int) -> None:
        self._block([
            "Dobby is removing this task:",
            f"    {task.render()}",
            f"Dobby says master has {size} remaining {_plural(size)}!",
        ])

    def show_marked(self, task: Task) -> None:
        self._block(["Dobby has magically marked this task as done:", f"  {task.render()}"])

    def show_unmarked(self, task: Task) -> None:
        self._block(["Dobby has marked this task as incomplete:", f"  {task.render()}"])

    def show_list(self, numbered_tasks: Sequence[Tuple[int, Task]]) -> None:
        lines = ["Here are the tasks in master's list:"]
        lines.extend(f"{number}.{task.render()}" for number, task in numbered_tasks)
        self._block(lines)

    def show_matches(self, keyword: str, tasks: Sequence[Task]) -> None:
        if not tasks:
            self._block([f"Dobby found no tasks containing: {keyword}"])
            return
        lines = ["Here are the matching tasks in master's list:"]
        lines.extend(f"{number}.{task.render()}" for number, task in enumerate(tasks, start=1))
        self._block(lines)

    def show_error(self, error: DobbyError) -> None:
        self._block([error_message(error)])

    def _block(self, lines: List[str]) -> None:
        out = self.out or sys.stdout
        print(SEPARATOR, file=out)
        for line in lines:
            print(INDENT + line, file=out)
        print(SEPARATOR, file=out)


def error_message(error: DobbyError) -> str:
    """Return the fixed user-facing message for an error condition."""
    return ERROR_MESSAGES[type(error)]


def _plural(count: int) -> str:
    return "task" if count == 1 else "tasks"
