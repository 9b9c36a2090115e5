"""Command-line interface for dobby.

This module wires the parser, the task list, storage and console output
into an interactive session that reads one command per line:
- todo / deadline / event: Add a task
- list: Show all tasks
- mark / unmark: Change whether a task is done
- delete: Remove a task
- find: Show tasks whose description contains a keyword
- bye: End the session
"""

import argparse
import logging
import sys
from typing import Iterable, List, Optional

from dobby.errors import DobbyError, InvalidCommandError, StorageError
from dobby.models import Task
from dobby.parser import Command, CommandType, parse_command
from dobby.storage import JsonStorage, Storage
from dobby.tasklist import TaskList
from dobby.ui import Ui

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="dobby",
        description="Interactive task list for to-dos, deadlines and events"
    )
    parser.add_argument(
        "--file",
        help="Task file (default: $DOBBY_DATA_PATH or data/tasks.json)"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug messages to stderr"
    )
    return parser


class Session:
    """One interactive session over a task list.

    Attributes:
        tasks: The task list being edited
        storage: Where the list is saved after each change
        ui: Console output
    """

    def __init__(self, tasks: TaskList, storage: Storage, ui: Ui):
        self.tasks = tasks
        self.storage = storage
        self.ui = ui

    def run(self, lines: Iterable[str]) -> None:
        """Greet, handle lines until bye or end of input, then say goodbye."""
        self.ui.show_welcome()
        for line in lines:
            if not self.handle_line(line):
                break
        self.ui.show_goodbye()

    def handle_line(self, line: str) -> bool:
        """Handle one line of input.

        Errors are shown to the user and do not end the session.

        Returns:
            False if the line was the exit command, True otherwise
        """
        try:
            command = parse_command(line)
            if command.type == CommandType.EXIT:
                return False
            self.execute(command)
        except DobbyError as e:
            logger.debug("Command %r failed: %s", line.strip(), e)
            self.ui.show_error(e)
            return True

        if command.is_mutating:
            self.storage.save(self.tasks.tasks)
        return True

    def execute(self, command: Command) -> None:
        """Apply a parsed command to the task list and show the outcome.

        Raises:
            DobbyError: If the command is invalid or cannot be applied
        """
        logger.debug("Executing %s", command)

        if command.type == CommandType.LIST:
            self.ui.show_list(self.tasks.list_tasks())
        elif command.type == CommandType.MARK:
            self.ui.show_marked(self.tasks.mark(command.number))
        elif command.type == CommandType.UNMARK:
            self.ui.show_unmarked(self.tasks.unmark(command.number))
        elif command.type == CommandType.DELETE:
            task, size = self.tasks.delete(command.number)
            self.ui.show_deleted(task, size)
        elif command.type == CommandType.FIND:
            self.ui.show_matches(command.keyword, self.tasks.find(command.keyword))
        elif command.type in (CommandType.ADD_TODO, CommandType.ADD_DEADLINE, CommandType.ADD_EVENT):
            task = task_from_command(command)
            self.ui.show_added(task, self.tasks.add(task))
        else:
            raise InvalidCommandError("unrecognised command")


def task_from_command(command: Command) -> Task:
    """Build the task described by an add command."""
    if command.type == CommandType.ADD_DEADLINE:
        return Task.deadline(command.description, command.by)
    if command.type == CommandType.ADD_EVENT:
        return Task.event(command.description, command.start, command.end)
    return Task.todo(command.description)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments. If None, uses sys.argv[1:]

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    storage = JsonStorage(args.file)
    try:
        tasks = TaskList(storage.load())
    except StorageError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    session = Session(tasks, storage, Ui())
    session.run(sys.stdin)
    return 0


if __name__ == "__main__":
    sys.exit(main())
