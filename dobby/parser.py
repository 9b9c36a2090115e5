"""Command parser for dobby.

Turns one line of user input into a typed Command. Rules are tried in a
fixed order and the first match wins, so for example a line starting with
"deadline" never reaches the todo rule.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from dobby.errors import InvalidTaskNumberError, MissingDescriptionError

DEADLINE_SEPARATOR = " /by "
EVENT_SEPARATORS = re.compile(r" /from | /to ")
TASK_NUMBER = re.compile(r"[+-]?[0-9]+")


class CommandType(Enum):
    """Kinds of command the interpreter understands."""

    EXIT = "bye"
    LIST = "list"
    MARK = "mark"
    UNMARK = "unmark"
    DELETE = "delete"
    FIND = "find"
    ADD_TODO = "todo"
    ADD_DEADLINE = "deadline"
    ADD_EVENT = "event"
    INVALID = "invalid"


@dataclass
class Command:
    """A parsed command and its arguments.

    Attributes:
        type: Which command this is
        number: Task number for mark, unmark and delete
        keyword: Search keyword for find
        description: Task description for the add commands
        by: Deadline time for deadline
        start: Start time for event
        end: End time for event
    """

    type: CommandType
    number: Optional[int] = None
    keyword: Optional[str] = None
    description: Optional[str] = None
    by: Optional[str] = None
    start: Optional[str] = None
    end: Optional[str] = None

    @property
    def is_mutating(self) -> bool:
        return self.type in MUTATING_COMMANDS


MUTATING_COMMANDS = frozenset({
    CommandType.MARK,
    CommandType.UNMARK,
    CommandType.DELETE,
    CommandType.ADD_TODO,
    CommandType.ADD_DEADLINE,
    CommandType.ADD_EVENT,
})


def parse_command(line: str) -> Command:
    """Classify a line of input.

    Args:
        line: Raw input line; surrounding whitespace is ignored

    Returns:
        The parsed Command. Unrecognised input gives CommandType.INVALID.

    Raises:
        InvalidTaskNumberError: If mark, unmark or delete is not followed
            by an integer
        MissingDescriptionError: If an add command lacks its description
            or one of its delimiters
    """
    line = line.strip()

    if line.lower() == "bye":
        return Command(CommandType.EXIT)
    if line == "list":
        return Command(CommandType.LIST)
    if line.startswith("mark "):
        return Command(CommandType.MARK, number=parse_task_number(line))
    if line.startswith("unmark "):
        return Command(CommandType.UNMARK, number=parse_task_number(line))
    if line.startswith("delete "):
        return Command(CommandType.DELETE, number=parse_task_number(line))
    if line.startswith("find"):
        return Command(CommandType.FIND, keyword=line[len("find "):].strip())
    if line.startswith("todo"):
        return _parse_todo(line)
    if line.startswith("deadline"):
        return _parse_deadline(line)
    if line.startswith("event"):
        return _parse_event(line)
    return Command(CommandType.INVALID)


def parse_task_number(line: str) -> int:
    """Parse the token after the last space in ``line`` as a task number."""
    token = line[line.rfind(" ") + 1:]
    if not TASK_NUMBER.fullmatch(token):
        raise InvalidTaskNumberError(f"not a task number: {token!r}")
    return int(token)


def _parse_todo(line: str) -> Command:
    description = line[len("todo "):]
    if len(line) <= len("todo") or not description.strip():
        raise MissingDescriptionError("todo needs a description")
    return Command(CommandType.ADD_TODO, description=description)


def _parse_deadline(line: str) -> Command:
    parts = _split_fields(line.split(DEADLINE_SEPARATOR))
    if len(parts) < 2 or len(parts[0]) <= len("deadline "):
        raise MissingDescriptionError("deadline needs a description and /by")
    return Command(
        CommandType.ADD_DEADLINE,
        description=_remove_keyword(parts[0], "deadline "),
        by=parts[1],
    )


def _parse_event(line: str) -> Command:
    parts = _split_fields(EVENT_SEPARATORS.split(line))
    if len(parts) < 3 or len(parts[0]) <= len("event "):
        raise MissingDescriptionError("event needs a description, /from and /to")
    return Command(
        CommandType.ADD_EVENT,
        description=_remove_keyword(parts[0], "event "),
        start=parts[1],
        end=parts[2],
    )


def _split_fields(parts: List[str]) -> List[str]:
    # Trailing empty fields carry no value; drop them before counting.
    while parts and not parts[-1]:
        parts.pop()
    return parts


def _remove_keyword(text: str, keyword: str) -> str:
    if text.startswith(keyword):
        return text[len(keyword):]
    return text
