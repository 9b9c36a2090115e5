"""Exceptions raised by the parser, the task list and storage.

Every condition is recoverable: the session loop catches DobbyError,
shows the matching message and reads the next line.
"""


class DobbyError(Exception):
    """Base class for all dobby errors."""


class MissingDescriptionError(DobbyError):
    """An add command lacks its description or a required delimiter."""


class InvalidCommandError(DobbyError):
    """The input line matches none of the known commands."""


class InvalidTaskNumberError(DobbyError):
    """A task number is not an integer or is outside the list."""


class TaskAlreadyMarkedError(DobbyError):
    """Mark was requested on a task that is already done."""


class TaskAlreadyUnmarkedError(DobbyError):
    """Unmark was requested on a task that is not done."""


class EmptyListError(DobbyError):
    """List was requested while there are no tasks."""


class StorageError(DobbyError):
    """The task file exists but could not be read."""
