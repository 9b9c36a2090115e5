"""Core models for dobby.

This module defines the task data structures:
- TaskKind: Enum for the three task variants, valued by their type glyph
- Task: A dataclass representing a to-do, deadline or event
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TaskKind(Enum):
    """Task variants."""

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


@dataclass
class Task:
    """Task model representing a single entry in the task list.

    Only the fields belonging to ``kind`` are set; the others stay None.

    Attributes:
        kind: Which variant this task is
        description: Free-text description of the task
        done: Whether the task has been marked as done
        by: Deadline time expression (deadlines only)
        start: Start time expression (events only)
        end: End time expression (events only)
    """

    kind: TaskKind
    description: str
    done: bool = False
    by: Optional[str] = None
    start: Optional[str] = None
    end: Optional[str] = None

    @classmethod
    def todo(cls, description: str) -> "Task":
        return cls(TaskKind.TODO, description)

    @classmethod
    def deadline(cls, description: str, by: str) -> "Task":
        return cls(TaskKind.DEADLINE, description, by=by)

    @classmethod
    def event(cls, description: str, start: str, end: str) -> "Task":
        return cls(TaskKind.EVENT, description, start=start, end=end)

    def is_done(self) -> bool:
        return self.done

    def mark_as_done(self) -> None:
        self.done = True

    def unmark_as_done(self) -> None:
        self.done = False

    def render(self) -> str:
        """Return the one-line display form, e.g. ``[D][X] report (by: Sunday)``."""
        status_icon = "X" if self.done else " "
        text = f"[{self.kind.value}][{status_icon}] {self.description}"
        if self.kind == TaskKind.DEADLINE:
            text += f" (by: {self.by})"
        elif self.kind == TaskKind.EVENT:
            text += f" (from: {self.start} to: {self.end})"
        return text

    def __str__(self) -> str:
        return self.render()
