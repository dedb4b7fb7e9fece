"""
Domain models for the Task Manager application.

This module defines the in-memory task record, the enumerations used
to describe it, and the error taxonomy raised by the task store.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class TaskPriority(str, Enum):
    """Enumeration of possible task priorities."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def label(self) -> str:
        """Human-readable label shown in the task list."""
        return self.value.capitalize()


class TaskFilter(str, Enum):
    """View selectors over the task collection."""

    ALL = "all"
    COMPLETED = "completed"
    PENDING = "pending"


class StatLevel(str, Enum):
    """Cosmetic escalation level of the total-tasks counter."""

    NORMAL = "normal"
    WARNING = "warning"
    DANGER = "danger"


# -----------------------------------------------------------------------------
# Errors
# -----------------------------------------------------------------------------

class TaskError(Exception):
    """Base class for task store errors."""


class EmptyTaskText(TaskError):
    """Raised when a task is added with blank or whitespace-only text."""

    def __init__(self) -> None:
        super().__init__("Task text cannot be empty!")


class InvalidTaskText(TaskError):
    """Raised when task text is not a string."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Task text must be a string, got {type(value).__name__}")
        self.value = value


class TaskNotFound(TaskError):
    """Raised when no task with the given id exists."""

    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task {task_id} not found")
        self.task_id = task_id


class InvalidPriority(TaskError):
    """Raised when a priority outside of TaskPriority is supplied."""

    def __init__(self, value: Any) -> None:
        allowed = [p.value for p in TaskPriority]
        super().__init__(f"Invalid priority {value!r}. Must be one of: {allowed}")
        self.value = value


class InvalidFilter(TaskError):
    """Raised when a filter name outside of TaskFilter is supplied."""

    def __init__(self, value: Any) -> None:
        allowed = [f.value for f in TaskFilter]
        super().__init__(f"Invalid filter {value!r}. Must be one of: {allowed}")
        self.value = value


def parse_priority(value: Any) -> TaskPriority:
    """Coerce a raw value into a TaskPriority or raise InvalidPriority."""
    if isinstance(value, TaskPriority):
        return value
    try:
        return TaskPriority(value)
    except ValueError:
        raise InvalidPriority(value) from None


def parse_filter(value: Any) -> TaskFilter:
    """Coerce a raw value into a TaskFilter or raise InvalidFilter."""
    if isinstance(value, TaskFilter):
        return value
    try:
        return TaskFilter(value)
    except ValueError:
        raise InvalidFilter(value) from None


@dataclass
class Task:
    """
    Task record representing a to-do item.

    Attributes:
        id: Unique identifier assigned by the task store.
        text: Trimmed, non-empty description of the task.
        priority: Task priority level (high, medium, low).
        completed: Whether the task has been completed.
        created_at: Timestamp when the task was created. Informational only.
    """

    id: int
    text: str
    priority: TaskPriority = TaskPriority.MEDIUM
    completed: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> dict[str, Any]:
        """
        Convert the task to a dictionary representation.

        Returns:
            Dictionary containing all task fields.
        """
        return {
            "id": self.id,
            "text": self.text,
            "priority": self.priority.value,
            "completed": self.completed,
            "created_at": self.created_at.isoformat(),
        }

    def __repr__(self) -> str:
        """Return string representation of the task."""
        return f"<Task {self.id}: {self.text}>"
