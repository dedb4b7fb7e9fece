"""
In-memory task store.

The store owns the ordered task collection and the id counter. Every
mutation goes through it; readers get copies so that nothing outside
the store can change a task behind its back.
"""

import logging
from dataclasses import replace
from typing import Any

from todo_app.models import (
    EmptyTaskText,
    InvalidTaskText,
    Task,
    TaskNotFound,
    TaskPriority,
    parse_priority,
)

logger = logging.getLogger(__name__)

FIRST_TASK_ID = 1


class TaskStore:
    """
    Ordered, in-memory task collection.

    Insertion order is the canonical display order. Ids come from a
    counter that only moves forward; ``clear`` is the single operation
    that rewinds it.
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._next_id: int = FIRST_TASK_ID

    def __len__(self) -> int:
        return len(self._tasks)

    @property
    def next_id(self) -> int:
        """Id the next created task will receive."""
        return self._next_id

    def _index_of(self, task_id: int) -> int:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        logger.warning(f"Task {task_id} not found")
        raise TaskNotFound(task_id)

    def add(self, text: str | None, priority: Any = TaskPriority.MEDIUM) -> Task:
        """
        Create a task and append it to the collection.

        Args:
            text: Task description; surrounding whitespace is stripped.
            priority: One of the TaskPriority values.

        Returns:
            A copy of the created task.

        Raises:
            EmptyTaskText: If the trimmed text is empty.
            InvalidTaskText: If the text is not a string.
            InvalidPriority: If the priority is not a known value.
        """
        if text is not None and not isinstance(text, str):
            logger.warning(f"Rejected task text of type {type(text).__name__}")
            raise InvalidTaskText(text)
        cleaned = (text or "").strip()
        if not cleaned:
            logger.warning("Rejected task with empty text")
            raise EmptyTaskText()
        task_priority = parse_priority(priority)

        task = Task(id=self._next_id, text=cleaned, priority=task_priority)
        self._next_id += 1
        self._tasks.append(task)

        logger.info(f"Created task with ID: {task.id}")
        return replace(task)

    def toggle_completion(self, task_id: int) -> Task:
        """Flip the completion flag of a task and return a copy of it."""
        task = self._tasks[self._index_of(task_id)]
        task.completed = not task.completed
        logger.info(f"Toggled task {task_id} completed={task.completed}")
        return replace(task)

    def delete(self, task_id: int) -> Task:
        """Remove a task permanently and return a copy of it."""
        task = self._tasks.pop(self._index_of(task_id))
        logger.info(f"Deleted task {task_id}")
        return replace(task)

    def clear(self) -> None:
        """Remove every task and rewind the id counter."""
        removed = len(self._tasks)
        self._tasks = []
        self._next_id = FIRST_TASK_ID
        logger.info(f"Cleared {removed} tasks")

    def all(self) -> tuple[Task, ...]:
        """Snapshot of all tasks in insertion order."""
        return tuple(replace(task) for task in self._tasks)
