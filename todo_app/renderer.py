"""
List renderer: projects a task snapshot into display rows.

The renderer keeps no state. It is re-run on the full snapshot after
every change, so the page is always rebuilt from scratch rather than
patched.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from todo_app.models import Task, TaskFilter, parse_filter


@dataclass(frozen=True)
class DisplayRow:
    """
    One line of the rendered task list.

    Placeholder rows carry only ``text``; every other field is unset.
    """

    text: str
    task_id: int | None = None
    priority_label: str | None = None
    priority_class: str | None = None
    action_label: str | None = None
    completed: bool = False
    placeholder: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "task_id": self.task_id,
            "text": self.text,
            "priority_label": self.priority_label,
            "priority_class": self.priority_class,
            "action_label": self.action_label,
            "completed": self.completed,
            "placeholder": self.placeholder,
        }


def filter_tasks(tasks: Sequence[Task], task_filter: TaskFilter | str) -> list[Task]:
    """Keep the tasks matching the filter, preserving order."""
    task_filter = parse_filter(task_filter)
    if task_filter is TaskFilter.COMPLETED:
        return [task for task in tasks if task.completed]
    if task_filter is TaskFilter.PENDING:
        return [task for task in tasks if not task.completed]
    return list(tasks)


def placeholder_text(task_filter: TaskFilter) -> str:
    if task_filter is TaskFilter.ALL:
        return "No tasks found."
    return f"No {task_filter.value} tasks found."


def task_row(task: Task) -> DisplayRow:
    return DisplayRow(
        task_id=task.id,
        text=task.text,
        priority_label=task.priority.label,
        priority_class=f"priority-{task.priority.value}",
        action_label="Undo" if task.completed else "Complete",
        completed=task.completed,
    )


def render(
    tasks: Sequence[Task], task_filter: TaskFilter | str = TaskFilter.ALL
) -> list[DisplayRow]:
    """
    Build the display rows for a snapshot under the given filter.

    Args:
        tasks: Full task snapshot in insertion order.
        task_filter: all, completed or pending.

    Returns:
        One row per matching task, or a single placeholder row when
        nothing matches.

    Raises:
        InvalidFilter: If the filter name is unknown.
    """
    task_filter = parse_filter(task_filter)
    visible = filter_tasks(tasks, task_filter)
    if not visible:
        return [DisplayRow(text=placeholder_text(task_filter), placeholder=True)]
    return [task_row(task) for task in visible]
