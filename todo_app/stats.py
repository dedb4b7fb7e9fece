"""
Derived statistics over a task snapshot.

Nothing here is stored: counts, the productivity score and the summary
text are recomputed from the tasks passed in on every call.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from todo_app.models import StatLevel, Task, TaskPriority

COMPLETION_WEIGHT = 70
HIGH_PRIORITY_WEIGHT = 30


@dataclass(frozen=True)
class TaskStatistics:
    """Total, completed and pending counts plus the counter's display level."""

    total: int
    completed: int
    pending: int
    level: StatLevel = StatLevel.NORMAL

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "completed": self.completed,
            "pending": self.pending,
            "level": self.level.value,
        }


def count_level(total: int, warning: int = 5, danger: int = 10) -> StatLevel:
    """
    Map a task count onto the cosmetic escalation level.

    Args:
        total: Number of tasks.
        warning: Counts above this are flagged as a warning.
        danger: Counts above this are flagged as danger.

    Returns:
        The StatLevel to render the counter with.
    """
    if total > danger:
        return StatLevel.DANGER
    if total > warning:
        return StatLevel.WARNING
    return StatLevel.NORMAL


def calculate_statistics(
    tasks: Sequence[Task], warning: int = 5, danger: int = 10
) -> TaskStatistics:
    """Count total, completed and pending tasks."""
    total = len(tasks)
    completed = sum(1 for task in tasks if task.completed)
    return TaskStatistics(
        total=total,
        completed=completed,
        pending=total - completed,
        level=count_level(total, warning, danger),
    )


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return math.floor(value + 0.5)


def productivity_score(tasks: Sequence[Task]) -> int:
    """
    Score task completion on a 0-100 scale.

    Overall completion contributes up to 70 points; the completion ratio
    of high-priority tasks contributes up to 30 more when any exist.
    An empty collection scores 0.
    """
    if not tasks:
        return 0

    completed = sum(1 for task in tasks if task.completed)
    high = [task for task in tasks if task.priority is TaskPriority.HIGH]
    high_completed = sum(1 for task in high if task.completed)

    score = completed / len(tasks) * COMPLETION_WEIGHT
    if high:
        score += high_completed / len(high) * HIGH_PRIORITY_WEIGHT

    return round_half_up(score)


def task_summary(tasks: Sequence[Task]) -> str:
    """Multi-line summary with totals and a per-priority breakdown."""
    if not tasks:
        return "No tasks available for summary."

    stats = calculate_statistics(tasks)
    lines = [
        "TASK SUMMARY:",
        f"Total: {stats.total} tasks",
        f"Completed: {stats.completed} tasks",
        f"Pending: {stats.pending} tasks",
        "",
        "BY PRIORITY:",
    ]
    for priority in TaskPriority:
        group = [task for task in tasks if task.priority is priority]
        done = sum(1 for task in group if task.completed)
        lines.append(
            f"- {priority.value.upper()}: {len(group)} tasks ({done} completed)"
        )
    return "\n".join(lines) + "\n"
