"""
Informational demo displays.

Each demo builds a block of text from a task snapshot. None of them
touches the store.
"""

from collections.abc import Callable, Sequence

from todo_app.models import Task, TaskPriority
from todo_app.stats import productivity_score, task_summary


def variables_demo(
    tasks: Sequence[Task], app_name: str = "Task Manager", max_tasks: int = 20
) -> str:
    user_status = "active"
    theme = "light"
    lines = [
        "=== VARIABLES AND CONDITIONALS DEMO ===",
        "",
        f"App: {app_name}",
        f"User Status: {user_status}",
        f"Max Tasks: {max_tasks}",
        f"Theme: {theme}",
        "",
    ]

    count = len(tasks)
    if count > max_tasks / 2:
        lines.append("Warning: You have many tasks!")
    else:
        lines.append("Task load is manageable.")

    if count == 0:
        lines.append("No tasks yet. Time to get productive!")
    elif count < 5:
        lines.append("Good start! Keep adding tasks.")
    elif count < 10:
        lines.append("You're being productive!")
    else:
        lines.append("Busy schedule! Consider prioritizing.")

    return "\n".join(lines)


def loops_demo(tasks: Sequence[Task], **_: object) -> str:
    lines = ["=== LOOP EXAMPLES DEMO ===", "", "FOR LOOP (Task IDs):"]
    for position, task in enumerate(tasks[:5], start=1):
        lines.append(f"Task {position}: ID {task.id}")

    lines += ["", "FOR...OF LOOP (Task Texts):"]
    for task in tasks[:3]:
        lines.append(f"- {task.text} [{task.priority.value}]")

    lines += ["", "WHILE LOOP (Statistics):"]
    index = 0
    shown = 0
    while index < len(tasks) and shown < 3:
        if not tasks[index].completed:
            lines.append(f"Pending: {tasks[index].text}")
            shown += 1
        index += 1

    return "\n".join(lines) + "\n"


def functions_demo(tasks: Sequence[Task], **_: object) -> str:
    return "\n".join([
        "=== FUNCTIONS DEMO ===",
        "",
        "Function: productivity_score()",
        f"Productivity Score: {productivity_score(tasks)}/100",
        "",
        "Function: task_summary()",
        task_summary(tasks),
    ])


def high_priority_demo(tasks: Sequence[Task], **_: object) -> str:
    pending_high = [
        task for task in tasks
        if task.priority is TaskPriority.HIGH and not task.completed
    ]
    if not pending_high:
        return "No high priority tasks pending."

    lines = [f"Found {len(pending_high)} high priority task(s):", "High Priority Tasks:"]
    lines += [f"- {task.text}" for task in pending_high]
    return "\n".join(lines) + "\n"


DEMOS: dict[str, Callable[..., str]] = {
    "variables": variables_demo,
    "loops": loops_demo,
    "functions": functions_demo,
    "high_priority": high_priority_demo,
}
