"""
Event dispatcher for the task board.

User actions arrive as typed intents and go through a single entry
point, ``TaskBoard.dispatch``. Each intent is handled to completion:
the store is mutated, statistics are recomputed and the list is
re-rendered with the active filter. The status line is overwritten on
every action.

Key Concepts:
- Intents are plain frozen dataclasses, one per user action
- Store errors are converted into failed results, never raised
- Clear-all is gated behind an explicit confirmation
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Union

from todo_app.demos import DEMOS
from todo_app.models import (
    EmptyTaskText,
    InvalidFilter,
    InvalidPriority,
    InvalidTaskText,
    Task,
    TaskFilter,
    TaskNotFound,
    TaskPriority,
    parse_filter,
)
from todo_app.renderer import DisplayRow, render
from todo_app.stats import TaskStatistics, calculate_statistics
from todo_app.store import TaskStore

logger = logging.getLogger(__name__)

INITIAL_STATUS = (
    "Task Manager initialized!\n"
    "Use the buttons above to demo the task list features."
)


# -----------------------------------------------------------------------------
# Intents
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class AddTask:
    text: str
    priority: str = TaskPriority.MEDIUM.value


@dataclass(frozen=True)
class ToggleTask:
    task_id: int


@dataclass(frozen=True)
class DeleteTask:
    task_id: int


@dataclass(frozen=True)
class SelectFilter:
    filter: str


@dataclass(frozen=True)
class ClearAll:
    """
    Remove every task.

    ``confirmed`` is None until the user has answered the prompt;
    True proceeds and False cancels.
    """

    confirmed: bool | None = None


@dataclass(frozen=True)
class ShowDemo:
    name: str


Intent = Union[AddTask, ToggleTask, DeleteTask, SelectFilter, ClearAll, ShowDemo]


@dataclass
class DispatchResult:
    """View data produced after handling one intent."""

    ok: bool
    message: str
    stats: TaskStatistics
    rows: list[DisplayRow]
    active_filter: TaskFilter
    confirmation_required: bool = False
    task: Task | None = None
    tasks: tuple[Task, ...] = ()
    extra: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        data = {
            "ok": self.ok,
            "message": self.message,
            "stats": self.stats.to_dict(),
            "rows": [row.to_dict() for row in self.rows],
            "active_filter": self.active_filter.value,
            "confirmation_required": self.confirmation_required,
            "tasks": [task.to_dict() for task in self.tasks],
            "count": len(self.tasks),
        }
        if self.task is not None:
            data["task"] = self.task.to_dict()
        data.update(self.extra)
        return data


class TaskBoard:
    """
    Owns the task store, the active filter and the status line.

    Args:
        store: Task store to operate on; a fresh one is created if omitted.
        app_name: Name shown by the variables demo.
        max_tasks: Informational task limit shown by the variables demo.
        warning_threshold: Total count above which the counter warns.
        danger_threshold: Total count above which the counter turns red.
    """

    def __init__(
        self,
        store: TaskStore | None = None,
        app_name: str = "Task Manager",
        max_tasks: int = 20,
        warning_threshold: int = 5,
        danger_threshold: int = 10,
    ) -> None:
        self.store = store if store is not None else TaskStore()
        self.app_name = app_name
        self.max_tasks = max_tasks
        self.warning_threshold = warning_threshold
        self.danger_threshold = danger_threshold
        self.active_filter = TaskFilter.ALL
        self.status = INITIAL_STATUS
        self._lock = threading.RLock()

    @classmethod
    def from_config(cls, config: Any) -> "TaskBoard":
        """Build a board from a Flask config mapping."""
        return cls(
            app_name=config.get("APP_NAME", "Task Manager"),
            max_tasks=config.get("MAX_TASKS", 20),
            warning_threshold=config.get("TASK_COUNT_WARNING_THRESHOLD", 5),
            danger_threshold=config.get("TASK_COUNT_DANGER_THRESHOLD", 10),
        )

    # ---- read side ----

    def snapshot(
        self,
        ok: bool = True,
        task_filter: TaskFilter | str | None = None,
        **kwargs: Any,
    ) -> DispatchResult:
        """
        Recompute statistics and rows for the current state.

        Args:
            ok: Outcome flag copied onto the result.
            task_filter: Render with this filter instead of the active one.
                The board's active filter and status line are left alone.

        Raises:
            InvalidFilter: If ``task_filter`` is not a known filter.
        """
        with self._lock:
            shown = (
                self.active_filter if task_filter is None
                else parse_filter(task_filter)
            )
            tasks = self.store.all()
            return DispatchResult(
                ok=ok,
                message=self.status,
                stats=calculate_statistics(
                    tasks, self.warning_threshold, self.danger_threshold
                ),
                rows=render(tasks, shown),
                active_filter=shown,
                tasks=tasks,
                **kwargs,
            )

    def demo_text(self, name: str) -> str | None:
        """Build a demo's text without touching the status line."""
        demo = DEMOS.get(name)
        if demo is None:
            return None
        with self._lock:
            tasks = self.store.all()
        return demo(tasks, app_name=self.app_name, max_tasks=self.max_tasks)

    # ---- write side ----

    def dispatch(self, intent: Intent) -> DispatchResult:
        """
        Handle one intent and return the refreshed view data.

        Args:
            intent: One of the intent dataclasses.

        Returns:
            DispatchResult with ``ok`` False when the intent was rejected.
        """
        handler = self._handlers.get(type(intent))
        if handler is None:
            raise TypeError(f"Unsupported intent: {intent!r}")

        with self._lock:
            logger.debug(f"Dispatching {intent!r}")
            return handler(self, intent)

    def _add(self, intent: AddTask) -> DispatchResult:
        try:
            task = self.store.add(intent.text, intent.priority)
        except EmptyTaskText:
            self.status = "Error: Task text cannot be empty!"
            return self.snapshot(ok=False)
        except (InvalidPriority, InvalidTaskText) as exc:
            self.status = f"Error: {exc}"
            return self.snapshot(ok=False)

        self.status = f'Task added: "{task.text}" (Priority: {task.priority.value})'
        return self.snapshot(task=task)

    def _toggle(self, intent: ToggleTask) -> DispatchResult:
        try:
            task = self.store.toggle_completion(intent.task_id)
        except TaskNotFound:
            return self.snapshot(ok=False)

        state = "completed" if task.completed else "marked as pending"
        self.status = f'Task "{task.text}" {state}'
        return self.snapshot(task=task)

    def _delete(self, intent: DeleteTask) -> DispatchResult:
        try:
            task = self.store.delete(intent.task_id)
        except TaskNotFound:
            return self.snapshot(ok=False)

        self.status = f'Task "{task.text}" deleted'
        return self.snapshot(task=task)

    def _select_filter(self, intent: SelectFilter) -> DispatchResult:
        try:
            self.active_filter = parse_filter(intent.filter)
        except InvalidFilter as exc:
            self.status = f"Error: {exc}"
            return self.snapshot(ok=False)

        self.status = f"Filtered tasks: {self.active_filter.value}"
        return self.snapshot()

    def _clear(self, intent: ClearAll) -> DispatchResult:
        if len(self.store) == 0:
            self.status = "No tasks to clear!"
            return self.snapshot()

        if intent.confirmed is None:
            return self.snapshot(confirmation_required=True)

        if not intent.confirmed:
            self.status = "Clear all cancelled."
            return self.snapshot(ok=False)

        self.store.clear()
        self.status = "All tasks cleared!"
        return self.snapshot()

    def _demo(self, intent: ShowDemo) -> DispatchResult:
        text = self.demo_text(intent.name)
        if text is None:
            self.status = f"Error: Unknown demo '{intent.name}'."
            return self.snapshot(ok=False)

        self.status = text
        return self.snapshot()

    _handlers = {
        AddTask: _add,
        ToggleTask: _toggle,
        DeleteTask: _delete,
        SelectFilter: _select_filter,
        ClearAll: _clear,
        ShowDemo: _demo,
    }
