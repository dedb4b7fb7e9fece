"""
HTML view routes for the Task Manager web interface.

Every POST handler turns the submitted form into an intent, hands it
to the TaskBoard and redirects back to the task list, which always
renders the full, freshly computed page.

Routes:
    GET  /                      - Task list page (home)
    POST /tasks                 - Add a task
    POST /tasks/<id>/toggle     - Toggle completion
    POST /tasks/<id>/delete     - Delete a task
    POST /filter                - Select the active filter
    POST /tasks/clear           - Clear all tasks (asks for confirmation)
    POST /demos/<name>          - Run an informational demo
"""

import logging
from flask import Blueprint, render_template, redirect, url_for, request

from todo_app import get_board
from todo_app.demos import DEMOS
from todo_app.dispatcher import (
    AddTask,
    ClearAll,
    DeleteTask,
    DispatchResult,
    SelectFilter,
    ShowDemo,
    ToggleTask,
)
from todo_app.models import InvalidFilter, TaskFilter, TaskPriority

logger = logging.getLogger(__name__)

views_bp = Blueprint("views", __name__)


def render_board(result: DispatchResult, status_code: int = 200):
    """Render the task list page from a dispatch result."""
    return render_template(
        "index.html",
        result=result,
        filters=TaskFilter,
        priorities=TaskPriority,
        demos=DEMOS,
    ), status_code


@views_bp.route("/")
def index():
    """
    Render the task list page.

    Query Parameters:
        filter: Optional filter to render with; the active filter and
                the status line are left unchanged

    Returns:
        Rendered index.html template with the task list.
    """
    logger.info("GET / - Rendering task list")

    board = get_board()
    try:
        result = board.snapshot(task_filter=request.args.get("filter") or None)
    except InvalidFilter:
        logger.warning("Unknown filter in query string")
        return render_board(board.snapshot(), 400)

    return render_board(result)


@views_bp.route("/tasks", methods=["POST"])
def add_task():
    """
    Handle the add-task form (button click or Enter in the text field).

    Form Data:
        text: Task description (required)
        priority: Task priority

    Returns:
        Redirect to index.
    """
    logger.info("POST /tasks - Adding task from form")

    get_board().dispatch(AddTask(
        text=request.form.get("text", ""),
        priority=request.form.get("priority", TaskPriority.MEDIUM.value),
    ))
    return redirect(url_for("views.index"))


@views_bp.route("/tasks/<int:task_id>/toggle", methods=["POST"])
def toggle_task(task_id: int):
    """Toggle the completion state of a task."""
    logger.info(f"POST /tasks/{task_id}/toggle - Toggling task")

    get_board().dispatch(ToggleTask(task_id))
    return redirect(url_for("views.index"))


@views_bp.route("/tasks/<int:task_id>/delete", methods=["POST"])
def delete_task(task_id: int):
    """Delete a task."""
    logger.info(f"POST /tasks/{task_id}/delete - Deleting task")

    get_board().dispatch(DeleteTask(task_id))
    return redirect(url_for("views.index"))


@views_bp.route("/filter", methods=["POST"])
def select_filter():
    """
    Select which tasks the list shows.

    Form Data:
        filter: all, completed or pending
    """
    logger.info("POST /filter - Selecting filter")

    get_board().dispatch(SelectFilter(request.form.get("filter", "")))
    return redirect(url_for("views.index"))


@views_bp.route("/tasks/clear", methods=["POST"])
def clear_tasks():
    """
    Clear all tasks after explicit confirmation.

    Without a ``confirm`` field the confirmation page is shown and
    nothing changes. ``confirm=yes`` clears the list; any other answer
    cancels the operation.
    """
    logger.info("POST /tasks/clear - Clearing tasks")

    answer = request.form.get("confirm")
    confirmed = None if answer is None else answer == "yes"

    result = get_board().dispatch(ClearAll(confirmed=confirmed))
    if result.confirmation_required:
        return render_template("confirm_clear.html", result=result)
    return redirect(url_for("views.index"))


@views_bp.route("/demos/<name>", methods=["POST"])
def run_demo(name: str):
    """Show an informational demo in the status area."""
    logger.info(f"POST /demos/{name} - Running demo")

    get_board().dispatch(ShowDemo(name))
    return redirect(url_for("views.index"))
