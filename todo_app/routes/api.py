"""
JSON API endpoints for the task board.

The API drives the same TaskBoard as the HTML views, so a task added
here shows up on the page and vice versa.

Endpoints:
    GET    /api/health               - Health check
    GET    /api/tasks                - List tasks and rendered rows
    POST   /api/tasks                - Add a task
    POST   /api/tasks/<id>/toggle    - Toggle completion
    DELETE /api/tasks/<id>           - Delete a task
    DELETE /api/tasks?confirm=true   - Clear all tasks
    GET    /api/stats                - Counts and productivity score
    GET    /api/demos/<name>         - Demo output (read-only)
    POST   /api/demos/<name>         - Run a demo into the status line
"""

import logging
import os
from flask import Blueprint, jsonify, request, Response

from todo_app import get_board
from todo_app.demos import DEMOS
from todo_app.dispatcher import (
    AddTask,
    ClearAll,
    DeleteTask,
    ShowDemo,
    ToggleTask,
)
from todo_app.models import InvalidFilter, TaskPriority
from todo_app.stats import productivity_score

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.route("/health", methods=["GET"])
def health_check() -> tuple[Response, int]:
    """Health check endpoint for deployment verification."""
    return jsonify({
        "status": "healthy",
        "environment": os.getenv("ENVIRONMENT", "unknown"),
        "version": os.getenv("APP_VERSION", "unknown")
    }), 200


@api_bp.route("/tasks", methods=["GET"])
def get_tasks() -> tuple[Response, int]:
    """
    List all tasks together with the rendered rows.

    Query Parameters:
        filter: Optional filter (all, completed, pending) to render with.
                The page's active filter is not changed.

    Returns:
        JSON response with tasks, rows and statistics.
    """
    logger.info("GET /api/tasks - Fetching all tasks")

    try:
        result = get_board().snapshot(task_filter=request.args.get("filter") or None)
    except InvalidFilter as exc:
        logger.warning(f"Validation failed: {exc}")
        return jsonify({"error": str(exc)}), 400

    return jsonify(result.to_dict()), 200


@api_bp.route("/tasks", methods=["POST"])
def create_task() -> tuple[Response, int]:
    """
    Add a task.

    Request Body (JSON):
        text: Task description (required)
        priority: Task priority (optional, default: medium)

    Returns:
        JSON response with the created task and 201 status code,
        or error message and 400 if validation fails.
    """
    logger.info("POST /api/tasks - Creating new task")

    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Request body must be JSON"}), 400

    result = get_board().dispatch(AddTask(
        text=data.get("text"),
        priority=data.get("priority", TaskPriority.MEDIUM.value),
    ))
    if not result.ok:
        logger.warning(f"Validation failed: {result.message}")
        return jsonify({"error": result.message}), 400

    return jsonify(result.to_dict()), 201


@api_bp.route("/tasks/<int:task_id>/toggle", methods=["POST"])
def toggle_task(task_id: int) -> tuple[Response, int]:
    """Toggle the completion state of a task."""
    logger.info(f"POST /api/tasks/{task_id}/toggle - Toggling task")

    result = get_board().dispatch(ToggleTask(task_id))
    if not result.ok:
        return jsonify({"error": "Task not found"}), 404
    return jsonify(result.to_dict()), 200


@api_bp.route("/tasks/<int:task_id>", methods=["DELETE"])
def delete_task(task_id: int) -> tuple[Response, int]:
    """Delete a task."""
    logger.info(f"DELETE /api/tasks/{task_id} - Deleting task")

    result = get_board().dispatch(DeleteTask(task_id))
    if not result.ok:
        return jsonify({"error": "Task not found"}), 404
    return jsonify(result.to_dict()), 200


@api_bp.route("/tasks", methods=["DELETE"])
def clear_tasks() -> tuple[Response, int]:
    """
    Clear all tasks.

    Query Parameters:
        confirm: Must be "true" to proceed; "false" cancels.

    Returns:
        200 when cleared (or nothing to clear), 409 when confirmation
        is still required, 400 when cancelled.
    """
    logger.info("DELETE /api/tasks - Clearing tasks")

    answer = request.args.get("confirm")
    confirmed = None if answer is None else answer.lower() == "true"

    result = get_board().dispatch(ClearAll(confirmed=confirmed))
    if result.confirmation_required:
        return jsonify(result.to_dict()), 409
    if not result.ok:
        return jsonify(result.to_dict()), 400
    return jsonify(result.to_dict()), 200


@api_bp.route("/stats", methods=["GET"])
def get_stats() -> tuple[Response, int]:
    """Return task counts, the counter level and the productivity score."""
    logger.info("GET /api/stats - Computing statistics")

    result = get_board().snapshot()
    payload = result.stats.to_dict()
    payload["productivity_score"] = productivity_score(result.tasks)
    return jsonify(payload), 200


@api_bp.route("/demos/<name>", methods=["GET"])
def get_demo(name: str) -> tuple[Response, int]:
    """Return a demo's text without changing the page's status line."""
    logger.info(f"GET /api/demos/{name} - Building demo")

    output = get_board().demo_text(name)
    if output is None:
        return jsonify({"error": f"Unknown demo '{name}'"}), 404
    return jsonify({"demo": name, "output": output}), 200


@api_bp.route("/demos/<name>", methods=["POST"])
def run_demo(name: str) -> tuple[Response, int]:
    """Run a demo and show its text in the page's status line."""
    logger.info(f"POST /api/demos/{name} - Running demo")

    if name not in DEMOS:
        return jsonify({"error": f"Unknown demo '{name}'"}), 404

    result = get_board().dispatch(ShowDemo(name))
    return jsonify({"demo": name, "output": result.message}), 200


# -----------------------------------------------------------------------------
# Error Handlers
# -----------------------------------------------------------------------------

@api_bp.errorhandler(400)
def bad_request(error: Exception) -> tuple[Response, int]:
    """Handle 400 Bad Request errors."""
    return jsonify({"error": "Bad request"}), 400


@api_bp.errorhandler(404)
def not_found(error: Exception) -> tuple[Response, int]:
    """Handle 404 Not Found errors."""
    return jsonify({"error": "Resource not found"}), 404


@api_bp.errorhandler(500)
def internal_error(error: Exception) -> tuple[Response, int]:
    """Handle 500 Internal Server errors."""
    logger.error(f"Internal server error: {error}")
    return jsonify({"error": "Internal server error"}), 500
