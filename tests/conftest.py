"""
Shared pytest fixtures for the Task Manager test suite.

This module contains fixtures that are shared across all test modules.
Fixtures follow the Arrange-Act-Assert (AAA) pattern and ensure
test isolation by providing a fresh, empty task board for each test.

Key Concepts Demonstrated:
- Fixture dependencies
- Test data factories
- Test client creation
"""

import os
import pytest
from faker import Faker

# Set testing environment before importing app
os.environ["FLASK_ENV"] = "testing"

from todo_app import create_app
from todo_app.dispatcher import TaskBoard
from todo_app.models import Task, TaskPriority
from todo_app.store import TaskStore


# Initialize Faker for generating test data
fake = Faker()


# -----------------------------------------------------------------------------
# Application Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="function")
def app():
    """
    Create application instance for a single test.

    The board lives in memory on the app, so a new app per test is
    what keeps tests isolated from each other.

    Yields:
        Flask application instance configured for testing.
    """
    application = create_app("testing")
    yield application


@pytest.fixture(scope="function")
def client(app):
    """
    Create a test client for making HTTP requests.

    Args:
        app: Flask application fixture.

    Yields:
        Flask test client for making HTTP requests.
    """
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture
def app_board(app) -> TaskBoard:
    """The TaskBoard bound to the test application."""
    return app.extensions["task_board"]


# -----------------------------------------------------------------------------
# Domain Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def store() -> TaskStore:
    """Provide an empty task store."""
    return TaskStore()


@pytest.fixture
def board(store) -> TaskBoard:
    """Provide a task board over the empty store fixture."""
    return TaskBoard(store=store)


@pytest.fixture
def task_factory(store):
    """
    Factory fixture for adding tasks to the store fixture.

    Example:
        def test_something(task_factory):
            task = task_factory(text="My Task", completed=True)
            assert task.completed
    """

    def _create_task(
        text: str | None = None,
        priority: str = TaskPriority.MEDIUM.value,
        completed: bool = False
    ) -> Task:
        task = store.add(text or fake.sentence(nb_words=4), priority)
        if completed:
            task = store.toggle_completion(task.id)
        return task

    return _create_task


@pytest.fixture
def multiple_tasks(task_factory) -> list[Task]:
    """
    Create tasks with different priorities and completion states.

    Two of four are completed; of the two high-priority tasks one is
    completed.
    """
    return [
        task_factory(text="Buy milk", priority="high", completed=True),
        task_factory(text="File taxes", priority="high"),
        task_factory(text="Water plants", priority="medium", completed=True),
        task_factory(text="Read a book", priority="low"),
    ]


# -----------------------------------------------------------------------------
# API Helper Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def api_headers() -> dict[str, str]:
    """
    Provide common headers for API requests.

    Returns:
        Dictionary of HTTP headers.
    """
    return {
        "Content-Type": "application/json",
        "Accept": "application/json"
    }
