"""
Unit tests for the informational demo texts.
"""

import pytest

from todo_app.demos import (
    high_priority_demo,
    loops_demo,
    variables_demo,
)


pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    "count, remark",
    [
        (0, "No tasks yet. Time to get productive!"),
        (3, "Good start! Keep adding tasks."),
        (7, "You're being productive!"),
        (12, "Busy schedule! Consider prioritizing."),
    ],
)
def test_variables_demo_remarks(task_factory, store, count, remark):
    for _ in range(count):
        task_factory()

    output = variables_demo(store.all(), max_tasks=20)

    assert remark in output
    assert "Max Tasks: 20" in output


def test_variables_demo_load_warning(task_factory, store):
    for _ in range(11):
        task_factory()

    assert "Warning: You have many tasks!" in variables_demo(store.all(), max_tasks=20)
    assert "Task load is manageable." in variables_demo(store.all(), max_tasks=30)


def test_loops_demo_limits(task_factory, store):
    # Arrange
    for n in range(7):
        task_factory(text=f"Task {n}", completed=n % 2 == 0)

    # Act
    output = loops_demo(store.all())

    # Assert
    assert "Task 5: ID 5" in output
    assert "Task 6: ID 6" not in output
    assert output.count("[medium]") == 3
    assert output.count("Pending: ") == 3
    assert "Pending: Task 1" in output


def test_high_priority_demo_lists_pending_only(task_factory, store):
    task_factory(text="Done", priority="high", completed=True)
    task_factory(text="Call bank", priority="high")
    task_factory(text="Low", priority="low")

    output = high_priority_demo(store.all())

    assert output.startswith("Found 1 high priority task(s):")
    assert "- Call bank" in output
    assert "Done" not in output


def test_high_priority_demo_when_none_pending(task_factory, store):
    task_factory(priority="low")

    assert high_priority_demo(store.all()) == "No high priority tasks pending."
