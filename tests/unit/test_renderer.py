"""
Unit tests for the list renderer.
"""

import pytest

from todo_app.models import InvalidFilter, TaskFilter
from todo_app.renderer import filter_tasks, render


pytestmark = pytest.mark.unit


def test_all_filter_keeps_insertion_order(multiple_tasks, store):
    rows = render(store.all(), "all")

    assert [row.task_id for row in rows] == [1, 2, 3, 4]


def test_completed_filter(multiple_tasks, store):
    tasks = filter_tasks(store.all(), TaskFilter.COMPLETED)

    assert [task.id for task in tasks] == [1, 3]
    assert all(task.completed for task in tasks)


def test_pending_filter_is_the_complement(multiple_tasks, store):
    tasks = filter_tasks(store.all(), TaskFilter.PENDING)

    assert [task.id for task in tasks] == [2, 4]


def test_row_labels(task_factory, store):
    # Arrange
    task_factory(text="Buy milk", priority="high", completed=True)
    task_factory(text="Walk dog", priority="low")

    # Act
    done, open_ = render(store.all())

    # Assert
    assert done.priority_label == "High"
    assert done.priority_class == "priority-high"
    assert done.action_label == "Undo"
    assert open_.priority_label == "Low"
    assert open_.action_label == "Complete"
    assert not done.placeholder


@pytest.mark.parametrize(
    "task_filter, text",
    [
        ("all", "No tasks found."),
        ("completed", "No completed tasks found."),
        ("pending", "No pending tasks found."),
    ],
)
def test_placeholder_names_the_filter(task_filter, text):
    rows = render([], task_filter)

    assert len(rows) == 1
    assert rows[0].placeholder
    assert rows[0].text == text


def test_buy_milk_scenario(store):
    # Arrange
    task = store.add("Buy milk", "high")
    assert (task.id, task.completed) == (1, False)

    # Act
    store.toggle_completion(1)

    # Assert
    pending = render(store.all(), "pending")
    completed = render(store.all(), "completed")
    assert pending[0].placeholder
    assert [row.text for row in completed] == ["Buy milk"]


def test_unknown_filter_is_rejected():
    with pytest.raises(InvalidFilter):
        render([], "archived")
