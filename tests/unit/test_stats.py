"""
Unit tests for statistics, the productivity score and the summary.
"""

import pytest

from todo_app.models import StatLevel
from todo_app.stats import (
    calculate_statistics,
    count_level,
    productivity_score,
    task_summary,
)


pytestmark = pytest.mark.unit


def test_statistics_on_empty_store(store):
    stats = calculate_statistics(store.all())

    assert (stats.total, stats.completed, stats.pending) == (0, 0, 0)
    assert stats.level is StatLevel.NORMAL


def test_statistics_counts(multiple_tasks, store):
    stats = calculate_statistics(store.all())

    assert stats.total == 4
    assert stats.completed == 2
    assert stats.pending == 2
    assert stats.total == stats.completed + stats.pending


@pytest.mark.parametrize(
    "total, expected",
    [
        (0, StatLevel.NORMAL),
        (5, StatLevel.NORMAL),
        (6, StatLevel.WARNING),
        (10, StatLevel.WARNING),
        (11, StatLevel.DANGER),
    ],
)
def test_count_level_thresholds(total, expected):
    assert count_level(total, warning=5, danger=10) is expected


def test_score_is_zero_for_empty_collection():
    assert productivity_score([]) == 0


def test_score_with_high_priority_tasks(multiple_tasks, store):
    # 2/4 completed -> 35, 1/2 high completed -> 15
    assert productivity_score(store.all()) == 50


def test_score_without_high_priority_tasks(task_factory, store):
    # Arrange
    task_factory(priority="low", completed=True)
    task_factory(priority="medium")
    task_factory(priority="medium")

    # Act
    score = productivity_score(store.all())

    # Assert
    assert score == round(1 / 3 * 70)


def test_score_rounds_halves_up(task_factory, store):
    # Arrange: 1/4 completed -> 17.5
    task_factory(priority="low", completed=True)
    for _ in range(3):
        task_factory(priority="low")

    # Act / Assert
    assert productivity_score(store.all()) == 18


def test_score_is_100_when_everything_is_done(task_factory, store):
    task_factory(priority="high", completed=True)
    task_factory(priority="low", completed=True)

    assert productivity_score(store.all()) == 100


def test_summary_for_empty_collection():
    assert task_summary([]) == "No tasks available for summary."


def test_summary_groups_by_priority(multiple_tasks, store):
    summary = task_summary(store.all())

    assert "Total: 4 tasks" in summary
    assert "Completed: 2 tasks" in summary
    assert "- HIGH: 2 tasks (1 completed)" in summary
    assert "- MEDIUM: 1 tasks (1 completed)" in summary
    assert "- LOW: 1 tasks (0 completed)" in summary
