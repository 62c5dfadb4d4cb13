"""Tests for core task logic."""

from unittest.mock import patch

import pytest

from tasklist.core.tasks import (
    DEFAULT_PRIORITY,
    Priority,
    Task,
    filter_completed,
    find_task,
    new_task_id,
    sort_by_priority,
)


# Fixtures
@pytest.fixture
def sample_tasks():
    """A(p=3), B(p=1), C(p=3), D(p=2)."""
    return [
        Task(id="a", name="A", priority=3),
        Task(id="b", name="B", priority=1),
        Task(id="c", name="C", priority=3),
        Task(id="d", name="D", priority=2),
    ]


def names(tasks):
    return [t.name for t in tasks]


class TestPriority:
    @pytest.mark.parametrize(
        "value,expected",
        [(-4, Priority.LOW), (0, Priority.LOW), (1, Priority.LOW), (2, Priority.MEDIUM),
         (3, Priority.HIGH), (5, Priority.HIGH)],
    )
    def test_from_int_clamps(self, value, expected):
        assert Priority.from_int(value) is expected

    def test_labels(self):
        assert [p.label for p in Priority] == ["Low", "Medium", "High"]

    def test_parse_label_case_insensitive(self):
        assert Priority.parse("High") is Priority.HIGH
        assert Priority.parse(" low ") is Priority.LOW

    def test_parse_digit_is_clamped(self):
        assert Priority.parse("2") is Priority.MEDIUM
        assert Priority.parse("9") is Priority.HIGH

    def test_parse_unknown_raises(self):
        with pytest.raises(ValueError, match="Unknown priority"):
            Priority.parse("urgent")


class TestTask:
    def test_defaults(self):
        task = Task(id="1", name="Test")
        assert task.completed is False
        assert task.priority == 2
        assert task.level is Priority.MEDIUM

    def test_priority_clamped_on_creation(self):
        assert Task(id="1", name="Test", priority=0).priority == 1
        assert Task(id="1", name="Test", priority=7).priority == 3

    def test_priority_stored_as_plain_int(self):
        task = Task(id="1", name="Test", priority=Priority.HIGH)
        assert type(task.priority) is int

    def test_to_record(self):
        task = Task(id="1", name="Test", completed=True, priority=3)
        assert task.to_record() == {"id": "1", "name": "Test", "completed": True, "priority": 3}

    def test_from_record_full(self):
        task = Task.from_record({"id": "1", "name": "Test", "completed": True, "priority": 1})
        assert task == Task(id="1", name="Test", completed=True, priority=1)

    def test_from_record_missing_fields_use_defaults(self):
        task = Task.from_record({"id": "1", "name": "Test"})
        assert task.completed is False
        assert task.priority == DEFAULT_PRIORITY

    def test_from_record_clamps_priority(self):
        assert Task.from_record({"id": "1", "name": "x", "priority": 0}).level is Priority.LOW
        assert Task.from_record({"id": "1", "name": "x", "priority": 5}).level is Priority.HIGH

    def test_from_record_bad_priority_uses_default(self):
        assert Task.from_record({"id": "1", "name": "x", "priority": "high"}).priority == 2
        assert Task.from_record({"id": "1", "name": "x", "priority": True}).priority == 2
        assert Task.from_record({"id": "1", "name": "x", "priority": None}).priority == 2

    @pytest.mark.parametrize(
        "raw,expected",
        [(float("inf"), 3), (float("-inf"), 1), (1e400, 3), (float("nan"), 2), (10**400, 3), (2.7, 2)],
    )
    def test_from_record_non_finite_and_huge_priority(self, raw, expected):
        assert Task.from_record({"id": "1", "name": "x", "priority": raw}).priority == expected

    @pytest.mark.parametrize("name", ["", "   ", "\t"])
    def test_from_record_blank_name_raises(self, name):
        with pytest.raises(ValueError, match="blank"):
            Task.from_record({"id": "1", "name": name})

    def test_from_record_non_bool_completed_is_false(self):
        assert Task.from_record({"id": "1", "name": "x", "completed": "yes"}).completed is False

    def test_from_record_missing_id_raises(self):
        with pytest.raises(KeyError):
            Task.from_record({"name": "x"})

    def test_from_record_non_string_id_raises(self):
        with pytest.raises(TypeError):
            Task.from_record({"id": 5, "name": "x"})


class TestNewTaskId:
    @patch("tasklist.core.tasks.time.time_ns", return_value=1_700_000_000_000_000_000)
    def test_uses_microseconds(self, _):
        assert new_task_id() == "1700000000000000"

    @patch("tasklist.core.tasks.time.time_ns", return_value=1_000_000)
    def test_skips_taken_ids(self, _):
        assert new_task_id({"1000", "1001"}) == "1002"

    @patch("tasklist.core.tasks.time.time_ns", return_value=1_000_000)
    def test_never_goes_backwards(self, _):
        assert new_task_id(after=5000) == "5001"


class TestSortByPriority:
    def test_descending_is_stable(self, sample_tasks):
        assert names(sort_by_priority(sample_tasks, descending=True)) == ["A", "C", "D", "B"]

    def test_ascending_is_stable(self, sample_tasks):
        assert names(sort_by_priority(sample_tasks, descending=False)) == ["B", "D", "A", "C"]

    def test_idempotent(self, sample_tasks):
        once = sort_by_priority(sample_tasks)
        assert sort_by_priority(once) == once

    def test_does_not_mutate_input(self, sample_tasks):
        sort_by_priority(sample_tasks)
        assert names(sample_tasks) == ["A", "B", "C", "D"]

    def test_empty(self):
        assert sort_by_priority([]) == []


class TestHelpers:
    def test_find_task(self, sample_tasks):
        assert find_task(sample_tasks, "c").name == "C"
        assert find_task(sample_tasks, "zzz") is None

    def test_filter_completed(self, sample_tasks):
        sample_tasks[1].completed = True
        assert names(filter_completed(sample_tasks)) == ["B"]
        assert names(filter_completed(sample_tasks, completed=False)) == ["A", "C", "D"]
