from __future__ import annotations

from datetime import datetime, timezone

import pytest

from todo_service.domain import EntityAudit, TodoTask
from todo_service.errors import INVALID_STATE, InvalidTaskStateError

EXPIRY = datetime(2026, 10, 22, 12, 0, tzinfo=timezone.utc)


def test_new_task_starts_at_zero_without_timestamps() -> None:
    task = TodoTask(EXPIRY, "Buy milk")

    assert task.completion_percentage == 0
    assert task.is_done() is False
    assert task.description is None
    assert task.created_at is None
    assert task.updated_at is None


def test_new_tasks_get_distinct_identities() -> None:
    assert TodoTask(EXPIRY, "a").id != TodoTask(EXPIRY, "a").id


@pytest.mark.parametrize("starting_percentage", [0, 55, 100])
def test_mark_as_done_sets_full_completion(starting_percentage: int) -> None:
    task = TodoTask(EXPIRY, "Buy milk")
    task.update_completion_percentage(starting_percentage)

    task.mark_as_done()

    assert task.completion_percentage == 100
    assert task.is_done() is True


@pytest.mark.parametrize("title", ["", None])
def test_update_title_rejects_empty_values(title: str | None) -> None:
    task = TodoTask(EXPIRY, "Buy milk")

    with pytest.raises(InvalidTaskStateError) as exc_info:
        task.update_title(title)

    assert exc_info.value.code == INVALID_STATE
    assert str(task.id) in exc_info.value.message
    assert task.title == "Buy milk"


@pytest.mark.parametrize("value", [-1, 101])
def test_update_completion_percentage_rejects_out_of_range(value: int) -> None:
    task = TodoTask(EXPIRY, "Buy milk")
    task.update_completion_percentage(30)

    with pytest.raises(InvalidTaskStateError):
        task.update_completion_percentage(value)

    assert task.completion_percentage == 30


@pytest.mark.parametrize("value", [0, 100])
def test_update_completion_percentage_accepts_bounds(value: int) -> None:
    task = TodoTask(EXPIRY, "Buy milk")

    task.update_completion_percentage(value)

    assert task.completion_percentage == value
    assert task.is_done() is (value == 100)


def test_description_can_be_cleared() -> None:
    task = TodoTask(EXPIRY, "Buy milk", "two litres")

    task.update_description(None)

    assert task.description is None


def test_record_creation_only_once() -> None:
    task = TodoTask(EXPIRY, "Buy milk")
    stamp = datetime(2026, 10, 21, 8, 0, tzinfo=timezone.utc)

    task.record_creation(stamp)

    assert task.created_at == stamp
    with pytest.raises(InvalidTaskStateError):
        task.record_creation(stamp)


def test_restore_keeps_persisted_identity_and_state() -> None:
    audit = EntityAudit(
        created_at=datetime(2026, 10, 20, tzinfo=timezone.utc),
        updated_at=datetime(2026, 10, 21, tzinfo=timezone.utc),
    )

    task = TodoTask.restore(
        audit=audit,
        expiry_at=EXPIRY,
        title="Restored",
        description="from storage",
        completion_percentage=100,
    )

    assert task.id == audit.id
    assert task.created_at == audit.created_at
    assert task.updated_at == audit.updated_at
    assert task.is_done() is True
