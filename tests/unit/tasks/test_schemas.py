from datetime import datetime, timezone
import pytest
from pydantic import ValidationError

from taskapi.tasks.schemas import (
    CreateTaskRequest,
    Task,
    TaskStatus,
    UpdateTaskRequest,
    parse_due_date,
)


def test_parse_due_date_date_only_is_midnight_utc() -> None:
    assert parse_due_date("2025-01-01") == datetime(2025, 1, 1, tzinfo=timezone.utc)


def test_parse_due_date_naive_datetime_is_utc() -> None:
    assert parse_due_date("2025-01-01T10:30:00") == datetime(
        2025, 1, 1, 10, 30, tzinfo=timezone.utc
    )


def test_parse_due_date_accepts_zulu_suffix() -> None:
    assert parse_due_date("2025-01-01T10:30:00Z") == datetime(
        2025, 1, 1, 10, 30, tzinfo=timezone.utc
    )


def test_parse_due_date_rejects_non_strings() -> None:
    with pytest.raises(ValueError):
        parse_due_date(20250101)


def test_create_request_defaults_status_to_pending() -> None:
    request = CreateTaskRequest.model_validate(
        {"title": "A", "description": "d", "dueDate": "2025-01-01"}
    )

    assert request.status == TaskStatus.PENDING
    assert request.due_date == datetime(2025, 1, 1, tzinfo=timezone.utc)


@pytest.mark.parametrize("missing_field", ["title", "description", "dueDate"])
def test_create_request_requires_fields(missing_field: str) -> None:
    payload = {"title": "A", "description": "d", "dueDate": "2025-01-01"}
    del payload[missing_field]

    with pytest.raises(ValidationError):
        CreateTaskRequest.model_validate(payload)


@pytest.mark.parametrize("empty_field", ["title", "description", "dueDate"])
def test_create_request_rejects_empty_fields(empty_field: str) -> None:
    payload = {"title": "A", "description": "d", "dueDate": "2025-01-01"}
    payload[empty_field] = ""

    with pytest.raises(ValidationError):
        CreateTaskRequest.model_validate(payload)


def test_create_request_rejects_unknown_status() -> None:
    with pytest.raises(ValidationError):
        CreateTaskRequest.model_validate(
            {
                "title": "A",
                "description": "d",
                "status": "InProgress",
                "dueDate": "2025-01-01",
            }
        )


def test_task_serializes_due_date_as_camel_case() -> None:
    task = Task(
        id="task-1",
        title="A",
        description="d",
        due_date=datetime(2025, 1, 1, tzinfo=timezone.utc),
    )

    data = task.model_dump(mode="json", by_alias=True)

    assert data["dueDate"].startswith("2025-01-01T00:00:00")
    assert data["status"] == "Pending"
    assert "due_date" not in data


def test_update_request_tracks_only_provided_fields() -> None:
    request = UpdateTaskRequest.model_validate({"status": "Completed"})

    assert request.model_fields_set == {"status"}
    assert request.status == TaskStatus.COMPLETED
    assert request.title is None
    assert request.due_date is None


def test_update_request_rejects_explicit_null() -> None:
    with pytest.raises(ValidationError) as exc:
        UpdateTaskRequest.model_validate({"dueDate": None})

    assert "'dueDate' cannot be null" in str(exc.value)


def test_update_request_rejects_empty_title() -> None:
    with pytest.raises(ValidationError):
        UpdateTaskRequest.model_validate({"title": ""})
