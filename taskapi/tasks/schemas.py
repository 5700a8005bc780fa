from datetime import date, datetime, timezone
from enum import Enum
from typing import Any
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class TaskStatus(str, Enum):
    PENDING = "Pending"
    COMPLETED = "Completed"


def parse_due_date(value: Any) -> datetime:
    """
    Parse a due date into a timezone-aware UTC datetime.

    Accepts ISO 8601 dates ("2025-01-01") and datetimes. Date-only values and
    naive datetimes are taken to be UTC.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError as e:
            raise ValueError(
                f"Invalid dueDate '{value}'. Expected an ISO 8601 date or datetime."
            ) from e
    else:
        raise ValueError("dueDate must be an ISO 8601 date or datetime string")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


class TaskFields(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    status: TaskStatus = TaskStatus.PENDING
    due_date: datetime = Field(..., alias="dueDate")

    @field_validator("due_date", mode="before")
    def validate_due_date(cls, value: Any):
        return parse_due_date(value)


class Task(TaskFields):
    id: str


class CreateTaskRequest(TaskFields):
    pass


class UpdateTaskRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str | None = Field(default=None, min_length=1)
    description: str | None = Field(default=None, min_length=1)
    status: TaskStatus | None = None
    due_date: datetime | None = Field(default=None, alias="dueDate")

    @field_validator("due_date", mode="before")
    def validate_due_date(cls, value: Any):
        if value is None:
            return value
        return parse_due_date(value)

    @model_validator(mode="after")
    def reject_explicit_nulls(self):
        # Omitted fields keep their stored value; an explicit null would erase
        # a required field.
        for name in self.model_fields_set:
            if getattr(self, name) is None:
                field_name = type(self).model_fields[name].alias or name
                raise ValueError(f"'{field_name}' cannot be null")
        return self
