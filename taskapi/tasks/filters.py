from datetime import datetime
from pydantic import BaseModel

from taskapi.common.exceptions import ValidationException
from taskapi.tasks.schemas import Task, parse_due_date


class TaskFilter(BaseModel):
    """
    Storage-agnostic predicate over tasks. Every field that is set must match;
    an empty filter matches every task.
    """

    status: str | None = None
    due_before: datetime | None = None
    due_on: datetime | None = None

    def is_empty(self) -> bool:
        return self.status is None and self.due_before is None and self.due_on is None

    def matches(self, task: Task) -> bool:
        if self.status is not None and task.status.value != self.status:
            return False
        if self.due_before is not None and task.due_date > self.due_before:
            return False
        if self.due_on is not None and task.due_date != self.due_on:
            return False
        return True


def _parse_due_date_param(due_date: str) -> datetime:
    try:
        return parse_due_date(due_date)
    except ValueError as e:
        raise ValidationException(str(e)) from e


def build_task_filter(
    status: str | None = None, due_date: str | None = None
) -> TaskFilter:
    # status is matched as given; an unknown value simply matches nothing
    task_filter = TaskFilter()
    if status:
        task_filter.status = status
    if due_date:
        task_filter.due_before = _parse_due_date_param(due_date)
    return task_filter


def build_due_date_filter(due_date: str) -> TaskFilter:
    return TaskFilter(due_on=_parse_due_date_param(due_date))
