import logging

from taskapi.common.exceptions import (
    ResourceNotFoundException,
    ResourceType,
    ValidationException,
)
from taskapi.decorators import translate_storage_errors
from taskapi.tasks.filters import build_due_date_filter, build_task_filter
from taskapi.tasks.schemas import (
    CreateTaskRequest,
    Task,
    TaskStatus,
    UpdateTaskRequest,
)
from taskapi.tasks.store.base import TaskStore

logger = logging.getLogger(__name__)


class TaskService:
    def __init__(self, task_store: TaskStore):
        self.task_store = task_store

    @translate_storage_errors("Error saving task.")
    def create_task(self, task_input: CreateTaskRequest) -> Task:
        task = self.task_store.create_task(
            title=task_input.title,
            description=task_input.description,
            status=task_input.status,
            due_date=task_input.due_date,
        )
        logger.info(f"Task '{task.id}' created")
        return task

    @translate_storage_errors("Error fetching tasks.")
    def list_tasks(
        self, status: str | None = None, due_date: str | None = None
    ) -> list[Task]:
        task_filter = build_task_filter(status=status, due_date=due_date)
        return self.task_store.list_tasks(task_filter)

    @translate_storage_errors("Error fetching task.")
    def get_task(self, task_id: str) -> Task:
        return self.task_store.get_task(task_id)

    @translate_storage_errors("Error updating task.")
    def update_task(self, task_id: str, task_input: UpdateTaskRequest) -> Task:
        task = self.task_store.update_task(task_id, task_input)
        logger.info(f"Task '{task_id}' updated")
        return task

    @translate_storage_errors("Error deleting task.")
    def delete_task(self, task_id: str) -> None:
        self.task_store.delete_task(task_id)
        logger.info(f"Task '{task_id}' deleted")

    @translate_storage_errors("Error fetching tasks by status.")
    def list_tasks_by_status(self, status: str) -> list[Task]:
        if status not in TaskStatus._value2member_map_:
            raise ValidationException(
                'Invalid status. Status must be "Pending" or "Completed".'
            )

        tasks = self.task_store.list_tasks(build_task_filter(status=status))

        if not tasks:
            raise ResourceNotFoundException(
                ResourceType.TASK, status, message=f"No tasks found with status {status}."
            )

        return tasks

    @translate_storage_errors("Error fetching tasks by due date.")
    def list_tasks_by_due_date(self, due_date: str) -> list[Task]:
        tasks = self.task_store.list_tasks(build_due_date_filter(due_date))

        if not tasks:
            raise ResourceNotFoundException(
                ResourceType.TASK,
                due_date,
                message=f"No tasks found with this due date {due_date}.",
            )

        return tasks
