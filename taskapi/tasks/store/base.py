from abc import ABC, abstractmethod
from datetime import datetime

from taskapi.tasks.filters import TaskFilter
from taskapi.tasks.schemas import Task, TaskStatus, UpdateTaskRequest


class TaskStore(ABC):
    backend_name: str

    @abstractmethod
    def create_task(
        self,
        *,
        title: str,
        description: str,
        status: TaskStatus,
        due_date: datetime,
    ) -> Task:
        pass

    @abstractmethod
    def get_task(self, task_id: str) -> Task:
        pass

    @abstractmethod
    def list_tasks(self, task_filter: TaskFilter) -> list[Task]:
        pass

    @abstractmethod
    def update_task(self, task_id: str, updates: UpdateTaskRequest) -> Task:
        pass

    @abstractmethod
    def delete_task(self, task_id: str) -> None:
        pass

    @abstractmethod
    def ping(self) -> None:
        pass

    @abstractmethod
    def close(self) -> None:
        pass
