import logging
from datetime import datetime
from typing import TypedDict
from uuid import uuid4
from redis.client import Pipeline

from taskapi.common.exceptions import ResourceNotFoundException, ResourceType
from taskapi.common.redis import RedisClient
from taskapi.tasks.filters import TaskFilter
from taskapi.tasks.schemas import Task, TaskStatus, UpdateTaskRequest
from taskapi.tasks.store.base import TaskStore

logger = logging.getLogger(__name__)


class UpdateMapping(TypedDict, total=False):
    title: str
    description: str
    status: str
    due_date: str


class RedisTaskStore(TaskStore):
    backend_name = "redis"

    def __init__(self, *, redis_client: RedisClient, key_prefix: str):
        self.client = redis_client
        self.key_prefix = key_prefix

    def _get_task_key(self, task_id: str) -> str:
        return f"{self.key_prefix}:{task_id}"

    def _to_task(self, task: dict[str, str]) -> Task:
        return Task(
            id=task["id"],
            title=task["title"],
            description=task["description"],
            status=TaskStatus(task["status"]),
            due_date=datetime.fromisoformat(task["due_date"]),
        )

    def create_task(
        self,
        *,
        title: str,
        description: str,
        status: TaskStatus,
        due_date: datetime,
    ) -> Task:
        task_id = str(uuid4())

        self.client.hset(
            self._get_task_key(task_id),
            mapping={
                "id": task_id,
                "title": title,
                "description": description,
                "status": status.value,
                "due_date": due_date.isoformat(),
            },
        )

        logger.debug(f"Created task {task_id}")
        return self.get_task(task_id)

    def get_task(self, task_id: str) -> Task:
        task = self.client.hgetall(self._get_task_key(task_id))

        if not task:
            raise ResourceNotFoundException(ResourceType.TASK, task_id)

        return self._to_task(task)

    def list_tasks(self, task_filter: TaskFilter) -> list[Task]:
        tasks: list[Task] = []
        for key in self.client.scan_iter(match=f"{self.key_prefix}:*"):
            task_data = self.client.hgetall(key)
            # Key may have been deleted between SCAN and HGETALL
            if not task_data:
                continue
            task = self._to_task(task_data)
            if task_filter.matches(task):
                tasks.append(task)
        return sorted(tasks, key=lambda task: (task.due_date, task.id))

    def update_task(self, task_id: str, updates: UpdateTaskRequest) -> Task:
        task_key = self._get_task_key(task_id)

        update_mapping: UpdateMapping = {}

        if updates.title is not None:
            update_mapping["title"] = updates.title

        if updates.description is not None:
            update_mapping["description"] = updates.description

        if updates.status is not None:
            update_mapping["status"] = updates.status.value

        if updates.due_date is not None:
            update_mapping["due_date"] = updates.due_date.isoformat()

        def apply_update(pipe: Pipeline) -> None:
            # Runs under WATCH on task_key: a concurrent delete aborts the HSET
            if not pipe.exists(task_key):
                raise ResourceNotFoundException(ResourceType.TASK, task_id)
            pipe.multi()
            if update_mapping:
                pipe.hset(task_key, mapping=update_mapping)  # type: ignore
            pipe.hgetall(task_key)

        results = self.client.transaction(apply_update, task_key)

        return self._to_task(results[-1])

    def delete_task(self, task_id: str) -> None:
        deleted = self.client.delete(self._get_task_key(task_id))

        if not deleted:
            raise ResourceNotFoundException(ResourceType.TASK, task_id)

    def ping(self) -> None:
        self.client.ping()

    def close(self) -> None:
        self.client.close()
