import logging
from datetime import datetime
from uuid import uuid4
from sqlalchemy import create_engine, text
from sqlalchemy.orm import Query, sessionmaker

from taskapi.common.exceptions import ResourceNotFoundException, ResourceType
from taskapi.tasks.filters import TaskFilter
from taskapi.tasks.schemas import Task, TaskStatus, UpdateTaskRequest
from taskapi.tasks.store.base import TaskStore
from taskapi.tasks.store.postgres.model import Base, TaskModel

logger = logging.getLogger(__name__)


class PostgresTaskStore(TaskStore):
    backend_name = "postgres"

    def __init__(self, database_url: str):
        self.engine = create_engine(database_url)
        self.Session = sessionmaker(bind=self.engine)
        Base.metadata.create_all(self.engine)

    def _to_task(self, model: TaskModel) -> Task:
        return Task(
            id=model.id,
            title=model.title,
            description=model.description,
            status=TaskStatus(model.status),
            due_date=model.due_date,
        )

    def _apply_filter(
        self, query: "Query[TaskModel]", task_filter: TaskFilter
    ) -> "Query[TaskModel]":
        if task_filter.status is not None:
            query = query.filter(TaskModel.status == task_filter.status)
        if task_filter.due_before is not None:
            query = query.filter(TaskModel.due_date <= task_filter.due_before)
        if task_filter.due_on is not None:
            query = query.filter(TaskModel.due_date == task_filter.due_on)
        return query

    def create_task(
        self,
        *,
        title: str,
        description: str,
        status: TaskStatus,
        due_date: datetime,
    ) -> Task:
        task_id = str(uuid4())

        with self.Session() as session:
            session.add(
                TaskModel(
                    id=task_id,
                    title=title,
                    description=description,
                    status=status.value,
                    due_date=due_date,
                )
            )
            session.commit()

        logger.debug(f"Created task {task_id}")
        return self.get_task(task_id)

    def get_task(self, task_id: str) -> Task:
        with self.Session() as session:
            task = session.get(TaskModel, task_id)

            if not task:
                raise ResourceNotFoundException(ResourceType.TASK, task_id)

            return self._to_task(task)

    def list_tasks(self, task_filter: TaskFilter) -> list[Task]:
        with self.Session() as session:
            query = self._apply_filter(session.query(TaskModel), task_filter)
            tasks = query.order_by(TaskModel.due_date, TaskModel.id).all()
            return [self._to_task(task) for task in tasks]

    def update_task(self, task_id: str, updates: UpdateTaskRequest) -> Task:
        with self.Session() as session:
            task = session.get(TaskModel, task_id)

            if not task:
                raise ResourceNotFoundException(ResourceType.TASK, task_id)

            if updates.title is not None:
                task.title = updates.title
            if updates.description is not None:
                task.description = updates.description
            if updates.status is not None:
                task.status = updates.status.value
            if updates.due_date is not None:
                task.due_date = updates.due_date

            session.commit()

            return self.get_task(task_id)

    def delete_task(self, task_id: str) -> None:
        with self.Session() as session:
            task = session.get(TaskModel, task_id)

            if not task:
                raise ResourceNotFoundException(ResourceType.TASK, task_id)

            session.delete(task)
            session.commit()

    def ping(self) -> None:
        with self.engine.connect() as connection:
            connection.execute(text("SELECT 1"))

    def close(self) -> None:
        self.engine.dispose()
