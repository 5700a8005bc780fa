from fastapi import APIRouter, Depends, Query, status

from taskapi.common.exceptions import (
    ResourceType,
    resource_not_found_response,
    validation_error_response,
)
from taskapi.tasks.dependencies import get_task_service
from taskapi.tasks.schemas import CreateTaskRequest, Task, UpdateTaskRequest
from taskapi.tasks.service import TaskService


router = APIRouter(
    prefix="/tasks",
    tags=["Tasks"],
)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    responses={**validation_error_response},
)
def create_task(
    task_input: CreateTaskRequest,
    task_service: TaskService = Depends(get_task_service),
) -> Task:
    return task_service.create_task(task_input)


@router.get("", responses={**validation_error_response})
def list_tasks(
    task_status: str | None = Query(default=None, alias="status"),
    due_date: str | None = Query(default=None, alias="dueDate"),
    task_service: TaskService = Depends(get_task_service),
) -> list[Task]:
    return task_service.list_tasks(status=task_status, due_date=due_date)


# Registered ahead of "/{task_id}" so these paths are not read as ids
@router.get(
    "/status/{task_status}",
    responses={
        **validation_error_response,
        **resource_not_found_response(ResourceType.TASK),
    },
)
def list_tasks_by_status(
    task_status: str,
    task_service: TaskService = Depends(get_task_service),
) -> list[Task]:
    return task_service.list_tasks_by_status(task_status)


@router.get(
    "/dueDate/{due_date}",
    responses={
        **validation_error_response,
        **resource_not_found_response(ResourceType.TASK),
    },
)
def list_tasks_by_due_date(
    due_date: str,
    task_service: TaskService = Depends(get_task_service),
) -> list[Task]:
    return task_service.list_tasks_by_due_date(due_date)


@router.get("/{task_id}", responses={**resource_not_found_response(ResourceType.TASK)})
def get_task(
    task_id: str, task_service: TaskService = Depends(get_task_service)
) -> Task:
    return task_service.get_task(task_id)


@router.put(
    "/{task_id}",
    responses={
        **validation_error_response,
        **resource_not_found_response(ResourceType.TASK),
    },
)
def update_task(
    task_id: str,
    task_input: UpdateTaskRequest,
    task_service: TaskService = Depends(get_task_service),
) -> Task:
    return task_service.update_task(task_id, task_input)


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={**resource_not_found_response(ResourceType.TASK)},
)
def delete_task(
    task_id: str, task_service: TaskService = Depends(get_task_service)
):
    task_service.delete_task(task_id)
