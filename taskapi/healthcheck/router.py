from typing import Any
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from taskapi.tasks.store.base import TaskStore
from taskapi.tasks.store.dependencies import get_task_store

router = APIRouter()


@router.get(
    "/healthcheck",
    tags=["Healthcheck"],
    status_code=status.HTTP_200_OK,
    responses={
        200: {
            "description": "Healthcheck status",
            "content": {
                "application/json": {
                    "example": {
                        "api": {"status": "ok"},
                        "store": {"status": "ok", "backend": "postgres"},
                    }
                }
            },
        },
        503: {
            "description": "Service unavailable",
            "content": {
                "application/json": {
                    "example": {
                        "api": {"status": "ok"},
                        "store": {
                            "status": "error",
                            "backend": "postgres",
                            "message": "Connection error",
                        },
                    }
                }
            },
        },
    },
)
def healthcheck(task_store: TaskStore = Depends(get_task_store)) -> JSONResponse:
    health_status: dict[str, Any] = {
        "api": {"status": "ok"},
        "store": {"status": "ok", "backend": task_store.backend_name},
    }

    try:
        task_store.ping()
    except Exception as e:
        health_status["store"].update({"status": "error", "message": str(e)})
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=health_status
        )

    return JSONResponse(status_code=status.HTTP_200_OK, content=health_status)
