import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from taskapi.common.exceptions import (
    ResourceNotFoundException,
    StorageException,
    ValidationException,
    internal_error_response,
    request_validation_exception_handler,
    resource_not_found_handler,
    storage_exception_handler,
    unexpected_exception_handler,
    validation_error_handler,
)
from taskapi.config import get_settings
from taskapi.healthcheck.router import router as health_router
from taskapi.tasks.router import router as tasks_router
from taskapi.tasks.store.backend import get_task_store_backend

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Connecting to {settings.TASK_STORE_BACKEND} task store")
    try:
        task_store = get_task_store_backend(settings)
        task_store.ping()
    except Exception as e:
        logger.error(f"Task store connection error: {e}")
        raise RuntimeError("Failed to connect to the task store") from e

    logger.info("Task store connected successfully")
    app.state.task_store = task_store
    yield
    task_store.close()


app = FastAPI(
    title=settings.API_NAME,
    summary=settings.API_SUMMARY,
    lifespan=lifespan,
    responses={
        **internal_error_response,
    },
    version=settings.API_VERSION,
)

if settings.CORS_ENABLED:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.exception_handler(RequestValidationError)(request_validation_exception_handler)
app.exception_handler(ValidationException)(validation_error_handler)
app.exception_handler(ResourceNotFoundException)(resource_not_found_handler)
app.exception_handler(StorageException)(storage_exception_handler)
app.exception_handler(Exception)(unexpected_exception_handler)


app.include_router(health_router)
app.include_router(tasks_router)
