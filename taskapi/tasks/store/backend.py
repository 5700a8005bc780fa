from taskapi.common.redis import create_redis_client
from taskapi.config import Settings
from taskapi.tasks.store.base import TaskStore
from taskapi.tasks.store.postgres.store import PostgresTaskStore
from taskapi.tasks.store.redis.store import RedisTaskStore


def get_task_store_backend(settings: Settings) -> TaskStore:
    if settings.TASK_STORE_BACKEND == "postgres":
        return PostgresTaskStore(
            database_url=settings.POSTGRES_URL,
        )
    elif settings.TASK_STORE_BACKEND == "redis":
        return RedisTaskStore(
            redis_client=create_redis_client(settings.REDIS_URL),
            key_prefix=settings.TASK_STORE_NAMESPACE,
        )
    else:
        raise ValueError(
            f"Unsupported task store backend: {settings.TASK_STORE_BACKEND}"
        )
