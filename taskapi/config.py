from functools import lru_cache
from typing import Annotated, Any, Literal
from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    # Application Configuration
    API_NAME: str = "Task API"
    API_SUMMARY: str = "Create, update, filter and delete tasks"
    API_VERSION: str = "v0.1.x"

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    HOST: str = "0.0.0.0"
    PORT: int = 3000

    CORS_ENABLED: bool = False
    CORS_ORIGINS: Annotated[list[str], NoDecode] = ["*"]

    # Store Configuration
    TASK_STORE_BACKEND: Literal["postgres", "redis"] = "postgres"
    TASK_STORE_NAMESPACE: str = "tasks"

    REDIS_URL: str = "redis://localhost:6379"
    POSTGRES_URL: str = "postgresql://localhost:5432/tasks"  # Assumes a local Postgres db named 'tasks' exists

    @field_validator("LOG_LEVEL", mode="before")
    def normalize_log_level(cls, v: Any):
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("CORS_ORIGINS", mode="before")
    def validate_list_from_string(cls, v: Any):
        if isinstance(v, str):
            return [item.strip() for item in v.split(",")]
        return v

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings():
    return Settings()
