import uvicorn

from taskapi.config import get_settings


def main() -> None:
    settings = get_settings()
    # Exits non-zero if the lifespan cannot reach the task store
    uvicorn.run(
        "taskapi.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
