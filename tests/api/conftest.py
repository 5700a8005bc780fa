from pathlib import Path
from typing import Any, Callable, Generator
import pytest
from fastapi.testclient import TestClient
from pytest_mock import MockerFixture

from taskapi.config import Settings
from taskapi.main import app as main_app


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    db_path: Path = tmp_path / "test_api.db"
    return Settings(
        TASK_STORE_BACKEND="postgres",
        POSTGRES_URL=f"sqlite:///{db_path}",
    )


@pytest.fixture(autouse=True)
def patch_settings(test_settings: Settings, mocker: MockerFixture) -> None:
    mocker.patch("taskapi.main.settings", test_settings)


@pytest.fixture
def test_client() -> Generator[TestClient, None, None]:
    with TestClient(main_app) as client:
        yield client


@pytest.fixture
def create_task(test_client: TestClient) -> Callable[..., dict[str, Any]]:
    """Helper fixture to create a task through the API."""

    def _create_task(**overrides: Any) -> dict[str, Any]:
        payload = {
            "title": "A",
            "description": "d",
            "dueDate": "2025-01-01",
            **overrides,
        }
        response = test_client.post("/tasks", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _create_task
