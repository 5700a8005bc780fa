from pathlib import Path
import pytest
from fastapi.testclient import TestClient
from pytest_mock import MockerFixture

from taskapi.config import Settings
from taskapi.main import app as main_app
from taskapi.tasks.store.postgres.store import PostgresTaskStore


class TestHealthcheck:
    def test_healthcheck_success(self, test_client: TestClient) -> None:
        response = test_client.get("/healthcheck")

        assert response.status_code == 200
        assert response.json() == {
            "api": {"status": "ok"},
            "store": {"status": "ok", "backend": "postgres"},
        }

    def test_healthcheck_store_down(
        self, test_client: TestClient, mocker: MockerFixture
    ) -> None:
        mocker.patch.object(
            PostgresTaskStore, "ping", side_effect=Exception("Connection error")
        )

        response = test_client.get("/healthcheck")

        assert response.status_code == 503
        data = response.json()
        assert data["api"]["status"] == "ok"
        assert data["store"]["status"] == "error"
        assert data["store"]["message"] == "Connection error"


def test_startup_fails_when_store_unreachable(
    tmp_path: Path, mocker: MockerFixture
) -> None:
    unreachable = Settings(
        TASK_STORE_BACKEND="postgres",
        POSTGRES_URL=f"sqlite:///{tmp_path / 'missing-dir' / 'tasks.db'}",
    )
    mocker.patch("taskapi.main.settings", unreachable)

    with pytest.raises(RuntimeError, match="Failed to connect to the task store"):
        with TestClient(main_app):
            pass


def test_unmatched_route_returns_404(test_client: TestClient) -> None:
    assert test_client.get("/nothing-here").status_code == 404
