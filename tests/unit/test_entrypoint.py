from pytest_mock import MockerFixture

from taskapi.__main__ import main
from taskapi.config import Settings


def test_main_serves_app_on_configured_address(mocker: MockerFixture) -> None:
    settings = Settings(
        _env_file=None,  # type: ignore[call-arg]
        HOST="127.0.0.1",
        PORT=8081,
        LOG_LEVEL="WARNING",
    )
    mocker.patch("taskapi.__main__.get_settings", return_value=settings)
    mock_run = mocker.patch("taskapi.__main__.uvicorn.run")

    main()

    mock_run.assert_called_once_with(
        "taskapi.main:app",
        host="127.0.0.1",
        port=8081,
        log_level="warning",
    )
