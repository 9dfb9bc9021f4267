"""Pytest configuration and fixtures for render_config tests."""

import loguru
import pytest

from render_config.app import create_app
from render_config.config.settings import LogLevel, Settings
from render_config.domain import Environment, RenderOptions
from render_config.infrastructure.logging import reset_logging


@pytest.fixture(autouse=True)
def clean_logging():
    """Start and finish every test with no loguru sinks configured."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def test_settings(tmp_path):
    """Provide test-specific settings writing into a temp directory."""
    return Settings(
        environment=Environment.DEVELOPMENT,
        log_level=LogLevel.CRITICAL,  # Minimal logging during tests
        snapshot_path=tmp_path / ".render_config.kdl",
    )


@pytest.fixture
def test_app(test_settings):
    """Provide a test app with clean logging state."""
    return create_app(settings=test_settings)


@pytest.fixture
def mock_logger(mocker):
    """Provide a mock logger for testing that captures log calls."""
    logger = mocker.Mock(spec=loguru.logger)
    return logger


@pytest.fixture
def default_options():
    """RenderOptions with only the required bundle path set."""
    return RenderOptions.builder().pkg_path("/pkg/app").build()


@pytest.fixture
def dev_options():
    """RenderOptions for a development server on all interfaces."""
    return (
        RenderOptions.builder()
        .pkg_path("/pkg/app")
        .environment("development")
        .socket_address("0.0.0.0:8080")
        .reload_port(8081)
        .build()
    )
