"""Shared test fixtures."""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from provisioner.app import create_app
from provisioner.config import Settings
from provisioner.dependencies import get_messenger, get_pipeline_client
from provisioner.models.pipeline import PipelineTriggerResult

TEST_SIGNING_SECRET = "test_signing_secret_1234"


@pytest.fixture
def settings() -> Settings:
    """Fully configured Settings that ignore any local .env file."""
    return Settings(
        _env_file=None,
        slack_bot_token="xoxb-test",
        slack_signing_secret=TEST_SIGNING_SECRET,
        gitlab_trigger_token="glptt-test",
    )


@pytest.fixture
def messenger() -> AsyncMock:
    """Stand-in for SlackMessenger recording open_dialog / send_direct_message calls."""
    return AsyncMock()


@pytest.fixture
def pipeline_client() -> AsyncMock:
    """Stand-in for PipelineTriggerClient returning a created pipeline."""
    client = AsyncMock()
    client.trigger.return_value = PipelineTriggerResult(
        id=1, status="created", web_url="https://gitlab.example.com/pipelines/1"
    )
    return client


@pytest.fixture
def client(settings: Settings, messenger: AsyncMock, pipeline_client: AsyncMock):
    """TestClient with lifespan run and outbound collaborators replaced."""
    app = create_app(settings)
    app.dependency_overrides[get_messenger] = lambda: messenger
    app.dependency_overrides[get_pipeline_client] = lambda: pipeline_client
    with TestClient(app) as test_client:
        yield test_client
