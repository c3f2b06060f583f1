"""Tests for the Slack messenger wrapper."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from slack_sdk.errors import SlackApiError
from slack_sdk.web.async_client import AsyncWebClient

from provisioner.config import Settings
from provisioner.errors import MessagingError
from provisioner.slack.client import SlackMessenger


def _make_slack_api_error(error_code: str) -> SlackApiError:
    """Build a SlackApiError with a mock response carrying the given error code."""
    resp = MagicMock()
    resp.get = MagicMock(
        side_effect=lambda key, default="": error_code if key == "error" else default,
    )
    return SlackApiError(message=f"slack error: {error_code}", response=resp)


async def test_open_dialog_calls_views_open():
    """open_dialog forwards trigger id and view to views.open."""
    web_client = AsyncMock()
    messenger = SlackMessenger(Settings(_env_file=None), client=web_client)
    view = {"type": "modal"}

    await messenger.open_dialog("T123", view)

    web_client.views_open.assert_awaited_once_with(trigger_id="T123", view=view)


async def test_send_direct_message_posts_to_user():
    """send_direct_message posts to the user id as channel."""
    web_client = AsyncMock()
    messenger = SlackMessenger(Settings(_env_file=None), client=web_client)

    await messenger.send_direct_message("U123", "hello")

    web_client.chat_postMessage.assert_awaited_once_with(channel="U123", text="hello")


async def test_open_dialog_wraps_api_error():
    """Slack API errors surface as MessagingError."""
    web_client = AsyncMock()
    web_client.views_open.side_effect = _make_slack_api_error("expired_trigger_id")
    messenger = SlackMessenger(Settings(_env_file=None), client=web_client)

    with pytest.raises(MessagingError):
        await messenger.open_dialog("T123", {})


async def test_send_direct_message_wraps_timeout():
    """A timed-out call surfaces as MessagingError."""
    web_client = AsyncMock()
    web_client.chat_postMessage.side_effect = TimeoutError()
    messenger = SlackMessenger(Settings(_env_file=None), client=web_client)

    with pytest.raises(MessagingError):
        await messenger.send_direct_message("U123", "hello")


def test_default_client_uses_settings():
    """Without an injected client, an AsyncWebClient is built from settings."""
    settings = Settings(_env_file=None, slack_bot_token="xoxb-test", http_timeout=7)
    messenger = SlackMessenger(settings)

    assert isinstance(messenger._client, AsyncWebClient)
    assert messenger._client.token == "xoxb-test"
    assert messenger._client.timeout == 7
