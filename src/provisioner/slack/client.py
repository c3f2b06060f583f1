"""Slack messaging collaborator.

Handlers depend on the ``Messenger`` protocol so they can be exercised with
test doubles. ``SlackMessenger`` is the production implementation on top of
slack_sdk's AsyncWebClient.
"""

import logging
from typing import Protocol

import aiohttp
from slack_sdk.errors import SlackClientError
from slack_sdk.web.async_client import AsyncWebClient

from provisioner.config import Settings
from provisioner.errors import MessagingError

logger = logging.getLogger(__name__)


class Messenger(Protocol):
    async def open_dialog(self, trigger_id: str, view: dict) -> None: ...

    async def send_direct_message(self, user_id: str, text: str) -> None: ...


class SlackMessenger:
    """Opens modals and sends direct messages as the bot user."""

    def __init__(self, settings: Settings, client: AsyncWebClient | None = None) -> None:
        self._client = client or AsyncWebClient(
            token=settings.slack_bot_token,
            timeout=settings.http_timeout,
        )

    async def open_dialog(self, trigger_id: str, view: dict) -> None:
        """Open a modal view for the interaction identified by trigger_id.

        Raises MessagingError if Slack rejects the call or is unreachable.
        """
        try:
            await self._client.views_open(trigger_id=trigger_id, view=view)
        except (SlackClientError, aiohttp.ClientError, TimeoutError) as exc:
            raise MessagingError(f"Failed to open view: {exc}") from exc

    async def send_direct_message(self, user_id: str, text: str) -> None:
        """Post a plain-text message to the user's DM channel.

        Raises MessagingError if Slack rejects the call or is unreachable.
        """
        try:
            await self._client.chat_postMessage(channel=user_id, text=text)
        except (SlackClientError, aiohttp.ClientError, TimeoutError) as exc:
            raise MessagingError(f"Failed to message {user_id}: {exc}") from exc
