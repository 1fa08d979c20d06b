"""Outbound Slack messaging."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Dict, List, Optional

import aiohttp
from slack_sdk.errors import SlackClientError
from slack_sdk.web.async_client import AsyncWebClient
from slack_sdk.webhook.async_client import AsyncWebhookClient

from drinkbot.core.exceptions import UpstreamSendError
from drinkbot.utils.monitoring import observe_slack_message

logger = logging.getLogger(__name__)


class SlackMessenger:
    """Posts new prompts to channels and replaces prompts through interaction response URLs.

    Replacements always go to the ``response_url`` Slack attaches to an
    interaction; channel ids are only used for brand new messages.
    """

    def __init__(
        self,
        token: str,
        *,
        client: Optional[AsyncWebClient] = None,
        webhook_factory: Callable[[str], AsyncWebhookClient] = AsyncWebhookClient,
    ) -> None:
        self.client = client or AsyncWebClient(token=token)
        self._webhook_factory = webhook_factory

    async def post_message(self, channel: str, blocks: List[Dict[str, Any]], text: str) -> None:
        try:
            await self.client.chat_postMessage(channel=channel, text=text, blocks=blocks)
        except (SlackClientError, aiohttp.ClientError, asyncio.TimeoutError) as exc:
            observe_slack_message("post", ok=False)
            logger.error("Failed to post Slack message to %s: %s", channel, exc)
            raise UpstreamSendError(f"Failed to post message: {exc}") from exc
        observe_slack_message("post", ok=True)

    async def replace_message(self, response_url: str, blocks: List[Dict[str, Any]], text: str) -> None:
        webhook = self._webhook_factory(response_url)
        try:
            response = await webhook.send(text=text, blocks=blocks, replace_original=True)
        except (SlackClientError, aiohttp.ClientError, asyncio.TimeoutError) as exc:
            observe_slack_message("replace", ok=False)
            logger.error("Failed to replace Slack message: %s", exc)
            raise UpstreamSendError(f"Failed to replace message: {exc}") from exc

        if not 200 <= response.status_code < 300:
            observe_slack_message("replace", ok=False)
            logger.error("Slack rejected message replacement: status=%s body=%s", response.status_code, response.body)
            raise UpstreamSendError(f"Slack responded with status {response.status_code}")
        observe_slack_message("replace", ok=True)
