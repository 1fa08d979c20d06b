"""Slack Events API handling: URL verification and ``@bot buy`` mentions."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

import pydantic

from drinkbot.core.exceptions import DecodeError, ValidationError
from drinkbot.integrations.slack.blocks import build_drink_menu, build_shop_menu
from drinkbot.integrations.slack.client import SlackMessenger
from drinkbot.models.catalog import ShopCatalog
from drinkbot.models.slack import AppMentionEvent, EventCallback, UrlVerification, envelope_adapter
from drinkbot.models.steps import OrderFlow

logger = logging.getLogger(__name__)

BUY_COMMAND = "buy"


@dataclass
class EventResult:
    """Outcome of one event delivery; `challenge` is set only for URL verification."""

    challenge: Optional[str] = None


class EventRouter:
    """Turns an inbound event envelope into a handshake reply or a new selection prompt."""

    def __init__(self, catalog: ShopCatalog, messenger: SlackMessenger, flow: OrderFlow = OrderFlow.CATALOG) -> None:
        self.catalog = catalog
        self.messenger = messenger
        self.flow = flow

    async def handle(self, body: bytes) -> EventResult:
        try:
            envelope = envelope_adapter.validate_json(body)
        except pydantic.ValidationError as exc:
            logger.error("Unable to parse Slack event envelope: %s", exc)
            raise DecodeError("Malformed event envelope") from exc

        if isinstance(envelope, UrlVerification):
            return EventResult(challenge=envelope.challenge)

        if isinstance(envelope, EventCallback) and isinstance(envelope.event, AppMentionEvent):
            await self.handle_mention(envelope.event)
        else:
            logger.debug("Ignoring Slack envelope of type %r", envelope.type)
        return EventResult()

    async def handle_mention(self, event: AppMentionEvent) -> None:
        tokens = event.text.split()
        if len(tokens) < self.flow.min_tokens:
            logger.warning("Number of messages is not enough: %r", event.text)
            raise ValidationError("Number of messages is not enough")

        command, args = tokens[1], tokens[2:]
        if command != BUY_COMMAND:
            logger.debug("Ignoring unsupported command %r", command)
            return

        await self.buy(event.channel, args)

    async def buy(self, channel: str, args: List[str]) -> None:
        if self.flow is OrderFlow.CATALOG:
            shop = args[0]
            drinks = self.catalog.drinks_for(shop)
            blocks = build_drink_menu(shop, drinks)
            text = f"What do you need from {shop}?"
        else:
            blocks = build_shop_menu(self.catalog.shop_names())
            text = "Which shop?"

        await self.messenger.post_message(channel, blocks, text)
        logger.info("Posted %s prompt to channel %s", self.flow.value, channel)
