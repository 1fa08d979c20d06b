"""Slack interactivity handling: advances the order flow by one step per callback."""

from __future__ import annotations

import logging
from typing import Optional

import pydantic

from drinkbot.core.exceptions import DecodeError, ValidationError
from drinkbot.integrations.slack.blocks import build_confirmation, build_drink_menu, confirmation_text
from drinkbot.integrations.slack.client import SlackMessenger
from drinkbot.models.catalog import ShopCatalog
from drinkbot.models.slack import BLOCK_ACTIONS, BlockAction, InteractionCallback
from drinkbot.models.steps import ConfirmAction, Step, StepToken

logger = logging.getLogger(__name__)


class InteractionRouter:
    """Routes block actions by the step token stored in the originating block id."""

    def __init__(self, catalog: ShopCatalog, messenger: SlackMessenger) -> None:
        self.catalog = catalog
        self.messenger = messenger

    async def handle(self, raw_payload: Optional[str]) -> None:
        payload = self.parse(raw_payload)

        if payload.type != BLOCK_ACTIONS:
            logger.debug("Ignoring interaction of type %r", payload.type)
            return

        if not payload.actions:
            logger.warning("Interaction carried no block actions")
            raise ValidationError("No block actions in interaction payload")

        action = payload.actions[0]
        token = StepToken.decode(action.block_id)

        if token.step is Step.SELECT_SHOP:
            await self.select_shop(payload, action)
        elif token.step is Step.SELECT_DRINK:
            await self.select_drink(payload, action, token)
        elif token.step is Step.CONFIRM_TO_BUY:
            self.confirm(action)

    @staticmethod
    def parse(raw_payload: Optional[str]) -> InteractionCallback:
        if not raw_payload:
            raise DecodeError("Missing interaction payload")
        try:
            return InteractionCallback.model_validate_json(raw_payload)
        except pydantic.ValidationError as exc:
            logger.error("Unable to parse interaction payload: %s", exc)
            raise DecodeError("Malformed interaction payload") from exc

    async def select_shop(self, payload: InteractionCallback, action: BlockAction) -> None:
        shop = _selected_value(action)
        drinks = self.catalog.drinks_for(shop)
        await self.messenger.replace_message(
            _response_url(payload),
            build_drink_menu(shop, drinks),
            f"What do you need from {shop}?",
        )

    async def select_drink(self, payload: InteractionCallback, action: BlockAction, token: StepToken) -> None:
        drink = _selected_value(action)
        if not token.shop:
            raise ValidationError("Drink selection does not name a shop")
        await self.messenger.replace_message(
            _response_url(payload),
            build_confirmation(drink, token.shop),
            confirmation_text(drink, token.shop),
        )

    def confirm(self, action: BlockAction) -> None:
        try:
            choice = ConfirmAction(action.action_id)
        except ValueError as exc:
            raise ValidationError(f"Unrecognized confirmation action {action.action_id!r}") from exc

        # Neither purchasing nor re-prompting is wired up yet.
        if choice is ConfirmAction.OK:
            logger.info("Order confirmed for %r", action.value)
        else:
            logger.info("Order cancelled")


def _selected_value(action: BlockAction) -> str:
    if action.selected_option is None:
        raise ValidationError(f"Action {action.action_id!r} has no selected option")
    return action.selected_option.value


def _response_url(payload: InteractionCallback) -> str:
    if not payload.response_url:
        raise ValidationError("Interaction payload has no response_url")
    return payload.response_url
