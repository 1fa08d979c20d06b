from __future__ import annotations

from fastapi import Depends, Request

from drinkbot.core.config import Settings
from drinkbot.integrations.slack.actions import InteractionRouter
from drinkbot.integrations.slack.client import SlackMessenger
from drinkbot.integrations.slack.events import EventRouter
from drinkbot.models.catalog import ShopCatalog
from drinkbot.models.steps import OrderFlow


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_catalog(request: Request) -> ShopCatalog:
    return request.app.state.catalog


def get_messenger(request: Request) -> SlackMessenger:
    return request.app.state.messenger


def get_event_router(
    settings: Settings = Depends(get_app_settings),
    catalog: ShopCatalog = Depends(get_catalog),
    messenger: SlackMessenger = Depends(get_messenger),
) -> EventRouter:
    return EventRouter(catalog, messenger, flow=OrderFlow(settings.ORDER_FLOW))


def get_interaction_router(
    catalog: ShopCatalog = Depends(get_catalog),
    messenger: SlackMessenger = Depends(get_messenger),
) -> InteractionRouter:
    return InteractionRouter(catalog, messenger)
