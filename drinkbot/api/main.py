"""FastAPI application entrypoint for the drink order bot."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from drinkbot.api.middleware.logging import LoggingMiddleware
from drinkbot.api.routes import health, slack
from drinkbot.core.config import Settings, get_settings
from drinkbot.core.exceptions import ApplicationError
from drinkbot.core.observability import setup_tracing
from drinkbot.integrations.slack.client import SlackMessenger
from drinkbot.models.catalog import ShopCatalog

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings: Settings = app.state.settings
    app.state.messenger = SlackMessenger(settings.SLACK_BOT_TOKEN)
    logger.warning("Slack request signature verification is disabled; inbound webhooks are not authenticated.")
    logger.info(
        "Serving %s order flow for shops: %s",
        settings.ORDER_FLOW,
        ", ".join(app.state.catalog.shop_names()),
    )
    yield


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application; `settings` defaults to the environment-derived configuration."""

    settings = settings or get_settings()

    app = FastAPI(
        title=settings.API_TITLE,
        version=settings.API_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.catalog = ShopCatalog.from_settings(settings.SHOP_CATALOG)

    setup_tracing(app, settings)
    app.add_middleware(LoggingMiddleware)

    app.include_router(slack.router)
    app.include_router(health.router)

    app.add_exception_handler(ApplicationError, handle_application_error)
    return app


async def handle_application_error(request: Request, exc: ApplicationError) -> JSONResponse:
    """Return standardized responses for application layer exceptions."""

    logger.error("%s %s failed with %s: %s", request.method, request.url.path, exc.code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message, "code": exc.code})
