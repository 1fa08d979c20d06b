"""Slack webhook endpoints.

Inbound requests are not signature-verified.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import PlainTextResponse, Response

from drinkbot.api.dependencies import get_event_router, get_interaction_router
from drinkbot.integrations.slack.actions import InteractionRouter
from drinkbot.integrations.slack.events import EventRouter

router = APIRouter(prefix="/slack", tags=["slack"])


@router.post("/events", status_code=status.HTTP_200_OK)
async def slack_events(request: Request, events: EventRouter = Depends(get_event_router)) -> Response:
    """Slack event ingestion endpoint."""

    result = await events.handle(await request.body())
    if result.challenge is not None:
        return PlainTextResponse(result.challenge)
    return Response(status_code=status.HTTP_200_OK)


@router.post("/actions", status_code=status.HTTP_200_OK)
async def slack_actions(
    payload: Optional[str] = Form(None),
    interactions: InteractionRouter = Depends(get_interaction_router),
) -> Response:
    """Slack interactivity endpoint; Slack posts the callback JSON in the `payload` form field."""

    await interactions.handle(payload)
    return Response(status_code=status.HTTP_200_OK)
