"""Pydantic views over the parts of Slack's payloads the bot reads.

Only the fields used by the routers are declared; everything else Slack sends
is ignored. Envelope and inner event kinds are tagged unions: unknown tags
resolve to a catch-all model so callers can treat them as no-ops.
"""

from __future__ import annotations

from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import BaseModel, Discriminator, Field, Tag, TypeAdapter

URL_VERIFICATION = "url_verification"
EVENT_CALLBACK = "event_callback"
APP_MENTION = "app_mention"
BLOCK_ACTIONS = "block_actions"


# ---------------------------------------------------------------------------
# Events API
# ---------------------------------------------------------------------------


class AppMentionEvent(BaseModel):
    type: Literal["app_mention"]
    text: str = ""
    channel: str
    user: Optional[str] = None
    ts: Optional[str] = None


class GenericEvent(BaseModel):
    type: str = ""


def _tag_of(value: Any, known: tuple) -> str:
    kind = value.get("type") if isinstance(value, dict) else getattr(value, "type", None)
    return kind if kind in known else "unknown"


InnerEvent = Annotated[
    Union[
        Annotated[AppMentionEvent, Tag(APP_MENTION)],
        Annotated[GenericEvent, Tag("unknown")],
    ],
    Discriminator(lambda value: _tag_of(value, (APP_MENTION,))),
]


class UrlVerification(BaseModel):
    type: Literal["url_verification"]
    challenge: str
    token: Optional[str] = None


class EventCallback(BaseModel):
    type: Literal["event_callback"]
    event: InnerEvent
    team_id: Optional[str] = None
    api_app_id: Optional[str] = None
    event_id: Optional[str] = None


class UnknownEnvelope(BaseModel):
    type: str = ""


Envelope = Annotated[
    Union[
        Annotated[UrlVerification, Tag(URL_VERIFICATION)],
        Annotated[EventCallback, Tag(EVENT_CALLBACK)],
        Annotated[UnknownEnvelope, Tag("unknown")],
    ],
    Discriminator(lambda value: _tag_of(value, (URL_VERIFICATION, EVENT_CALLBACK))),
]

envelope_adapter: TypeAdapter = TypeAdapter(Envelope)


# ---------------------------------------------------------------------------
# Interactivity
# ---------------------------------------------------------------------------


class SelectedOption(BaseModel):
    value: str


class BlockAction(BaseModel):
    action_id: str
    block_id: str
    type: Optional[str] = None
    value: Optional[str] = None
    selected_option: Optional[SelectedOption] = None


class Channel(BaseModel):
    id: str
    name: Optional[str] = None


class User(BaseModel):
    id: str
    username: Optional[str] = None


class InteractionCallback(BaseModel):
    type: str
    actions: List[BlockAction] = Field(default_factory=list)
    response_url: Optional[str] = None
    channel: Optional[Channel] = None
    user: Optional[User] = None
    trigger_id: Optional[str] = None
