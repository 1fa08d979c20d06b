from .catalog import DEFAULT_SHOPS, ShopCatalog
from .slack import (
    AppMentionEvent,
    BlockAction,
    EventCallback,
    InteractionCallback,
    UnknownEnvelope,
    UrlVerification,
)
from .steps import ConfirmAction, OrderFlow, Step, StepToken

__all__ = [
    "AppMentionEvent",
    "BlockAction",
    "ConfirmAction",
    "DEFAULT_SHOPS",
    "EventCallback",
    "InteractionCallback",
    "OrderFlow",
    "ShopCatalog",
    "Step",
    "StepToken",
    "UnknownEnvelope",
    "UrlVerification",
]
