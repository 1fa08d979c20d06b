"""Conversation step identifiers carried in Slack block ids.

Slack echoes a block's ``block_id`` back with every interaction, so the bot
stores the active step (and, once chosen, the shop) there instead of keeping
server-side state. The wire form is ``<step>`` or ``<step>=<shop>`` with the
shop percent-encoded, which keeps shop names containing ``=`` unambiguous.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional
from urllib.parse import quote, unquote

from pydantic import BaseModel, ConfigDict

from drinkbot.core.exceptions import UnknownStepError

SEPARATOR = "="


class Step(str, Enum):
    SELECT_SHOP = "select-shop"
    SELECT_DRINK = "select-drink"
    CONFIRM_TO_BUY = "confirm-to-buy"


class ConfirmAction(str, Enum):
    OK = "ok"
    CANCEL = "cancel"


class StepToken(BaseModel):
    model_config = ConfigDict(frozen=True)

    step: Step
    shop: Optional[str] = None

    def encode(self) -> str:
        if self.shop is None:
            return self.step.value
        return f"{self.step.value}{SEPARATOR}{quote(self.shop, safe='')}"

    @classmethod
    def decode(cls, raw: str) -> "StepToken":
        name, sep, shop = (raw or "").partition(SEPARATOR)
        try:
            step = Step(name)
        except ValueError as exc:
            raise UnknownStepError(f"Unrecognized step identifier: {raw!r}") from exc
        return cls(step=step, shop=unquote(shop) if sep else None)


class OrderFlow(str, Enum):
    """Which prompt a ``buy`` mention opens with."""

    CATALOG = "catalog"
    SHOP_SELECT = "shop_select"

    @property
    def min_tokens(self) -> int:
        # mention + command, plus the shop name when it is given up front
        return 3 if self is OrderFlow.CATALOG else 2
