"""Slack Block Kit builders."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from drinkbot.models.steps import ConfirmAction, Step, StepToken

Block = Dict[str, Any]

PRIMARY = "primary"
DANGER = "danger"


def plain_text(text: str) -> Dict[str, Any]:
    return {"type": "plain_text", "text": text, "emoji": False}


def build_text_section(text: str, *, markdown: bool = False) -> Block:
    element = {"type": "mrkdwn", "text": text} if markdown else plain_text(text)
    return {"type": "section", "text": element}


def build_option(value: str) -> Dict[str, Any]:
    return {"text": plain_text(value), "value": value}


def build_static_select(placeholder: str, options: Sequence[str], *, action_id: str) -> Dict[str, Any]:
    return {
        "type": "static_select",
        "action_id": action_id,
        "placeholder": plain_text(placeholder),
        "options": [build_option(value) for value in options],
    }


def build_button(label: str, *, action_id: str, value: str, style: Optional[str] = None) -> Dict[str, Any]:
    button: Dict[str, Any] = {
        "type": "button",
        "action_id": action_id,
        "text": plain_text(label),
        "value": value,
    }
    if style:
        button["style"] = style
    return button


def build_actions_block(block_id: str, *elements: Dict[str, Any]) -> Block:
    return {"type": "actions", "block_id": block_id, "elements": list(elements)}


def build_selection_prompt(prompt: str, placeholder: str, options: Sequence[str], token: StepToken) -> List[Block]:
    """A question followed by a single static select whose block id carries `token`."""

    return [
        build_text_section(prompt),
        build_actions_block(
            token.encode(),
            build_static_select(placeholder, options, action_id=token.step.value),
        ),
    ]


def build_shop_menu(shops: Sequence[str]) -> List[Block]:
    return build_selection_prompt("Which shop?", "Shop", shops, StepToken(step=Step.SELECT_SHOP))


def build_drink_menu(shop: str, drinks: Sequence[str]) -> List[Block]:
    return build_selection_prompt(
        "What do you need?",
        "Drink",
        drinks,
        StepToken(step=Step.SELECT_DRINK, shop=shop),
    )


def confirmation_text(drink: str, shop: str) -> str:
    return f"Can I buy `{drink}` from `{shop}` ?"


def build_confirmation(drink: str, shop: str) -> List[Block]:
    return [
        build_text_section(confirmation_text(drink, shop), markdown=True),
        build_actions_block(
            StepToken(step=Step.CONFIRM_TO_BUY).encode(),
            build_button("Ok", action_id=ConfirmAction.OK.value, value=drink, style=PRIMARY),
            build_button("Cancel", action_id=ConfirmAction.CANCEL.value, value=ConfirmAction.CANCEL.value, style=DANGER),
        ),
    ]
