import json

import pytest

from drinkbot.core.exceptions import DecodeError, UnknownShopError, UpstreamSendError, ValidationError
from drinkbot.integrations.slack.events import EventRouter
from drinkbot.models.steps import OrderFlow, StepToken

from helpers import mention_envelope


def _menu_options(blocks):
    select = blocks[1]["elements"][0]
    return [option["value"] for option in select["options"]]


@pytest.mark.asyncio
async def test_url_verification_echoes_challenge(catalog, messenger):
    router = EventRouter(catalog, messenger)
    body = json.dumps({"type": "url_verification", "token": "t", "challenge": "abc123"}).encode()

    first = await router.handle(body)
    second = await router.handle(body)

    assert first.challenge == second.challenge == "abc123"
    assert messenger.sent == 0


@pytest.mark.asyncio
async def test_buy_from_shop_offers_its_drinks(catalog, messenger):
    router = EventRouter(catalog, messenger, flow=OrderFlow.CATALOG)

    await router.handle(json.dumps(mention_envelope("<@U0BOT> buy Starbucks")).encode())

    assert len(messenger.posted) == 1
    posted = messenger.posted[0]
    assert posted["channel"] == "C0123"
    assert set(_menu_options(posted["blocks"])) == {
        "Caramel Frappucino",
        "Java Chip Frappuccino",
        "White Chocolate Mocha",
    }
    assert StepToken.decode(posted["blocks"][1]["block_id"]).shop == "Starbucks"


@pytest.mark.asyncio
async def test_buy_from_unknown_shop_posts_nothing(catalog, messenger):
    router = EventRouter(catalog, messenger, flow=OrderFlow.CATALOG)

    with pytest.raises(UnknownShopError):
        await router.handle(json.dumps(mention_envelope("<@U0BOT> buy Foo")).encode())
    assert messenger.sent == 0


@pytest.mark.asyncio
async def test_shop_select_flow_lists_shops_and_ignores_arguments(catalog, messenger):
    router = EventRouter(catalog, messenger, flow=OrderFlow.SHOP_SELECT)

    await router.handle(json.dumps(mention_envelope("<@U0BOT> buy")).encode())
    await router.handle(json.dumps(mention_envelope("<@U0BOT> buy Starbucks please")).encode())

    assert len(messenger.posted) == 2
    for posted in messenger.posted:
        assert set(_menu_options(posted["blocks"])) == {"Starbucks", "Veloce", "Doutor"}
        assert posted["blocks"][1]["block_id"] == "select-shop"


@pytest.mark.asyncio
@pytest.mark.parametrize("flow,text", [(OrderFlow.CATALOG, "<@U0BOT> buy"), (OrderFlow.SHOP_SELECT, "<@U0BOT>")])
async def test_too_few_tokens_is_rejected(catalog, messenger, flow, text):
    router = EventRouter(catalog, messenger, flow=flow)

    with pytest.raises(ValidationError):
        await router.handle(json.dumps(mention_envelope(text)).encode())
    assert messenger.sent == 0


@pytest.mark.asyncio
async def test_unknown_command_is_ignored(catalog, messenger):
    router = EventRouter(catalog, messenger)

    result = await router.handle(json.dumps(mention_envelope("<@U0BOT> sell Starbucks")).encode())

    assert result.challenge is None
    assert messenger.sent == 0


@pytest.mark.asyncio
async def test_malformed_body_is_a_decode_error(catalog, messenger):
    router = EventRouter(catalog, messenger)

    with pytest.raises(DecodeError):
        await router.handle(b"{not json")
    with pytest.raises(DecodeError):
        await router.handle(json.dumps({"type": "url_verification"}).encode())


@pytest.mark.asyncio
async def test_send_failure_propagates(catalog, failing_messenger):
    router = EventRouter(catalog, failing_messenger)

    with pytest.raises(UpstreamSendError):
        await router.handle(json.dumps(mention_envelope("<@U0BOT> buy Veloce")).encode())
