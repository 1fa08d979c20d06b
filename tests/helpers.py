import json
from typing import Any, Dict, List, Optional

from fastapi.testclient import TestClient

from drinkbot.api.dependencies import get_messenger
from drinkbot.api.main import create_app
from drinkbot.core.config import Settings
from drinkbot.core.exceptions import UpstreamSendError


class StubMessenger:
    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.posted: List[Dict[str, Any]] = []
        self.replaced: List[Dict[str, Any]] = []

    async def post_message(self, channel, blocks, text):
        if self.fail:
            raise UpstreamSendError("channel_not_found")
        self.posted.append({"channel": channel, "blocks": blocks, "text": text})

    async def replace_message(self, response_url, blocks, text):
        if self.fail:
            raise UpstreamSendError("expired_url")
        self.replaced.append({"response_url": response_url, "blocks": blocks, "text": text})

    @property
    def sent(self) -> int:
        return len(self.posted) + len(self.replaced)


def mention_envelope(text: str, channel: str = "C0123") -> Dict[str, Any]:
    return {
        "type": "event_callback",
        "team_id": "T0001",
        "event": {"type": "app_mention", "text": text, "channel": channel, "user": "U0001", "ts": "1700000000.0001"},
    }


def block_actions_payload(
    block_id: str,
    *,
    action_id: str = "select-drink",
    selected: Optional[str] = None,
    value: Optional[str] = None,
) -> Dict[str, Any]:
    action: Dict[str, Any] = {"action_id": action_id, "block_id": block_id, "type": "static_select"}
    if selected is not None:
        action["selected_option"] = {"text": {"type": "plain_text", "text": selected}, "value": selected}
    if value is not None:
        action["type"] = "button"
        action["value"] = value
    return {
        "type": "block_actions",
        "user": {"id": "U0001", "username": "alice"},
        "channel": {"id": "C0123", "name": "orders"},
        "response_url": "https://hooks.slack.com/actions/T0001/1/abc",
        "actions": [action],
    }


def form_payload(payload: Dict[str, Any]) -> Dict[str, str]:
    return {"payload": json.dumps(payload)}


def build_client(messenger: StubMessenger, **overrides) -> TestClient:
    settings = Settings(SLACK_BOT_TOKEN="xoxb-test", **overrides)
    app = create_app(settings)
    app.dependency_overrides[get_messenger] = lambda: messenger
    return TestClient(app)
