"""Shared fixtures: a recording fake Discord port, config and signing keys."""

import json
from typing import Any, Dict, List, Optional, Tuple

import pytest
from nacl.encoding import HexEncoder
from nacl.signing import SigningKey

from modmail.adapters.storage.json_store import JsonStorage
from modmail.config import AppConfig, DiscordConfig
from modmail.domain.errors import DiscordAPIError

MODERATOR_ROLE = "MOD"
TIMESTAMP = "1700000000"


class FakeDiscord:
    """DiscordPort double that records every call in order."""

    def __init__(self, thread_id: str = "T1"):
        self.thread_id = thread_id
        self.calls: List[Tuple[str, str, Dict[str, Any], Optional[str]]] = []
        self.fail_on = set()

    @property
    def methods(self) -> List[str]:
        return [c[0] for c in self.calls]

    def _record(self, method, channel_id, body, reason=None):
        self.calls.append((method, channel_id, body, reason))
        if method in self.fail_on:
            raise DiscordAPIError(403, '{"message": "Missing Permissions"}', "POST", method)

    async def create_message(self, channel_id, body):
        self._record("create_message", channel_id, body)
        return {"id": f"M{len(self.calls)}", "channel_id": channel_id, "content": body["content"]}

    async def edit_message(self, channel_id, message_id, body):
        self._record("edit_message", channel_id, body)
        return {"id": message_id, "channel_id": channel_id, "content": body["content"]}

    async def create_thread(self, channel_id, body):
        self._record("create_thread", channel_id, body)
        return {"id": self.thread_id, "parent_id": channel_id, "name": body["name"]}

    async def modify_channel(self, channel_id, body, reason=None):
        self._record("modify_channel", channel_id, body, reason)
        return {"id": channel_id, "thread_metadata": body}


@pytest.fixture
def fake_discord():
    return FakeDiscord()


@pytest.fixture
def signing_key():
    return SigningKey.generate()


@pytest.fixture
def config(signing_key, tmp_path):
    return AppConfig(
        admin_token="admin-secret",
        storage_dir=str(tmp_path),
        discord=DiscordConfig(
            public_key=signing_key.verify_key.encode(encoder=HexEncoder).decode(),
            bot_token="bot-token",
            moderator_role_id=MODERATOR_ROLE,
            channel_id="C0",
            message_id="P0",
        ),
    )


@pytest.fixture
def storage(tmp_path):
    return JsonStorage(str(tmp_path))


@pytest.fixture
def sign(signing_key):
    """Return (body_bytes, headers) for a JSON payload signed with the test key."""

    def _sign(payload: Dict[str, Any], timestamp: str = TIMESTAMP):
        body = json.dumps(payload).encode()
        signature = signing_key.sign(timestamp.encode() + body).signature.hex()
        headers = {
            "X-Signature-Ed25519": signature,
            "X-Signature-Timestamp": timestamp,
            "Content-Type": "application/json",
        }
        return body, headers

    return _sign


def click_payload(
    custom_id: str,
    *,
    user_id: str = "U1",
    roles=(MODERATOR_ROLE,),
    channel_id: str = "C1",
    archived: Optional[bool] = False,
    locked: bool = False,
    interaction_id: str = "",
) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "type": 3,
        "data": {"custom_id": custom_id},
        "member": {"user": {"id": user_id}, "roles": list(roles)},
        "channel_id": channel_id,
        "channel": {"id": channel_id},
    }
    if archived is not None:
        payload["channel"]["thread_metadata"] = {"archived": archived, "locked": locked}
    if interaction_id:
        payload["id"] = interaction_id
    return payload


@pytest.fixture
def click():
    """Builder for raw component-click payloads."""
    return click_payload
