"""End-to-end tests for POST /api/interactions."""

import json

import pytest
from httpx import ASGITransport, AsyncClient

from modmail.adapters.web.server import create_app


@pytest.fixture
def app(config, fake_discord, storage):
    return create_app(config, discord=fake_discord, storage=storage)


@pytest.fixture
def transport(app):
    return ASGITransport(app=app)


async def _post(transport, body, headers):
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        return await ac.post("/api/interactions", content=body, headers=headers)


class TestVerification:
    @pytest.mark.asyncio
    async def test_missing_headers(self, transport, fake_discord):
        resp = await _post(transport, b'{"type": 1}', {"Content-Type": "application/json"})
        assert resp.status_code == 401
        assert resp.json() == {}
        assert fake_discord.calls == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("drop", ["X-Signature-Ed25519", "X-Signature-Timestamp"])
    async def test_one_header_missing(self, transport, sign, drop):
        body, headers = sign({"type": 1})
        del headers[drop]
        resp = await _post(transport, body, headers)
        assert resp.status_code == 401

    @pytest.mark.asyncio
    async def test_bad_signature_makes_no_calls(self, transport, sign, click, fake_discord):
        body, headers = sign(click("open_thread"))
        tampered = body.replace(b"U1", b"U2")
        resp = await _post(transport, tampered, headers)
        assert resp.status_code == 401
        assert fake_discord.calls == []

    @pytest.mark.asyncio
    async def test_unsigned_garbage_is_401_not_400(self, transport):
        resp = await _post(transport, b"not json", {"X-Signature-Ed25519": "00", "X-Signature-Timestamp": "1"})
        assert resp.status_code == 401


class TestPing:
    @pytest.mark.asyncio
    async def test_pong(self, transport, sign, fake_discord):
        body, headers = sign({"type": 1, "id": "I0"})
        resp = await _post(transport, body, headers)
        assert resp.status_code == 200
        assert resp.json() == {"type": 1}
        assert fake_discord.calls == []


class TestComponentClicks:
    @pytest.mark.asyncio
    async def test_lock_example(self, transport, sign, fake_discord):
        payload = {
            "type": 3,
            "data": {"custom_id": "lock_thread"},
            "member": {"user": {"id": "U1"}, "roles": ["MOD"]},
            "channel": {"thread_metadata": {"archived": False, "locked": False}},
            "channel_id": "C1",
        }
        body, headers = sign(payload)
        resp = await _post(transport, body, headers)

        assert resp.status_code == 200
        assert resp.json() == {"type": 6}
        assert fake_discord.methods == ["create_message", "modify_channel"]
        assert fake_discord.calls[0][1] == "C1"
        assert fake_discord.calls[0][2]["content"] == "This thread has been locked by <@U1>"
        assert fake_discord.calls[1][1:3] == ("C1", {"archived": True, "locked": True})

    @pytest.mark.asyncio
    async def test_open_thread(self, transport, sign, click, fake_discord):
        body, headers = sign(click("open_thread", roles=(), archived=None))
        resp = await _post(transport, body, headers)
        assert resp.status_code == 200
        assert resp.json() == {"type": 6}
        assert fake_discord.methods == ["create_thread", "create_message"]

    @pytest.mark.asyncio
    async def test_not_allowed_is_ephemeral_200(self, transport, sign, click, fake_discord):
        body, headers = sign(click("archive_thread", roles=("OTHER",)))
        resp = await _post(transport, body, headers)
        assert resp.status_code == 200
        data = resp.json()
        assert data["type"] == 4
        assert data["data"]["content"] == "You are not allowed to do that"
        assert data["data"]["flags"] == 64
        assert fake_discord.calls == []

    @pytest.mark.asyncio
    async def test_already_locked(self, transport, sign, click, fake_discord):
        body, headers = sign(click("archive_thread", archived=True, locked=True))
        resp = await _post(transport, body, headers)
        assert resp.json()["data"]["content"] == "This thread is already locked"
        assert fake_discord.calls == []

    @pytest.mark.asyncio
    async def test_redelivered_click(self, transport, sign, click, fake_discord):
        body, headers = sign(click("open_thread", archived=None, interaction_id="I7"))
        first = await _post(transport, body, headers)
        second = await _post(transport, body, headers)
        assert first.status_code == second.status_code == 200
        assert fake_discord.methods.count("create_thread") == 1


class TestRejections:
    @pytest.mark.asyncio
    async def test_unknown_custom_id(self, transport, sign, click, fake_discord):
        body, headers = sign(click("delete_everything"))
        resp = await _post(transport, body, headers)
        assert resp.status_code == 400
        assert fake_discord.calls == []

    @pytest.mark.asyncio
    async def test_unknown_type(self, transport, sign):
        body, headers = sign({"type": 2, "data": {"name": "modmail"}})
        resp = await _post(transport, body, headers)
        assert resp.status_code == 400

    @pytest.mark.asyncio
    async def test_signed_but_malformed(self, transport, signing_key):
        body = b"{definitely not json"
        ts = "1700000000"
        headers = {
            "X-Signature-Ed25519": signing_key.sign(ts.encode() + body).signature.hex(),
            "X-Signature-Timestamp": ts,
        }
        resp = await _post(transport, body, headers)
        assert resp.status_code == 400

    @pytest.mark.asyncio
    async def test_unmatched_route(self, transport):
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            resp = await ac.post("/api/elsewhere", content=json.dumps({}))
        assert resp.status_code == 404

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method, path", [
        ("GET", "/api/interactions"),
        ("PUT", "/api/interactions"),
        ("GET", "/api/human/send-message"),
    ])
    async def test_wrong_method_is_404(self, transport, fake_discord, method, path):
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            resp = await ac.request(method, path)
        assert resp.status_code == 404
        assert resp.json() == {}
        assert fake_discord.calls == []


class TestUpstreamFailure:
    @pytest.mark.asyncio
    async def test_create_thread_failure(self, transport, sign, click, fake_discord):
        fake_discord.fail_on.add("create_thread")
        body, headers = sign(click("open_thread", archived=None))
        resp = await _post(transport, body, headers)
        assert resp.status_code == 500
        assert fake_discord.methods == ["create_thread"]
