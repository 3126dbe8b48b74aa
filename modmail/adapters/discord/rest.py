"""Discord REST client using aiohttp — implements DiscordPort."""

import asyncio
import sys
from typing import Any, Dict, Optional
from urllib.parse import quote

import aiohttp

from modmail.config import __version__, DiscordConfig
from modmail.domain.errors import DiscordAPIError

USER_AGENT = f"DiscordBot (https://github.com/modmail-interactions, {__version__})"


def _log(msg: str):
    print(msg, file=sys.stderr)


class DiscordRestClient:
    """Async client for the handful of channel endpoints mod-mail calls.

    No retries: a failed call raises DiscordAPIError and the whole
    interaction fails, leaving redelivery to Discord.
    """

    def __init__(self, config: DiscordConfig):
        self._token = config.bot_token
        self._api_base = config.api_base.rstrip("/")
        self._timeout = config.http_timeout

    @property
    def is_configured(self) -> bool:
        return bool(self._token)

    def _headers(self, reason: Optional[str] = None) -> Dict[str, str]:
        headers = {
            "Authorization": f"Bot {self._token}",
            "User-Agent": USER_AGENT,
        }
        if reason:
            headers["X-Audit-Log-Reason"] = quote(reason, safe="/ ")
        return headers

    async def _request(
        self,
        method: str,
        path: str,
        body: Dict[str, Any],
        reason: Optional[str] = None,
    ) -> Dict[str, Any]:
        url = f"{self._api_base}{path}"
        timeout = aiohttp.ClientTimeout(total=self._timeout)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.request(
                    method, url, json=body, headers=self._headers(reason)
                ) as resp:
                    if resp.status >= 400:
                        text = await resp.text()
                        _log(f"[discord] {method} {path} -> HTTP {resp.status}")
                        raise DiscordAPIError(resp.status, text, method, path)
                    return await resp.json()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            _log(f"[discord] {method} {path} failed: {e!r}")
            raise DiscordAPIError(None, repr(e), method, path) from e

    async def create_message(self, channel_id: str, body: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("POST", f"/channels/{channel_id}/messages", body)

    async def edit_message(
        self, channel_id: str, message_id: str, body: Dict[str, Any]
    ) -> Dict[str, Any]:
        return await self._request("PATCH", f"/channels/{channel_id}/messages/{message_id}", body)

    async def create_thread(self, channel_id: str, body: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("POST", f"/channels/{channel_id}/threads", body)

    async def modify_channel(
        self,
        channel_id: str,
        body: Dict[str, Any],
        reason: Optional[str] = None,
    ) -> Dict[str, Any]:
        return await self._request("PATCH", f"/channels/{channel_id}", body, reason=reason)
