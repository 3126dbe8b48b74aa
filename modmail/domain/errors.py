"""Error taxonomy for the interactions webhook.

Authorization and thread-state conflicts are not exceptions: they are
answered inside the interaction protocol with an ephemeral notice.
"""

from typing import Optional


class ModMailError(Exception):
    """Base class for all mod-mail errors."""


class AuthenticationFailure(ModMailError):
    """Missing signature headers or failed signature check."""


class UnrecognizedInteraction(ModMailError):
    """Unknown interaction type, unknown custom id or malformed payload."""


class DiscordAPIError(ModMailError):
    """A Discord REST call failed (HTTP error, transport error or bad reply)."""

    def __init__(self, status: Optional[int], body: str, method: str = "", path: str = ""):
        self.status = status
        self.body = body
        self.method = method
        self.path = path
        where = f"{method} {path}".strip()
        super().__init__(f"Discord API error ({status}) on {where}: {body[:200]}")
