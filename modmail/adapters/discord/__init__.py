"""Discord adapters — REST client and webhook signature verification."""

from modmail.adapters.discord.rest import DiscordRestClient
from modmail.adapters.discord.verification import (
    SIGNATURE_HEADER,
    TIMESTAMP_HEADER,
    verify_interaction,
)

__all__ = [
    "DiscordRestClient",
    "SIGNATURE_HEADER",
    "TIMESTAMP_HEADER",
    "verify_interaction",
]
