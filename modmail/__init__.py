"""Mod-Mail Interactions — private-thread mod-mail over Discord interactions."""

from modmail.config import CONFIG, __version__, AppConfig, DiscordConfig, DedupeConfig
from modmail.adapters.discord.rest import DiscordRestClient
from modmail.adapters.storage.json_store import JsonStorage
from modmail.adapters.web.server import create_app
from modmail.domain.dispatcher import InteractionDispatcher
from modmail.domain.models import ButtonAction, InteractionResponse

__all__ = [
    "CONFIG",
    "__version__",
    "AppConfig",
    "DiscordConfig",
    "DedupeConfig",
    "DiscordRestClient",
    "JsonStorage",
    "create_app",
    "InteractionDispatcher",
    "ButtonAction",
    "InteractionResponse",
]
