"""Configuration and shared state."""

__version__ = "0.1.0"

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()

DISCORD_API_BASE = "https://discord.com/api/v10"

CONFIG = {
    "port": int(os.getenv("PORT", "3000")),
    # Discord application
    "discord_public_key": os.getenv("DISCORD_PUBLIC_KEY", ""),
    "discord_bot_token": os.getenv("DISCORD_BOT_TOKEN", ""),
    "discord_moderator_role_id": os.getenv("DISCORD_MODERATOR_ROLE_ID", ""),
    # Public channel and the message carrying the "open thread" button
    "discord_channel_id": os.getenv("DISCORD_CHANNEL_ID", ""),
    "discord_message_id": os.getenv("DISCORD_MESSAGE_ID", ""),
    "discord_api_base": os.getenv("DISCORD_API_BASE", DISCORD_API_BASE),
    "discord_http_timeout": float(os.getenv("DISCORD_HTTP_TIMEOUT", "10")),
    # Admin endpoints are disabled while this is empty
    "admin_token": os.getenv("ADMIN_TOKEN", ""),
    "storage_dir": os.getenv("STORAGE_DIR", "memory"),
    "thread_name_prefix": os.getenv("THREAD_NAME_PREFIX", "mod-mail"),
}


# ── Typed config ────────────────────────────────────────────


@dataclass
class DiscordConfig:
    public_key: str = ""
    bot_token: str = ""
    moderator_role_id: str = ""
    channel_id: str = ""
    message_id: str = ""
    api_base: str = DISCORD_API_BASE
    http_timeout: float = 10.0


@dataclass
class DedupeConfig:
    max_entries: int = 1000
    ttl_seconds: int = 900


@dataclass
class AppConfig:
    """Typed configuration handed to the dispatcher and adapters."""

    port: int = 3000
    admin_token: str = ""
    storage_dir: str = "memory"
    thread_name_prefix: str = "mod-mail"
    discord: DiscordConfig = field(default_factory=DiscordConfig)
    dedupe: DedupeConfig = field(default_factory=DedupeConfig)

    @property
    def admin_enabled(self) -> bool:
        return bool(self.admin_token)

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create AppConfig from environment variables."""
        return cls(
            port=CONFIG["port"],
            admin_token=CONFIG["admin_token"],
            storage_dir=CONFIG["storage_dir"],
            thread_name_prefix=CONFIG["thread_name_prefix"],
            discord=DiscordConfig(
                public_key=CONFIG["discord_public_key"],
                bot_token=CONFIG["discord_bot_token"],
                moderator_role_id=CONFIG["discord_moderator_role_id"],
                channel_id=CONFIG["discord_channel_id"],
                message_id=CONFIG["discord_message_id"],
                api_base=CONFIG["discord_api_base"],
                http_timeout=CONFIG["discord_http_timeout"],
            ),
        )
