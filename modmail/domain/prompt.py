"""Posting and refreshing the public "open thread" prompt."""

from typing import Any, Dict

from modmail.domain.messages import open_prompt_message
from modmail.ports.outbound import DiscordPort


async def send_open_prompt(discord: DiscordPort, channel_id: str) -> Dict[str, Any]:
    return await discord.create_message(channel_id, open_prompt_message().to_payload())


async def edit_open_prompt(discord: DiscordPort, channel_id: str, message_id: str) -> Dict[str, Any]:
    """Replace the existing prompt in place with the current version."""
    return await discord.edit_message(channel_id, message_id, open_prompt_message().to_payload())
