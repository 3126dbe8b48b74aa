"""Message builders for the open-prompt, thread-start and thread-closed messages."""

from typing import Any, Dict

import discord

from modmail.domain.models import AllowedMentions, Button, ButtonAction, OutboundMessage

NOT_ALLOWED = "You are not allowed to do that"
ALREADY_LOCKED = "This thread is already locked"
ALREADY_ARCHIVED = "This thread is already archived"

# Minutes of inactivity before Discord auto-archives the thread (one week)
AUTO_ARCHIVE_MINUTES = 10080

OPEN_BUTTON = Button(
    custom_id=ButtonAction.OPEN_THREAD,
    label="Create thread",
    style=discord.ButtonStyle.primary,
    emoji="📩",
)
ARCHIVE_BUTTON = Button(
    custom_id=ButtonAction.ARCHIVE_THREAD,
    label="Archive thread",
    style=discord.ButtonStyle.secondary,
    emoji="📦",
)
LOCK_BUTTON = Button(
    custom_id=ButtonAction.LOCK_THREAD,
    label="Lock thread",
    style=discord.ButtonStyle.danger,
    emoji="🔒",
)


def user_mention(user_id: str) -> str:
    return f"<@{user_id}>"


def role_mention(role_id: str) -> str:
    return f"<@&{role_id}>"


def open_prompt_message() -> OutboundMessage:
    """The public channel message carrying the "open thread" button."""
    return OutboundMessage(
        content="Create a private thread to report something to the moderators",
        components=(OPEN_BUTTON,),
    )


def thread_start_message(opener_id: str, moderator_role_id: str) -> OutboundMessage:
    """First message in a new thread; the only message that pings anyone."""
    return OutboundMessage(
        content=(
            f"Thread created by {user_mention(opener_id)}\n"
            f"{role_mention(moderator_role_id)} are on the way"
        ),
        components=(ARCHIVE_BUTTON, LOCK_BUTTON),
        allowed_mentions=AllowedMentions(users=(opener_id,), roles=(moderator_role_id,)),
    )


def thread_closed_message(closer_id: str, action: ButtonAction) -> OutboundMessage:
    return OutboundMessage(
        content=f"This thread has been {action.past_tense} by {user_mention(closer_id)}",
    )


def audit_reason(closer_id: str, action: ButtonAction) -> str:
    return f"Thread {action.past_tense} by {closer_id}"


def close_thread_body(action: ButtonAction) -> Dict[str, Any]:
    return {"archived": True, "locked": action.locks}


def private_thread_body(name: str) -> Dict[str, Any]:
    return {
        "name": name,
        "type": discord.ChannelType.private_thread.value,
        "invitable": False,
        "auto_archive_duration": AUTO_ARCHIVE_MINUTES,
    }
