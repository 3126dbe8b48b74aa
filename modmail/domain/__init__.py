"""Domain layer — mod-mail state machine and message builders."""

from modmail.domain.dedupe import RecentInteractions
from modmail.domain.dispatcher import InteractionDispatcher
from modmail.domain.errors import (
    AuthenticationFailure,
    DiscordAPIError,
    ModMailError,
    UnrecognizedInteraction,
)
from modmail.domain.models import (
    AllowedMentions,
    Button,
    ButtonAction,
    InteractionResponse,
    OutboundMessage,
)
from modmail.domain.pipeline import Pipeline
from modmail.domain.prompt import edit_open_prompt, send_open_prompt
from modmail.domain.thread_naming import ThreadNameAllocator

__all__ = [
    "RecentInteractions",
    "InteractionDispatcher",
    "AuthenticationFailure",
    "DiscordAPIError",
    "ModMailError",
    "UnrecognizedInteraction",
    "AllowedMentions",
    "Button",
    "ButtonAction",
    "InteractionResponse",
    "OutboundMessage",
    "Pipeline",
    "edit_open_prompt",
    "send_open_prompt",
    "ThreadNameAllocator",
]
