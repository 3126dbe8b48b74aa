"""Domain data models — immutable dataclasses rendered to Discord JSON."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

import discord


class ButtonAction(str, Enum):
    """The custom id carried by each mod-mail button."""

    OPEN_THREAD = "open_thread"
    ARCHIVE_THREAD = "archive_thread"
    LOCK_THREAD = "lock_thread"

    @classmethod
    def parse(cls, custom_id: Optional[str]) -> Optional["ButtonAction"]:
        try:
            return cls(custom_id)
        except ValueError:
            return None

    @property
    def closes_thread(self) -> bool:
        return self in (ButtonAction.ARCHIVE_THREAD, ButtonAction.LOCK_THREAD)

    @property
    def locks(self) -> bool:
        return self is ButtonAction.LOCK_THREAD

    @property
    def past_tense(self) -> str:
        """Verb used in the closed-thread notice and the audit reason."""
        if not self.closes_thread:
            raise ValueError(f"{self.value} does not close a thread")
        return "locked" if self.locks else "archived"


@dataclass(frozen=True)
class AllowedMentions:
    """Explicit mention allow-list; implicit mention parsing is always off."""

    users: Tuple[str, ...] = ()
    roles: Tuple[str, ...] = ()

    def to_payload(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"parse": []}
        if self.roles:
            data["roles"] = list(self.roles)
        if self.users:
            data["users"] = list(self.users)
        return data


@dataclass(frozen=True)
class Button:
    custom_id: ButtonAction
    label: str
    style: discord.ButtonStyle
    emoji: str

    def to_payload(self) -> Dict[str, Any]:
        return {
            "type": discord.ComponentType.button.value,
            "style": self.style.value,
            "label": self.label,
            "emoji": {"name": self.emoji},
            "custom_id": self.custom_id.value,
        }


@dataclass(frozen=True)
class OutboundMessage:
    """A channel message body. Built fresh per call, never mutated."""

    content: str
    components: Tuple[Button, ...] = ()
    allowed_mentions: AllowedMentions = AllowedMentions()

    def to_payload(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"content": self.content}
        if self.components:
            body["components"] = [
                {
                    "type": discord.ComponentType.action_row.value,
                    "components": [b.to_payload() for b in self.components],
                }
            ]
        body["allowed_mentions"] = self.allowed_mentions.to_payload()
        return body


@dataclass(frozen=True)
class InteractionResponse:
    """Immediate reply to an interaction webhook."""

    type: discord.InteractionResponseType
    data: Optional[Dict[str, Any]] = None

    @classmethod
    def pong(cls) -> "InteractionResponse":
        return cls(type=discord.InteractionResponseType.pong)

    @classmethod
    def deferred_update(cls) -> "InteractionResponse":
        """Acknowledge a component click without changing its message."""
        return cls(type=discord.InteractionResponseType.deferred_message_update)

    @classmethod
    def ephemeral(cls, content: str) -> "InteractionResponse":
        return cls(
            type=discord.InteractionResponseType.channel_message,
            data={
                "content": content,
                "allowed_mentions": AllowedMentions().to_payload(),
                "flags": discord.MessageFlags(ephemeral=True).value,
            },
        )

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"type": self.type.value}
        if self.data is not None:
            payload["data"] = self.data
        return payload
