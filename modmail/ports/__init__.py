"""Port interfaces (Hexagonal Architecture)."""

from modmail.ports.inbound import Actor, ComponentClick, Interaction, Ping, ThreadState
from modmail.ports.outbound import DiscordPort, StoragePort

__all__ = [
    "Actor",
    "ComponentClick",
    "Interaction",
    "Ping",
    "ThreadState",
    "DiscordPort",
    "StoragePort",
]
