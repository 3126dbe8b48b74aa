"""Inbound port — verified interactions as a closed set of tagged variants."""

from dataclasses import dataclass
from typing import FrozenSet, Optional, Union


@dataclass(frozen=True)
class Actor:
    """The guild member who clicked a component."""

    user_id: str
    roles: FrozenSet[str] = frozenset()

    def has_role(self, role_id: str) -> bool:
        return bool(role_id) and role_id in self.roles


@dataclass(frozen=True)
class ThreadState:
    """Thread metadata as Discord reported it with the interaction."""

    archived: bool = False
    locked: bool = False


@dataclass(frozen=True)
class Ping:
    id: str = ""


@dataclass(frozen=True)
class ComponentClick:
    custom_id: str
    actor: Actor
    channel_id: str
    thread_state: Optional[ThreadState] = None
    id: str = ""


Interaction = Union[Ping, ComponentClick]
