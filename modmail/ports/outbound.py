"""Outbound ports — interfaces for external system adapters."""

from typing import Any, Dict, Optional, Protocol, runtime_checkable


@runtime_checkable
class DiscordPort(Protocol):
    """The subset of the Discord REST API the mod-mail workflow needs."""

    async def create_message(self, channel_id: str, body: Dict[str, Any]) -> Dict[str, Any]: ...

    async def edit_message(
        self, channel_id: str, message_id: str, body: Dict[str, Any]
    ) -> Dict[str, Any]: ...

    async def create_thread(self, channel_id: str, body: Dict[str, Any]) -> Dict[str, Any]: ...

    async def modify_channel(
        self,
        channel_id: str,
        body: Dict[str, Any],
        reason: Optional[str] = None,
    ) -> Dict[str, Any]: ...


@runtime_checkable
class StoragePort(Protocol):
    """Interface for persistent JSON-serialisable values."""

    def load(self, key: str, default: Any = None) -> Any: ...
    def save(self, key: str, data: Any) -> None: ...
