"""Storage adapters."""

from modmail.adapters.storage.json_store import JsonStorage

__all__ = ["JsonStorage"]
