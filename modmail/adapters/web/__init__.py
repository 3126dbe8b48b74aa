"""Web adapter — FastAPI routes for interactions and admin operations."""

from modmail.adapters.web.server import create_app

__all__ = ["create_app"]
