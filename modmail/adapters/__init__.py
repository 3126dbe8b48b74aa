"""Adapters — Discord REST, JSON storage and the FastAPI web layer."""
