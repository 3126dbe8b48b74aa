"""FastAPI application factory and error mapping."""

import sys
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from modmail.adapters.discord.rest import DiscordRestClient
from modmail.adapters.storage.json_store import JsonStorage
from modmail.adapters.web.admin_routes import admin_router
from modmail.adapters.web.interaction_routes import interactions_router
from modmail.config import AppConfig
from modmail.domain.dedupe import RecentInteractions
from modmail.domain.dispatcher import InteractionDispatcher
from modmail.domain.errors import AuthenticationFailure, DiscordAPIError, UnrecognizedInteraction
from modmail.domain.thread_naming import ThreadNameAllocator
from modmail.ports.outbound import DiscordPort, StoragePort


def _log(msg: str):
    print(msg, file=sys.stderr)


async def _authentication_failure(request: Request, exc: AuthenticationFailure):
    return JSONResponse({}, status_code=401)


async def _unrecognized_interaction(request: Request, exc: UnrecognizedInteraction):
    _log(f"[interactions] rejected: {exc}")
    return JSONResponse({}, status_code=400)


async def _route_not_matched(request: Request, exc: StarletteHTTPException):
    # Only an exact method + path pair is a route; anything else is 404
    if exc.status_code == 405:
        return JSONResponse({}, status_code=404)
    return await http_exception_handler(request, exc)


async def _discord_api_error(request: Request, exc: DiscordAPIError):
    _log(f"[discord] request {request.url.path} failed upstream: {exc}")
    return JSONResponse({}, status_code=500)


def create_app(
    config: Optional[AppConfig] = None,
    discord: Optional[DiscordPort] = None,
    storage: Optional[StoragePort] = None,
) -> FastAPI:
    """Build the app; tests pass their own config and fake Discord port."""
    config = config or AppConfig.from_env()
    if discord is None:
        discord = DiscordRestClient(config.discord)
        if not discord.is_configured:
            _log("[discord] DISCORD_BOT_TOKEN not set — outbound calls will fail")
    if not config.discord.public_key:
        _log("[interactions] DISCORD_PUBLIC_KEY not set — every interaction will be rejected")
    if not config.admin_enabled:
        _log("[admin] ADMIN_TOKEN not set — admin routes disabled")
    storage = storage or JsonStorage(config.storage_dir)

    app = FastAPI(title="Mod-Mail Interactions")
    app.state.config = config
    app.state.discord = discord
    app.state.dispatcher = InteractionDispatcher(
        config,
        discord,
        ThreadNameAllocator(storage, prefix=config.thread_name_prefix),
        RecentInteractions(config.dedupe.max_entries, config.dedupe.ttl_seconds),
    )

    app.add_exception_handler(AuthenticationFailure, _authentication_failure)
    app.add_exception_handler(UnrecognizedInteraction, _unrecognized_interaction)
    app.add_exception_handler(DiscordAPIError, _discord_api_error)
    app.add_exception_handler(StarletteHTTPException, _route_not_matched)

    app.include_router(interactions_router)
    app.include_router(admin_router)
    return app
