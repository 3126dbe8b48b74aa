"""Admin routes for posting and refreshing the "open thread" prompt.

Guarded by a shared bearer token; the routes answer 503 when no token
is configured.
"""

import secrets
import sys
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Header, HTTPException, Request
from pydantic import BaseModel

from modmail.config import __version__
from modmail.domain.prompt import edit_open_prompt, send_open_prompt


def _log(msg: str):
    print(msg, file=sys.stderr)


def require_admin(request: Request, authorization: Optional[str] = Header(default=None)):
    config = request.app.state.config
    if not config.admin_enabled:
        raise HTTPException(status_code=503, detail="Admin endpoints disabled")
    scheme, _, token = (authorization or "").partition(" ")
    if scheme.lower() != "bearer" or not secrets.compare_digest(
        token.encode(), config.admin_token.encode()
    ):
        _log("[admin] rejected request with bad admin token")
        raise HTTPException(status_code=401, detail="Invalid admin token")


admin_router = APIRouter(
    prefix="/api/human",
    tags=["Admin"],
    dependencies=[Depends(require_admin)],
)


class MessageResponse(BaseModel):
    message: Dict[str, Any]


class VersionResponse(BaseModel):
    version: str


@admin_router.post("/send-message", response_model=MessageResponse)
async def send_message(request: Request):
    """Post a new prompt in the configured channel."""
    config = request.app.state.config
    if not config.discord.channel_id:
        raise HTTPException(status_code=503, detail="DISCORD_CHANNEL_ID not configured")
    message = await send_open_prompt(request.app.state.discord, config.discord.channel_id)
    _log(f"[admin] prompt posted in {config.discord.channel_id}")
    return MessageResponse(message=message)


@admin_router.post("/edit-message", response_model=MessageResponse)
async def edit_message(request: Request):
    """Replace the configured prompt message with the current version."""
    config = request.app.state.config
    if not config.discord.channel_id or not config.discord.message_id:
        raise HTTPException(
            status_code=503, detail="DISCORD_CHANNEL_ID / DISCORD_MESSAGE_ID not configured"
        )
    message = await edit_open_prompt(
        request.app.state.discord, config.discord.channel_id, config.discord.message_id
    )
    _log(f"[admin] prompt {config.discord.message_id} refreshed")
    return MessageResponse(message=message)


@admin_router.get("/version", response_model=VersionResponse)
async def version():
    return VersionResponse(version=__version__)
