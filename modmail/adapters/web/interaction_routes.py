"""Discord interactions webhook route."""

import sys

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from modmail.adapters.discord.verification import (
    SIGNATURE_HEADER,
    TIMESTAMP_HEADER,
    verify_interaction,
)
from modmail.adapters.web.payloads import parse_interaction
from modmail.domain.errors import AuthenticationFailure

interactions_router = APIRouter(prefix="/api", tags=["Interactions"])


def _log(msg: str):
    print(msg, file=sys.stderr)


async def verified_body(request: Request) -> bytes:
    """Return the raw body only if its signature checks out; runs before any parsing."""
    body = await request.body()
    public_key = request.app.state.config.discord.public_key
    if not verify_interaction(
        body,
        request.headers.get(SIGNATURE_HEADER),
        request.headers.get(TIMESTAMP_HEADER),
        public_key,
    ):
        _log("[interactions] rejected request with missing or invalid signature")
        raise AuthenticationFailure("invalid interaction signature")
    return body


@interactions_router.post("/interactions")
async def interactions(request: Request, body: bytes = Depends(verified_body)):
    interaction = parse_interaction(body)
    response = await request.app.state.dispatcher.dispatch(interaction)
    return JSONResponse(response.to_payload())
