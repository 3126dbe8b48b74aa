"""Interaction payload validation — raw JSON to tagged Interaction variants."""

from typing import List, Optional

import discord
from pydantic import BaseModel, ValidationError

from modmail.domain.errors import UnrecognizedInteraction
from modmail.ports.inbound import Actor, ComponentClick, Interaction, Ping, ThreadState


class UserPayload(BaseModel):
    id: str


class MemberPayload(BaseModel):
    user: UserPayload
    roles: List[str] = []


class ThreadMetadataPayload(BaseModel):
    archived: bool = False
    locked: bool = False


class ChannelPayload(BaseModel):
    id: Optional[str] = None
    thread_metadata: Optional[ThreadMetadataPayload] = None


class ComponentDataPayload(BaseModel):
    custom_id: Optional[str] = None


class InteractionPayload(BaseModel):
    id: str = ""
    type: int
    channel_id: Optional[str] = None
    channel: Optional[ChannelPayload] = None
    member: Optional[MemberPayload] = None
    data: Optional[ComponentDataPayload] = None


def parse_interaction(body: bytes) -> Interaction:
    """Validate a verified request body; malformed or unsupported shapes raise."""
    try:
        payload = InteractionPayload.model_validate_json(body)
    except ValidationError as e:
        raise UnrecognizedInteraction(f"malformed interaction ({e.error_count()} errors)") from e

    if payload.type == discord.InteractionType.ping.value:
        return Ping(id=payload.id)

    if payload.type == discord.InteractionType.component.value:
        custom_id = payload.data.custom_id if payload.data else None
        if not custom_id or payload.member is None or not payload.channel_id:
            raise UnrecognizedInteraction("component interaction missing custom_id, member or channel")
        thread_state = None
        if payload.channel and payload.channel.thread_metadata:
            meta = payload.channel.thread_metadata
            thread_state = ThreadState(archived=meta.archived, locked=meta.locked)
        return ComponentClick(
            id=payload.id,
            custom_id=custom_id,
            actor=Actor(
                user_id=payload.member.user.id,
                roles=frozenset(payload.member.roles),
            ),
            channel_id=payload.channel_id,
            thread_state=thread_state,
        )

    raise UnrecognizedInteraction(f"unsupported interaction type {payload.type}")
