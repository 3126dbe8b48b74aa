"""InteractionDispatcher — the mod-mail state machine.

A support request moves NoThread -> ThreadOpen -> ThreadClosed, where
closed means archived or locked. Locked is treated as a superset of
archived, so guards run role -> locked -> archived.
"""

import sys
from typing import Any, Dict, Optional

from modmail.config import AppConfig
from modmail.domain.dedupe import RecentInteractions
from modmail.domain.errors import DiscordAPIError, UnrecognizedInteraction
from modmail.domain.messages import (
    ALREADY_ARCHIVED,
    ALREADY_LOCKED,
    NOT_ALLOWED,
    audit_reason,
    close_thread_body,
    private_thread_body,
    thread_closed_message,
    thread_start_message,
)
from modmail.domain.models import ButtonAction, InteractionResponse
from modmail.domain.pipeline import Pipeline
from modmail.domain.thread_naming import ThreadNameAllocator
from modmail.ports.inbound import ComponentClick, Interaction, Ping
from modmail.ports.outbound import DiscordPort


def _log(msg: str):
    print(msg, file=sys.stderr)


class InteractionDispatcher:
    """Maps one verified interaction to outbound calls and an immediate response."""

    def __init__(
        self,
        config: AppConfig,
        discord: DiscordPort,
        namer: ThreadNameAllocator,
        recent: Optional[RecentInteractions] = None,
    ):
        self._config = config
        self._discord = discord
        self._namer = namer
        self._recent = recent

    @property
    def moderator_role_id(self) -> str:
        return self._config.discord.moderator_role_id

    async def dispatch(self, interaction: Interaction) -> InteractionResponse:
        if isinstance(interaction, Ping):
            return InteractionResponse.pong()
        if isinstance(interaction, ComponentClick):
            return await self._dispatch_click(interaction)
        raise UnrecognizedInteraction(f"unsupported interaction {type(interaction).__name__}")

    async def _dispatch_click(self, click: ComponentClick) -> InteractionResponse:
        action = ButtonAction.parse(click.custom_id)
        if action is None:
            raise UnrecognizedInteraction(f"unknown custom_id {click.custom_id!r}")

        # Redelivered webhook, handled or still running: acknowledge without side effects
        if self._recent is not None and not self._recent.claim(click.id):
            _log(f"[interactions] duplicate delivery of {click.id} ignored")
            return InteractionResponse.deferred_update()

        try:
            if action is ButtonAction.OPEN_THREAD:
                return await self._open_thread(click)
            return await self._close_thread(click, action)
        finally:
            # No-op once remembered; frees the id after a failure or a notice
            if self._recent is not None:
                self._recent.release(click.id)

    def _remember(self, click: ComponentClick):
        if self._recent is not None:
            self._recent.remember(click.id)

    async def _open_thread(self, click: ComponentClick) -> InteractionResponse:
        opener = click.actor.user_id
        moderators = self.moderator_role_id

        async def create_thread(results: Dict[str, Any]) -> Dict[str, Any]:
            thread = await self._discord.create_thread(
                click.channel_id, private_thread_body(results["name"])
            )
            if "id" not in thread:
                raise DiscordAPIError(None, "thread create reply has no id", "POST", "threads")
            return thread

        async def post_start(results: Dict[str, Any]) -> Dict[str, Any]:
            message = thread_start_message(opener, moderators)
            return await self._discord.create_message(results["thread"]["id"], message.to_payload())

        pipeline = (
            Pipeline("open thread")
            .step("name", lambda _: self._namer.next_name())
            .step("thread", create_thread)
            .step("message", post_start)
        )
        results = await pipeline.run()
        self._remember(click)
        _log(f"[interactions] {opener} opened thread {results['thread']['id']} ({results['name']})")
        return InteractionResponse.deferred_update()

    async def _close_thread(self, click: ComponentClick, action: ButtonAction) -> InteractionResponse:
        """Archive and Lock share this path; only the locked flag and wording differ."""
        if not click.actor.has_role(self.moderator_role_id):
            return InteractionResponse.ephemeral(NOT_ALLOWED)

        state = click.thread_state
        if state is None:
            raise UnrecognizedInteraction(f"{action.value} clicked outside a thread")
        if state.locked:
            return InteractionResponse.ephemeral(ALREADY_LOCKED)
        if state.archived and action is ButtonAction.ARCHIVE_THREAD:
            return InteractionResponse.ephemeral(ALREADY_ARCHIVED)

        closer = click.actor.user_id
        thread_id = click.channel_id
        pipeline = (
            Pipeline(action.value)
            .step(
                "notice",
                lambda _: self._discord.create_message(
                    thread_id, thread_closed_message(closer, action).to_payload()
                ),
            )
            .step(
                "thread",
                lambda _: self._discord.modify_channel(
                    thread_id, close_thread_body(action), reason=audit_reason(closer, action)
                ),
            )
        )
        await pipeline.run()
        self._remember(click)
        _log(f"[interactions] thread {thread_id} {action.past_tense} by {closer}")
        return InteractionResponse.deferred_update()
