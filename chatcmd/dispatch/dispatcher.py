"""
Dispatch Loop Module.

Consumes the transport's event stream, filters messages that are not
addressed to the bot and runs the first matching command. Every handler
invocation runs as its own asyncio task so slow handlers never stall
intake of later events.
"""

import asyncio
from collections.abc import Callable
from contextlib import aclosing
from dataclasses import dataclass
from typing import Any, Optional

from loguru import logger

from chatcmd.channels.base import BaseTransport, BotIdentity
from chatcmd.channels.events import (
    ConnectedEvent,
    ErrorEvent,
    Event,
    InvalidAuthEvent,
    MessageEvent,
    UnknownEvent,
)
from chatcmd.channels.response import ResponseWriter
from chatcmd.commands.base import (
    BotCommand,
    CommandHandler,
    ErrorHandler,
    EventHandler,
    InitHandler,
    call_handler,
)
from chatcmd.dispatch.request import Request, RequestContext
from chatcmd.errors import InvalidTokenError
from chatcmd.matching import split_words
from config.settings import BotSettings, get_settings

dispatch_log = logger.bind(module="Dispatch")

MENTION_TRAILING_PUNCTUATION = ":,"


def is_mention_word(word: str, mention: str) -> bool:
    """Check if a word is the mention, allowing trailing ":" or ","."""
    return word.rstrip(MENTION_TRAILING_PUNCTUATION) == mention


def mentions(text: str, mention: str) -> bool:
    """
    Check if text mentions the bot.

    The mention must be a whole word so "@chatbot" does not match
    "@chatbot_helper".
    """
    return any(is_mention_word(word, mention) for word in split_words(text))


@dataclass(frozen=True)
class DispatchConfig:
    """
    Frozen runtime configuration of the dispatch loop.

    Attributes:
        commands: Commands in match order, help first
        init_handler: Called when the transport connects
        error_handler: Called with the description of transport errors
        default_message_handler: Called for addressed messages no command matched
        default_event_handler: Called with the payload of unknown events
    """
    commands: tuple[BotCommand, ...]
    init_handler: Optional[InitHandler] = None
    error_handler: Optional[ErrorHandler] = None
    default_message_handler: Optional[CommandHandler] = None
    default_event_handler: Optional[EventHandler] = None


class Dispatcher:
    """Event loop dispatching transport events to handlers."""

    def __init__(
        self,
        config: DispatchConfig,
        transport: BaseTransport,
        settings: Optional[BotSettings] = None,
    ):
        """
        Initialize dispatcher.

        Args:
            config: Frozen commands and handlers
            transport: Source of events and target of replies
            settings: Dispatch settings (uses app settings if not provided)
        """
        self._config = config
        self._transport = transport
        self._settings = settings or get_settings().bot
        self._tasks: set[asyncio.Task] = set()

        limit = self._settings.max_concurrent_handlers
        self._semaphore: Optional[asyncio.Semaphore] = (
            asyncio.Semaphore(limit) if limit > 0 else None
        )

    @property
    def config(self) -> DispatchConfig:
        """Get the runtime configuration."""
        return self._config

    @property
    def in_flight(self) -> int:
        """Get the number of handler tasks still running."""
        return len(self._tasks)

    async def run(self) -> None:
        """
        Consume events until the transport closes the stream.

        Handler tasks still running when the stream ends are awaited before
        returning. On invalid credentials they are cancelled first.

        Raises:
            InvalidTokenError: If the transport reports invalid credentials
        """
        dispatch_log.info(f"Listening with {len(self._config.commands)} commands")
        try:
            async with aclosing(self._transport.events()) as events:
                async for event in events:
                    self.handle_event(event)
        except (asyncio.CancelledError, InvalidTokenError):
            self._cancel_pending()
            raise
        finally:
            await self.drain()

        dispatch_log.info("Event stream closed")

    def handle_event(self, event: Event) -> Optional[asyncio.Task]:
        """
        Route one event.

        Args:
            event: Event from the transport

        Returns:
            The task running the handler, or None if nothing was scheduled

        Raises:
            InvalidTokenError: On InvalidAuthEvent
        """
        if isinstance(event, ConnectedEvent):
            if self._config.init_handler is None:
                return None
            return self._spawn("init", self._config.init_handler)

        if isinstance(event, MessageEvent):
            reason = self._drop_reason(event)
            if reason:
                dispatch_log.debug(f"Dropping message in {event.channel}: {reason}")
                return None
            return self._spawn(f"message in {event.channel}", self._handle_message, event)

        if isinstance(event, ErrorEvent):
            if self._config.error_handler is None:
                return None
            return self._spawn("error", self._config.error_handler, event.description)

        if isinstance(event, InvalidAuthEvent):
            dispatch_log.error("Transport rejected the bot credentials, stopping")
            raise InvalidTokenError()

        if self._config.default_event_handler is None:
            return None
        payload = event.payload if isinstance(event, UnknownEvent) else event
        return self._spawn("event", self._config.default_event_handler, payload)

    async def drain(self) -> None:
        """Wait for all running handler tasks."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    # ========== Filtering ==========

    def _drop_reason(self, event: MessageEvent) -> Optional[str]:
        """Get why a message is not dispatched, None if it should be."""
        identity = self._transport.identity
        if self._settings.ignore_bot_messages and self._is_from_bot(event, identity):
            return "sent by a bot"
        if not self._is_bot_mentioned(event, identity) and not self._is_direct_message(event):
            return "not mentioned and not a direct message"
        return None

    def _is_from_bot(self, event: MessageEvent, identity: Optional[BotIdentity]) -> bool:
        if event.bot_id:
            return True
        return identity is not None and event.user_id == identity.user_id

    def _is_bot_mentioned(self, event: MessageEvent, identity: Optional[BotIdentity]) -> bool:
        if identity is None:
            return False
        if mentions(event.text, identity.mention):
            return True
        pretext = event.attachment_pretext
        return pretext is not None and mentions(pretext, identity.mention)

    def _is_direct_message(self, event: MessageEvent) -> bool:
        return event.channel.startswith(self._settings.direct_channel_prefix)

    # ========== Matching ==========

    def _match_source(self, text: str) -> str:
        """Prepare text for matching, removing the bot mention if configured."""
        identity = self._transport.identity
        if not self._settings.strip_mention or identity is None:
            return text
        return " ".join(
            word
            for word in split_words(text)
            if not is_mention_word(word, identity.mention)
        )

    async def _handle_message(self, event: MessageEvent) -> None:
        """Run the first command matching the text or the attachment pretext."""
        response = ResponseWriter(event.channel, self._transport)
        context = RequestContext()

        text = self._match_source(event.text)
        pretext = event.attachment_pretext
        if pretext is not None:
            pretext = self._match_source(pretext)

        for command in self._config.commands:
            parameters, matched = command.match(text)
            if not matched and pretext is not None:
                parameters, matched = command.match(pretext)
            if not matched:
                continue

            dispatch_log.info(f"Matched '{command.usage}' in {event.channel}")
            await command.execute(Request(context, event, parameters), response)
            return

        if self._config.default_message_handler is None:
            dispatch_log.debug(f"No command matched in {event.channel}")
            return

        dispatch_log.debug(f"No command matched in {event.channel}, using default handler")
        await call_handler(self._config.default_message_handler, Request(context, event), response)

    # ========== Tasks ==========

    def _spawn(self, label: str, handler: Callable[..., Any], *args: Any) -> asyncio.Task:
        task = asyncio.create_task(self._guard(label, handler, *args))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _guard(self, label: str, handler: Callable[..., Any], *args: Any) -> None:
        """Run a handler, logging any failure instead of propagating it."""
        try:
            if self._semaphore is None:
                await call_handler(handler, *args)
            else:
                async with self._semaphore:
                    await call_handler(handler, *args)
        except Exception as e:
            dispatch_log.opt(exception=e).error(f"Handler for {label} failed: {e}")

    def _cancel_pending(self) -> None:
        for task in self._tasks:
            task.cancel()
