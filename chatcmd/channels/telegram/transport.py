"""
Telegram Transport Module.

Long-polls the Telegram Bot API and turns updates into transport events.
"""

import asyncio
from collections.abc import AsyncGenerator
from typing import Optional

from loguru import logger
from telegram import Bot, Chat, Update
from telegram.constants import ChatType, ParseMode
from telegram.error import BadRequest, InvalidToken, TelegramError

from chatcmd.channels.base import BaseTransport, BotIdentity
from chatcmd.channels.events import (
    Attachment,
    ConnectedEvent,
    ErrorEvent,
    Event,
    InvalidAuthEvent,
    MessageEvent,
    UnknownEvent,
)
from config.settings import get_settings

tg_log = logger.bind(module="Telegram")

GROUP_CHANNEL_PREFIX = "C"


class TelegramTransport(BaseTransport):
    """
    Telegram transport built on python-telegram-bot.

    Channel IDs are chat IDs with a prefix: the direct channel prefix for
    private chats, "C" for groups and channels.
    """

    service_name = "telegram"

    def __init__(
        self,
        token: Optional[str] = None,
        bot: Optional[Bot] = None,
        direct_prefix: Optional[str] = None,
        poll_timeout: Optional[int] = None,
        retry_delay: Optional[float] = None,
    ):
        """
        Initialize transport.

        Args:
            token: Telegram bot token (uses settings if not provided)
            bot: Preconfigured Bot instance, takes precedence over token
            direct_prefix: Prefix for private chat channel IDs
            poll_timeout: Long polling timeout in seconds
            retry_delay: Seconds to wait after a failed poll
        """
        settings = get_settings()
        self._direct_prefix = direct_prefix or settings.bot.direct_channel_prefix
        self._poll_timeout = poll_timeout if poll_timeout is not None else settings.telegram.poll_timeout
        self._retry_delay = retry_delay if retry_delay is not None else settings.telegram.retry_delay
        self._identity: Optional[BotIdentity] = None
        self._closed = False

        if self._direct_prefix.startswith(GROUP_CHANNEL_PREFIX):
            raise ValueError(
                f"Direct channel prefix cannot start with '{GROUP_CHANNEL_PREFIX}'"
            )

        self._bot = bot
        if self._bot is None:
            bot_token = token or settings.telegram.bot_token
            if not bot_token:
                tg_log.warning("TELEGRAM_BOT_TOKEN not set")
            else:
                self._bot = Bot(token=bot_token)

    @property
    def bot(self) -> Optional[Bot]:
        """Get the underlying Bot instance."""
        return self._bot

    @property
    def is_configured(self) -> bool:
        """Check if bot is configured."""
        return self._bot is not None

    @property
    def identity(self) -> Optional[BotIdentity]:
        """Get the bot identity, known after the first ConnectedEvent."""
        return self._identity

    def close(self) -> None:
        """End the event stream after the current poll."""
        self._closed = True

    async def events(self) -> AsyncGenerator[Event, None]:
        """
        Stream events from long polling.

        Yields ConnectedEvent once the token is verified, then one event per
        update. Ends after close() or when the token is rejected.
        """
        if not self._bot:
            tg_log.error("Bot not configured, cannot listen")
            yield InvalidAuthEvent()
            return

        try:
            await self._bot.initialize()
        except InvalidToken as e:
            tg_log.error(f"Telegram rejected the bot token: {e}")
            yield InvalidAuthEvent()
            return

        me = self._bot.bot
        self._identity = BotIdentity(user_id=str(me.id), mention=f"@{me.username}")
        tg_log.info(f"Connected as @{me.username}")
        yield ConnectedEvent()

        offset: Optional[int] = None
        try:
            while not self._closed:
                try:
                    updates = await self._bot.get_updates(
                        offset=offset,
                        timeout=self._poll_timeout,
                    )
                except InvalidToken as e:
                    tg_log.error(f"Telegram rejected the bot token: {e}")
                    yield InvalidAuthEvent()
                    return
                except TelegramError as e:
                    tg_log.warning(f"Polling failed: {e}")
                    yield ErrorEvent(description=str(e))
                    await asyncio.sleep(self._retry_delay)
                    continue

                for update in updates:
                    offset = update.update_id + 1
                    yield self.to_event(update)
        finally:
            await self._bot.shutdown()

    def to_event(self, update: Update) -> Event:
        """
        Classify a Telegram update.

        Args:
            update: Telegram Update object

        Returns:
            MessageEvent for new messages, UnknownEvent otherwise. Edited
            messages and channel posts are unknown events so an edit does not
            run its command again.
        """
        message = update.message
        if message is None:
            return UnknownEvent(payload=update)

        user = message.from_user
        attachments = (Attachment(pretext=message.caption),) if message.caption else ()
        return MessageEvent(
            text=message.text or "",
            channel=self.channel_id(message.chat),
            user_id=str(user.id) if user else "",
            bot_id=str(user.id) if user and user.is_bot else "",
            attachments=attachments,
            raw=update,
        )

    def channel_id(self, chat: Chat) -> str:
        """Encode a chat as a channel ID."""
        if chat.type == ChatType.PRIVATE:
            return f"{self._direct_prefix}{chat.id}"
        return f"{GROUP_CHANNEL_PREFIX}{chat.id}"

    def chat_id(self, channel: str) -> int:
        """
        Decode a channel ID back to a chat ID.

        Raises:
            ValueError: If the channel ID was not produced by channel_id()
        """
        if channel.startswith(self._direct_prefix):
            return int(channel[len(self._direct_prefix):])
        if channel.startswith(GROUP_CHANNEL_PREFIX):
            return int(channel[len(GROUP_CHANNEL_PREFIX):])
        raise ValueError(f"Unknown channel ID: {channel}")

    async def send(self, channel: str, text: str) -> bool:
        """
        Send a Markdown text message.

        Text that Telegram cannot parse as Markdown is sent again as plain text.

        Args:
            channel: Channel ID from a MessageEvent
            text: Message text

        Returns:
            True if sent successfully
        """
        if not self._bot:
            tg_log.warning("Bot not configured, cannot send message")
            return False

        try:
            chat_id = self.chat_id(channel)
            try:
                await self._bot.send_message(
                    chat_id=chat_id,
                    text=text,
                    parse_mode=ParseMode.MARKDOWN,
                )
            except BadRequest as e:
                tg_log.warning(f"Markdown rejected in {channel}, sending plain text: {e}")
                await self._bot.send_message(chat_id=chat_id, text=text)
            return True
        except Exception as e:
            tg_log.error(f"Failed to send message to {channel}: {e}")
            return False
