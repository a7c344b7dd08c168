"""
Mock Telegram objects for transport tests.
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from telegram.constants import ChatType


@pytest.fixture
def mock_bot():
    """Mock telegram.Bot that is already authorised as @testbot."""
    bot = MagicMock()
    bot.initialize = AsyncMock()
    bot.shutdown = AsyncMock()
    bot.get_updates = AsyncMock(return_value=[])
    bot.send_message = AsyncMock()
    bot.bot = SimpleNamespace(id=42, username="testbot")
    return bot


@pytest.fixture
def make_update():
    """Factory for Telegram updates carrying a message."""

    def _make(
        update_id: int,
        text: str | None = "ping",
        caption: str | None = None,
        chat_id: int = 5,
        chat_type: str = ChatType.PRIVATE,
        user_id: int = 7,
        is_bot: bool = False,
    ):
        message = SimpleNamespace(
            text=text,
            caption=caption,
            chat=SimpleNamespace(id=chat_id, type=chat_type),
            from_user=SimpleNamespace(id=user_id, is_bot=is_bot),
        )
        return SimpleNamespace(update_id=update_id, message=message)

    return _make
