"""
Telegram Channel Module.

Telegram transport for the command bot.
"""

from chatcmd.channels.telegram.transport import GROUP_CHANNEL_PREFIX, TelegramTransport

__all__ = [
    "GROUP_CHANNEL_PREFIX",
    "TelegramTransport",
]
