"""
Commands Module.

Registered commands, the ordered registry and help rendering.
"""

from chatcmd.commands.base import (
    BotCommand,
    call_handler,
    CommandHandler,
    ErrorHandler,
    EventHandler,
    InitHandler,
)
from chatcmd.commands.help import make_default_help, render_command, render_help
from chatcmd.commands.registry import CommandRegistry

__all__ = [
    "BotCommand",
    "call_handler",
    "CommandHandler",
    "CommandRegistry",
    "ErrorHandler",
    "EventHandler",
    "InitHandler",
    "make_default_help",
    "render_command",
    "render_help",
]
