"""
Chat bot command framework.

Matches incoming chat messages against usage patterns such as
"deploy <env> to <region>" and dispatches them to handlers.
"""

from chatcmd.bot import CommandBot
from chatcmd.channels import (
    Attachment,
    BaseTransport,
    BotIdentity,
    ConnectedEvent,
    ErrorEvent,
    Event,
    InvalidAuthEvent,
    MessageEvent,
    ResponseWriter,
    UnknownEvent,
)
from chatcmd.commands import BotCommand, CommandRegistry
from chatcmd.dispatch import DispatchConfig, Dispatcher, Request, RequestContext
from chatcmd.errors import ChatCmdError, InvalidTokenError, RegistryFrozenError
from chatcmd.matching import ParameterSet, Token, match, tokenize

__version__ = "0.1.0"

__all__ = [
    "CommandBot",
    # Channels
    "Attachment",
    "BaseTransport",
    "BotIdentity",
    "ConnectedEvent",
    "ErrorEvent",
    "Event",
    "InvalidAuthEvent",
    "MessageEvent",
    "ResponseWriter",
    "UnknownEvent",
    # Commands
    "BotCommand",
    "CommandRegistry",
    # Dispatch
    "DispatchConfig",
    "Dispatcher",
    "Request",
    "RequestContext",
    # Errors
    "ChatCmdError",
    "InvalidTokenError",
    "RegistryFrozenError",
    # Matching
    "ParameterSet",
    "Token",
    "match",
    "tokenize",
]
