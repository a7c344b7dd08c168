"""
Chat Channels Module.

Transport interface, events and replies. Platform transports live in
subpackages and are imported from there (e.g. chatcmd.channels.telegram).
"""

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
from chatcmd.channels.response import ResponseWriter

__all__ = [
    # Base classes
    "BaseTransport",
    "BotIdentity",
    # Events
    "Attachment",
    "ConnectedEvent",
    "ErrorEvent",
    "Event",
    "InvalidAuthEvent",
    "MessageEvent",
    "UnknownEvent",
    # Replies
    "ResponseWriter",
]
