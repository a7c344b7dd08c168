"""
Transport Events Module.

Closed set of event types a transport delivers to the dispatch loop.
Platform payloads are classified once, at the transport boundary; anything
unrecognised is wrapped in UnknownEvent.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Union


@dataclass(frozen=True)
class Attachment:
    """Rich attachment on a message. Only its pretext is used for matching."""
    pretext: str = ""


@dataclass(frozen=True)
class ConnectedEvent:
    """The transport connected and the bot identity is known."""


@dataclass(frozen=True)
class MessageEvent:
    """
    Inbound chat message.

    Attributes:
        text: Message text
        channel: Channel identifier the message was posted in
        user_id: Sender identifier
        bot_id: Non-empty when the sender is a bot
        attachments: Attachments in platform order
        raw: Original platform payload
    """
    text: str
    channel: str
    user_id: str = ""
    bot_id: str = ""
    attachments: tuple[Attachment, ...] = ()
    raw: Any = field(default=None, compare=False, repr=False)

    @property
    def attachment_pretext(self) -> Optional[str]:
        """Pretext of the first attachment, or None without attachments."""
        if not self.attachments:
            return None
        return self.attachments[0].pretext


@dataclass(frozen=True)
class ErrorEvent:
    """Recoverable transport error."""
    description: str


@dataclass(frozen=True)
class InvalidAuthEvent:
    """The platform rejected the bot credentials."""


@dataclass(frozen=True)
class UnknownEvent:
    """Any other platform event, carried as its raw payload."""
    payload: Any = None


Event = Union[ConnectedEvent, MessageEvent, ErrorEvent, InvalidAuthEvent, UnknownEvent]
