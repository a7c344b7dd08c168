"""
Base Transport Module.

Defines the interface between the dispatch loop and a chat platform.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncGenerator
from dataclasses import dataclass
from typing import Optional

from chatcmd.channels.events import Event


@dataclass(frozen=True)
class BotIdentity:
    """
    The bot's own identity on the platform.

    Attributes:
        user_id: Platform user ID of the bot
        mention: Text that mentions the bot inside a message, e.g. "<@U123>"
    """
    user_id: str
    mention: str


class BaseTransport(ABC):
    """
    Base class for chat platform transports.

    Each platform (Telegram, Slack, etc.) implements this interface to
    provide an ordered event stream and a fire-and-forget send primitive.
    """

    # Transport identifier
    service_name: str = ""

    @property
    @abstractmethod
    def identity(self) -> Optional[BotIdentity]:
        """Get the bot identity, None until the transport has connected."""
        pass

    @abstractmethod
    def events(self) -> AsyncGenerator[Event, None]:
        """
        Stream inbound events in platform order.

        Implemented as an async generator. The generator ends when the
        transport closes the stream and is closed by the dispatch loop when
        the loop stops early.
        """
        pass

    @abstractmethod
    async def send(self, channel: str, text: str) -> bool:
        """
        Send a text message to a channel.

        Args:
            channel: Channel identifier
            text: Message text

        Returns:
            True if sent successfully
        """
        pass
