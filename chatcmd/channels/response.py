"""
Response Writer Module.

Capability handed to handlers for replying to the originating channel.
"""

from chatcmd.channels.base import BaseTransport


class ResponseWriter:
    """Sends replies to the channel a message came from."""

    def __init__(self, channel: str, transport: BaseTransport):
        """
        Initialize writer.

        Args:
            channel: Channel the writer is bound to
            transport: Transport used for delivery
        """
        self._channel = channel
        self._transport = transport

    @property
    def channel(self) -> str:
        """Get the bound channel."""
        return self._channel

    async def reply(self, text: str) -> None:
        """
        Send text to the bound channel.

        Delivery failures are logged by the transport and not reported here.
        """
        await self._transport.send(self._channel, text)
