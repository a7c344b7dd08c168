"""
Request Module.

Per-message bundle passed to command handlers.
"""

import asyncio
from dataclasses import dataclass, field
from typing import Any, Optional

from chatcmd.channels.events import MessageEvent
from chatcmd.matching import ParameterSet


class RequestContext:
    """
    Cancellable context created for each dispatched message.

    Nothing in the dispatch loop cancels it; handlers can cancel it and pass
    it to downstream work that should stop early.
    """

    def __init__(self):
        self._cancelled = asyncio.Event()

    @property
    def cancelled(self) -> bool:
        """Check if the context was cancelled."""
        return self._cancelled.is_set()

    def cancel(self) -> None:
        """Cancel the context. Safe to call more than once."""
        self._cancelled.set()

    async def wait(self) -> None:
        """Wait until the context is cancelled."""
        await self._cancelled.wait()


@dataclass(frozen=True)
class Request:
    """
    Immutable request built for one matched (or defaulted) message.

    Attributes:
        context: Cancellable context for downstream calls
        event: Message the request was built from
        parameters: Parameters extracted by the matched command
    """
    context: RequestContext
    event: MessageEvent
    parameters: ParameterSet = field(default_factory=ParameterSet)

    @property
    def channel(self) -> str:
        """Get the originating channel."""
        return self.event.channel

    @property
    def user_id(self) -> str:
        """Get the sender ID."""
        return self.event.user_id

    @property
    def text(self) -> str:
        """Get the raw message text."""
        return self.event.text

    @property
    def raw(self) -> Any:
        """Get the raw platform payload."""
        return self.event.raw

    def param(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Get a parameter as string."""
        return self.parameters.get(name, default)

    def int_param(self, name: str, default: int = 0) -> int:
        """Get a parameter as int."""
        return self.parameters.get_int(name, default)

    def float_param(self, name: str, default: float = 0.0) -> float:
        """Get a parameter as float."""
        return self.parameters.get_float(name, default)

    def bool_param(self, name: str, default: bool = False) -> bool:
        """Get a parameter as bool."""
        return self.parameters.get_bool(name, default)
