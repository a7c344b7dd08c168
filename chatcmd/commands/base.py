"""
Base Command Module.

Defines the registered command and the handler signatures.
"""

import inspect
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional, Union

from chatcmd.matching import ParameterSet, Token, match, tokenize

if TYPE_CHECKING:
    from chatcmd.channels.response import ResponseWriter
    from chatcmd.dispatch.request import Request

# Handlers may be coroutine functions or plain functions
HandlerResult = Optional[Awaitable[None]]
CommandHandler = Callable[["Request", "ResponseWriter"], HandlerResult]
InitHandler = Callable[[], HandlerResult]
ErrorHandler = Callable[[str], HandlerResult]
EventHandler = Callable[[Any], HandlerResult]


async def call_handler(handler: Callable[..., Union[HandlerResult, Any]], *args: Any) -> None:
    """Call a handler, awaiting the result if it is awaitable."""
    result = handler(*args)
    if inspect.isawaitable(result):
        await result


@dataclass(frozen=True)
class BotCommand:
    """
    A usage pattern paired with its description and handler.

    Tokens are computed once from the usage pattern when the command is
    created.

    Attributes:
        usage: Usage pattern, e.g. "deploy <env> to <region>"
        description: Human-readable description shown in help
        handler: Coroutine function called with (request, response)
        tokens: Tokenized usage pattern
    """
    usage: str
    description: str
    handler: CommandHandler = field(compare=False)
    tokens: tuple[Token, ...] = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "tokens", tuple(tokenize(self.usage)))

    @property
    def parameter_names(self) -> list[str]:
        """Get parameter names in pattern order."""
        return [token.word for token in self.tokens if token.is_parameter]

    def match(self, text: str) -> tuple[ParameterSet, bool]:
        """
        Match text against this command's pattern.

        Args:
            text: Message text

        Returns:
            (parameters, matched)
        """
        return match(self.tokens, text)

    async def execute(self, request: "Request", response: "ResponseWriter") -> None:
        """Run the handler."""
        await call_handler(self.handler, request, response)
