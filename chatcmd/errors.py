"""
Error types raised by the command framework.
"""

INVALID_TOKEN = "invalid token"


class ChatCmdError(Exception):
    """Base class for framework errors."""


class InvalidTokenError(ChatCmdError):
    """The transport rejected the bot's credentials; the loop has stopped."""

    def __init__(self, message: str = INVALID_TOKEN):
        super().__init__(message)


class RegistryFrozenError(ChatCmdError):
    """Commands or handlers were changed after the dispatch loop started."""
