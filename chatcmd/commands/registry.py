"""
Command Registry Module.

Ordered collection of registered commands. Registration order is match
order: the first registered command that matches a message wins.
"""

from collections import Counter
from collections.abc import Iterator
from typing import Optional

from loguru import logger

from chatcmd.commands.base import BotCommand, CommandHandler
from chatcmd.commands.help import make_default_help
from chatcmd.errors import RegistryFrozenError

registry_log = logger.bind(module="Registry")

DEFAULT_HELP_COMMAND = "help"
DEFAULT_HELP_DESCRIPTION = "Show this help message"


class CommandRegistry:
    """Ordered registry of bot commands."""

    def __init__(
        self,
        help_command: str = DEFAULT_HELP_COMMAND,
        help_description: str = DEFAULT_HELP_DESCRIPTION,
    ):
        """
        Initialize registry.

        Args:
            help_command: Literal keyword of the help command
            help_description: Description of the help command
        """
        self._help_command = help_command
        self._help_description = help_description
        self._commands: list[BotCommand] = []
        self._help: Optional[BotCommand] = None
        self._frozen = False

    def __iter__(self) -> Iterator[BotCommand]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    @property
    def commands(self) -> tuple[BotCommand, ...]:
        """Get all commands in match order."""
        return tuple(self._commands)

    @property
    def help(self) -> Optional[BotCommand]:
        """Get the help command, None until prepend_help() is called."""
        return self._help

    @property
    def frozen(self) -> bool:
        """Check if the registry no longer accepts changes."""
        return self._frozen

    def user_commands(self) -> list[BotCommand]:
        """Get registered commands excluding the help command."""
        return [command for command in self._commands if command is not self._help]

    def register(self, usage: str, description: str, handler: CommandHandler) -> BotCommand:
        """
        Register a command at the end of the match order.

        Duplicate patterns are kept; the earlier one always wins.

        Args:
            usage: Usage pattern, e.g. "deploy <env> to <region>"
            description: Description shown in help
            handler: Coroutine function called with (request, response)

        Returns:
            The registered command

        Raises:
            RegistryFrozenError: If the registry is frozen
            ValueError: If the usage pattern has no words
        """
        self._check_not_frozen()

        command = BotCommand(usage, description, handler)
        if not command.tokens:
            raise ValueError(f"Usage pattern has no words: {usage!r}")

        duplicates = [
            name for name, count in Counter(command.parameter_names).items() if count > 1
        ]
        if duplicates:
            registry_log.warning(
                f"Usage '{usage}' repeats parameters {duplicates}, last value wins"
            )

        self._commands.append(command)
        registry_log.debug(f"Registered command: {usage}")
        return command

    def prepend_help(self, handler: Optional[CommandHandler] = None) -> BotCommand:
        """
        Insert the help command at position 0.

        Args:
            handler: Custom help handler; the default lists every other command

        Returns:
            The help command

        Raises:
            RegistryFrozenError: If the registry is frozen or help was already added
        """
        self._check_not_frozen()
        if self._help is not None:
            raise RegistryFrozenError("Help command was already prepended")

        if handler is None:
            handler = make_default_help(self.user_commands)

        self._help = BotCommand(self._help_command, self._help_description, handler)
        self._commands.insert(0, self._help)
        registry_log.debug(f"Prepended help command: {self._help_command}")
        return self._help

    def freeze(self) -> tuple[BotCommand, ...]:
        """
        Stop accepting changes.

        Returns:
            Commands in match order
        """
        self._frozen = True
        return self.commands

    def _check_not_frozen(self) -> None:
        if self._frozen:
            raise RegistryFrozenError("Commands cannot change after the bot started")
