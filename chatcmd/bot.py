"""
Command Bot Module.

Builder used to register commands and handlers before the bot starts.
Starting the bot freezes everything into a DispatchConfig.
"""

from collections.abc import Callable
from typing import Optional, TypeVar

from loguru import logger

from chatcmd.channels.base import BaseTransport
from chatcmd.commands import (
    BotCommand,
    CommandHandler,
    CommandRegistry,
    ErrorHandler,
    EventHandler,
    InitHandler,
)
from chatcmd.dispatch import DispatchConfig, Dispatcher
from chatcmd.errors import RegistryFrozenError
from config.settings import BotSettings, get_settings

bot_log = logger.bind(module="Bot")

F = TypeVar("F", bound=Callable)


class CommandBot:
    """
    Chat bot answering pattern-matched commands.

    Example:
        bot = CommandBot(transport)

        @bot.command("echo <word>", "Repeat a word")
        async def echo(request, response):
            await response.reply(request.param("word"))

        await bot.run()
    """

    def __init__(self, transport: BaseTransport, settings: Optional[BotSettings] = None):
        """
        Initialize bot.

        Args:
            transport: Chat platform transport
            settings: Dispatch settings (uses app settings if not provided)
        """
        self._transport = transport
        self._settings = settings or get_settings().bot
        self._registry = CommandRegistry(
            help_command=self._settings.help_command,
            help_description=self._settings.help_description,
        )
        self._init_handler: Optional[InitHandler] = None
        self._error_handler: Optional[ErrorHandler] = None
        self._help_handler: Optional[CommandHandler] = None
        self._default_message_handler: Optional[CommandHandler] = None
        self._default_event_handler: Optional[EventHandler] = None

    @property
    def transport(self) -> BaseTransport:
        """Get the transport."""
        return self._transport

    @property
    def commands(self) -> tuple[BotCommand, ...]:
        """Get commands in match order."""
        return self._registry.commands

    # ========== Handlers ==========

    def on_init(self, handler: F) -> F:
        """Set the handler called when the transport connects."""
        self._check_not_started()
        self._init_handler = handler
        return handler

    def on_error(self, handler: F) -> F:
        """Set the handler called with the description of transport errors."""
        self._check_not_started()
        self._error_handler = handler
        return handler

    def on_default_message(self, handler: F) -> F:
        """Set the handler for addressed messages no command matched."""
        self._check_not_started()
        self._default_message_handler = handler
        return handler

    def on_default_event(self, handler: F) -> F:
        """Set the handler called with the payload of unknown events."""
        self._check_not_started()
        self._default_event_handler = handler
        return handler

    def on_help(self, handler: F) -> F:
        """Replace the default help handler."""
        self._check_not_started()
        self._help_handler = handler
        return handler

    # ========== Commands ==========

    def add_command(self, usage: str, description: str, handler: CommandHandler) -> BotCommand:
        """
        Register a command after the existing ones.

        Args:
            usage: Usage pattern, e.g. "deploy <env> to <region>"
            description: Description shown in help
            handler: Called with (request, response)

        Returns:
            The registered command
        """
        return self._registry.register(usage, description, handler)

    def command(self, usage: str, description: str) -> Callable[[F], F]:
        """Decorator form of add_command()."""

        def decorator(handler: F) -> F:
            self.add_command(usage, description, handler)
            return handler

        return decorator

    # ========== Running ==========

    def build(self) -> Dispatcher:
        """
        Prepend the help command and freeze the configuration.

        Returns:
            Dispatcher ready to run

        Raises:
            RegistryFrozenError: If the bot was already built
        """
        self._registry.prepend_help(self._help_handler)
        config = DispatchConfig(
            commands=self._registry.freeze(),
            init_handler=self._init_handler,
            error_handler=self._error_handler,
            default_message_handler=self._default_message_handler,
            default_event_handler=self._default_event_handler,
        )
        bot_log.info(f"Built bot with {len(config.commands)} commands")
        return Dispatcher(config, self._transport, self._settings)

    async def run(self) -> None:
        """
        Run until the transport closes the event stream.

        Raises:
            InvalidTokenError: If the transport reports invalid credentials
            RegistryFrozenError: If the bot was already started
        """
        await self.build().run()

    def _check_not_started(self) -> None:
        if self._registry.frozen:
            raise RegistryFrozenError("Handlers cannot change after the bot started")
