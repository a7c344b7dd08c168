"""
Demo bot entry point.

Runs a small command bot on Telegram:

    TELEGRAM_BOT_TOKEN=... python -m chatcmd
"""

import asyncio
import sys

from dotenv import load_dotenv

# Load .env file at startup
load_dotenv()

from loguru import logger  # noqa: E402

from chatcmd.bot import CommandBot  # noqa: E402
from chatcmd.channels.telegram import TelegramTransport  # noqa: E402
from chatcmd.errors import InvalidTokenError  # noqa: E402
from chatcmd.utils.logging import setup_logging  # noqa: E402
from config.settings import get_settings  # noqa: E402

log = logger.bind(module="Main")


def create_bot() -> CommandBot:
    """Create the demo bot with its commands."""
    bot = CommandBot(TelegramTransport())

    @bot.on_init
    async def connected() -> None:
        log.info("Bot is online")

    @bot.on_error
    async def transport_error(description: str) -> None:
        log.warning(f"Transport error: {description}")

    @bot.command("ping", "Check the bot is alive")
    async def ping(request, response) -> None:
        await response.reply("pong")

    @bot.command("echo <word>", "Repeat a word")
    async def echo(request, response) -> None:
        await response.reply(request.param("word"))

    @bot.command("add <a> <b>", "Add two numbers")
    async def add(request, response) -> None:
        total = request.float_param("a") + request.float_param("b")
        await response.reply(f"{total:g}")

    @bot.on_default_message
    async def unknown(request, response) -> None:
        await response.reply("Unknown command, send *help* to list commands")

    return bot


def main() -> int:
    """Run the demo bot until interrupted."""
    setup_logging(get_settings().log_level)
    try:
        asyncio.run(create_bot().run())
    except InvalidTokenError as e:
        log.error(f"Stopped: {e}")
        return 1
    except KeyboardInterrupt:
        log.info("Interrupted")
    return 0


if __name__ == "__main__":
    sys.exit(main())
