"""
Help Command Module.

Renders the default help message listing every registered command.
"""

from collections.abc import Callable, Iterable

from chatcmd.commands.base import BotCommand, CommandHandler

BOLD_FORMAT = "*{}*"
CODE_FORMAT = "`{}`"
ITALIC_FORMAT = "_{}_"


def render_command(command: BotCommand) -> str:
    """
    Render one help line.

    Literal tokens are bold, parameters are inline code, and the italic
    description follows a dash.

    Args:
        command: Command to render

    Returns:
        Newline-terminated help line

    Examples:
        >>> render_command(BotCommand("echo <word>", "Repeat a word", handler))
        '*echo* `word` - _Repeat a word_\\n'
    """
    parts = [
        CODE_FORMAT.format(token.word) if token.is_parameter else BOLD_FORMAT.format(token.word)
        for token in command.tokens
    ]
    parts.append("-")
    parts.append(ITALIC_FORMAT.format(command.description))
    return " ".join(parts) + "\n"


def render_help(commands: Iterable[BotCommand]) -> str:
    """Render help lines for commands, in order."""
    return "".join(render_command(command) for command in commands)


def make_default_help(commands: Callable[[], Iterable[BotCommand]]) -> CommandHandler:
    """
    Build the default help handler.

    Args:
        commands: Called on each help request to get the commands to list

    Returns:
        Handler replying with the rendered help
    """

    async def default_help(request, response) -> None:
        await response.reply(render_help(commands()))

    return default_help
