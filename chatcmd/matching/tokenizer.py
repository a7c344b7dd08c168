"""
Usage Pattern Tokenizer.

Splits a command usage pattern such as "deploy <env> to <region>" into
literal and parameter tokens.
"""

from dataclasses import dataclass

WORD_SEPARATOR = " "
PARAMETER_START = "<"
PARAMETER_END = ">"


@dataclass(frozen=True)
class Token:
    """
    One positional segment of a usage pattern.

    Attributes:
        word: Literal text, or the parameter name for parameter tokens
        is_parameter: True if the segment captures a word from the input
    """
    word: str
    is_parameter: bool = False


def split_words(text: str) -> list[str]:
    """
    Split text on single spaces, skipping empty segments.

    Args:
        text: Pattern or message text

    Returns:
        Non-empty words in order
    """
    return [word for word in text.split(WORD_SEPARATOR) if word]


def is_parameter_word(word: str) -> bool:
    """Check if a word is wrapped in parameter markers, e.g. <name>."""
    return (
        len(word) > len(PARAMETER_START) + len(PARAMETER_END)
        and word.startswith(PARAMETER_START)
        and word.endswith(PARAMETER_END)
    )


def tokenize(pattern: str) -> list[Token]:
    """
    Tokenize a usage pattern.

    Args:
        pattern: Usage pattern, e.g. "deploy <env> to <region>"

    Returns:
        Ordered tokens

    Examples:
        >>> tokenize("echo <word>")
        [Token(word='echo', is_parameter=False), Token(word='word', is_parameter=True)]
    """
    tokens = []
    for word in split_words(pattern):
        if is_parameter_word(word):
            tokens.append(Token(word[len(PARAMETER_START):-len(PARAMETER_END)], True))
        else:
            tokens.append(Token(word))
    return tokens
