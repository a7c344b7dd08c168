"""
Pattern matching for tokenized usage patterns.

Matching is strictly positional: the input must have exactly as many words
as the pattern has tokens, literal tokens must be equal byte-for-byte and
parameter tokens capture one word each.
"""

from collections.abc import Iterator, Mapping, Sequence
from typing import Optional

from chatcmd.matching.tokenizer import Token, split_words

TRUE_VALUES = frozenset({"1", "t", "true", "y", "yes", "on"})
FALSE_VALUES = frozenset({"0", "f", "false", "n", "no", "off"})


class ParameterSet(Mapping[str, str]):
    """
    Immutable mapping of parameter name to the word captured for it.

    Typed getters return the default when the parameter is missing or its
    value cannot be converted.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Optional[Mapping[str, str]] = None):
        self._values: dict[str, str] = dict(values or {})

    def __getitem__(self, name: str) -> str:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ParameterSet({self._values!r})"

    def get_int(self, name: str, default: int = 0) -> int:
        """Get a parameter as int."""
        value = self._values.get(name)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            return default

    def get_float(self, name: str, default: float = 0.0) -> float:
        """Get a parameter as float."""
        value = self._values.get(name)
        if value is None:
            return default
        try:
            return float(value)
        except ValueError:
            return default

    def get_bool(self, name: str, default: bool = False) -> bool:
        """
        Get a parameter as bool.

        Accepts 1/0, t/f, true/false, y/n, yes/no and on/off in any case.
        """
        value = self._values.get(name)
        if value is None:
            return default
        lowered = value.lower()
        if lowered in TRUE_VALUES:
            return True
        if lowered in FALSE_VALUES:
            return False
        return default


EMPTY_PARAMETERS = ParameterSet()


def match(tokens: Sequence[Token], text: str) -> tuple[ParameterSet, bool]:
    """
    Match text against a tokenized pattern.

    Args:
        tokens: Tokens produced by tokenize()
        text: Incoming message text

    Returns:
        (parameters, True) on a match, (empty ParameterSet, False) otherwise

    Examples:
        >>> params, ok = match(tokenize("echo <word>"), "echo hi")
        >>> ok, params["word"]
        (True, 'hi')
    """
    words = split_words(text)
    if len(words) != len(tokens):
        return EMPTY_PARAMETERS, False

    values: dict[str, str] = {}
    for token, word in zip(tokens, words):
        if token.is_parameter:
            # Repeated names: last one wins
            values[token.word] = word
        elif token.word != word:
            return EMPTY_PARAMETERS, False

    return ParameterSet(values), True
