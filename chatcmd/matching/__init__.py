"""
Matching module for usage patterns.

This module provides the tokenizer that turns a usage pattern into tokens
and the matcher that extracts parameters from incoming text.
"""

from chatcmd.matching.matcher import EMPTY_PARAMETERS, ParameterSet, match
from chatcmd.matching.tokenizer import Token, is_parameter_word, split_words, tokenize

__all__ = [
    # Tokenizer
    "Token",
    "tokenize",
    "split_words",
    "is_parameter_word",
    # Matcher
    "ParameterSet",
    "EMPTY_PARAMETERS",
    "match",
]
