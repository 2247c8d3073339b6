"""Tokens and the extractor that picks a token type by priority."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Mapping


class TokenType(IntEnum):
    """Kinds of tokens produced by a lexer."""

    GARBAGE = 0
    END = 1
    KEYWORD = 2
    SYMBOL = 3
    OPERATOR = 4
    LITERAL_STRING = 5
    VARIABLE = 6


@dataclass(frozen=True)
class Token:
    """A piece of source text with its position and type."""

    line: int
    column: int
    text: str
    type: TokenType


class TokenExtractor:
    """Builds tokens, choosing among candidate types by priority.

    A lower priority number wins.
    """

    def __init__(self, priorities: Mapping[int, TokenType]) -> None:
        self._priorities = dict(priorities)
        self._order = sorted(self._priorities)

    def get_token(
        self, token_types: Iterable[TokenType], line: int, column: int, text: str
    ) -> Token:
        """Return a token of the highest-priority type among ``token_types``."""
        present = set(token_types)
        for priority in self._order:
            token_type = self._priorities[priority]
            if token_type in present:
                return Token(line, column, text, token_type)
        return Token(line, column, text, TokenType.GARBAGE)