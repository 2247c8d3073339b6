"""Compile errors, their collector and the lexical analyzer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator

from .tokens import Token, TokenType


class ErrorType(Enum):
    """The stage of compilation an error belongs to."""

    LEXICAL = 0
    GRAMMATICAL = 1
    SEMANTIC = 2


@dataclass(frozen=True)
class CompileError:
    """An error found in the analysed code, with its position."""

    message: str
    line: int
    column: int
    type: ErrorType


class ErrorCollector:
    """Gathers the errors found while processing code."""

    def __init__(self) -> None:
        self._errors: list[CompileError] = []

    @property
    def errors(self) -> list[CompileError]:
        return list(self._errors)

    def add_error(self, error: CompileError) -> None:
        """Record an error."""
        self._errors.append(error)

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self) -> Iterator[CompileError]:
        return iter(list(self._errors))


@dataclass(frozen=True)
class LexicalRule:
    """A predicate on tokens and the message shown when it fails."""

    message: str
    rule: Callable[[Token], bool]

    def __call__(self, token: Token) -> bool:
        return self.rule(token)


class LexicalAnalyzer:
    """Checks tokens against the rules registered for their type."""

    def __init__(self) -> None:
        self._rules: dict[TokenType, list[LexicalRule]] = {}

    def check(self, token: Token) -> CompileError | None:
        """Return the first error for ``token``, or None when it is valid."""
        if token.type is TokenType.GARBAGE:
            return CompileError(
                "Undefined token " + token.text,
                token.line,
                token.column,
                ErrorType.LEXICAL,
            )
        for rule in self._rules.get(token.type, []):
            if not rule(token):
                return CompileError(
                    rule.message, token.line, token.column, ErrorType.LEXICAL
                )
        return None

    def add_rule(self, token_type: TokenType, rule: LexicalRule) -> None:
        """Register a rule for tokens of ``token_type``."""
        self._rules.setdefault(token_type, []).append(rule)