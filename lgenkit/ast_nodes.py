"""Syntax tree nodes built while parsing token declarations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class AstNode:
    """A node labelled with a grammar symbol and a source position."""

    symbol: str
    line: int
    column: int

    def update_symbol(self, symbol: str) -> None:
        """Relabel the node with another grammar symbol."""
        self.symbol = symbol

    def eval(self, context: Any = None, collector: Any = None) -> Any:
        """Value of the node; plain nodes have none."""
        return None


@dataclass
class AtomicAST(AstNode):
    """A leaf holding the text of a token."""

    value: Any = None

    def eval(self, context: Any = None, collector: Any = None) -> Any:
        return self.value


@dataclass
class VariableAST(AstNode):
    """A named variable and the value bound to it."""

    name: str = ""
    value: Any = None

    def eval(self, context: Any = None, collector: Any = None) -> Any:
        return self.value


@dataclass
class AssignmentAST(AstNode):
    """An assignment between two nodes; evaluating it yields nothing."""

    left: Any = None
    right: Any = None


@dataclass
class StringSequenceAST(AstNode):
    """A sequence of string literals."""

    items: list[str] = field(default_factory=list)

    def eval(self, context: Any = None, collector: Any = None) -> Any:
        return self.items


@dataclass
class TokenDeclarationAST(AstNode):
    """A token declaration and the grammar that recognises the token."""

    token_grammar: Any = None
    token_name: str = ""

    def eval(self, context: Any = None, collector: Any = None) -> Any:
        return self.token_grammar