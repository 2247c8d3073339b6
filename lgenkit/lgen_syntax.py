"""Syntax of token declarations: the attributed grammar, its AST engine and parser."""

from __future__ import annotations

from typing import Any, Sequence

from .ast_nodes import (
    AssignmentAST,
    AtomicAST,
    StringSequenceAST,
    TokenDeclarationAST,
    VariableAST,
)
from .attributed_parser import AttributedParserSLR
from .grammar import AttributedGrammar, GrammarSymbol
from .grammar_ops import get_words_grammar
from .lgen_symbols import (
    CLOSED_BRACKET,
    COMMA,
    END_SYMBOL,
    EQUAL,
    OPEN_BRACKET,
    STRING_LIST,
    STRING_SEQUENCE,
    TEXT,
    TOKEN,
    TOKEN_DECLARATION,
    TOKEN_KEYWORD,
    VARIABLE,
)
from .tokens import Token, TokenType


def _expect(nodes: Sequence[Any], *expected: GrammarSymbol) -> None:
    if len(nodes) != len(expected):
        raise ValueError(
            f"expected {len(expected)} nodes to reduce, got {len(nodes)}"
        )
    for node, symbol in zip(nodes, expected):
        if node.symbol != symbol.symbol:
            raise ValueError(
                f"Unexpected symbol '{node.symbol}', expected {symbol.symbol}"
            )


def _reduce_token(nodes: list, new_symbol: str) -> Any:
    _expect(nodes, TOKEN_DECLARATION, EQUAL, STRING_LIST)
    declaration, _, sequence = nodes
    declaration.token_grammar = get_words_grammar(sequence.items)
    declaration.update_symbol(new_symbol)
    return declaration


def _reduce_token_declaration(nodes: list, new_symbol: str) -> Any:
    _expect(nodes, TOKEN_KEYWORD, VARIABLE)
    keyword = nodes[0]
    return TokenDeclarationAST(TOKEN_DECLARATION.symbol, keyword.line, keyword.column)


def _reduce_string_list(nodes: list, new_symbol: str) -> Any:
    _expect(nodes, OPEN_BRACKET, STRING_SEQUENCE, CLOSED_BRACKET)
    sequence = nodes[1]
    sequence.update_symbol(new_symbol)
    return sequence


def _reduce_single_text(nodes: list, new_symbol: str) -> Any:
    _expect(nodes, TEXT)
    text = nodes[0]
    value = text.eval()
    return StringSequenceAST(
        STRING_SEQUENCE.symbol,
        text.line,
        text.column,
        items=[value if isinstance(value, str) else ""],
    )


def _reduce_appended_text(nodes: list, new_symbol: str) -> Any:
    _expect(nodes, STRING_SEQUENCE, COMMA, TEXT)
    sequence, _, text = nodes
    value = text.eval()
    sequence.items.append(value if isinstance(value, str) else "")
    return sequence


def token_grammar() -> AttributedGrammar:
    """The attributed grammar of ``token name = ["a", "b", ...]`` declarations."""
    grammar = AttributedGrammar(TOKEN)
    grammar.add_production(TOKEN, [TOKEN_DECLARATION, EQUAL, STRING_LIST], _reduce_token)
    grammar.add_production(
        TOKEN_DECLARATION, [TOKEN_KEYWORD, VARIABLE], _reduce_token_declaration
    )
    grammar.add_production(
        STRING_LIST, [OPEN_BRACKET, STRING_SEQUENCE, CLOSED_BRACKET], _reduce_string_list
    )
    grammar.add_production(STRING_SEQUENCE, [TEXT], _reduce_single_text)
    grammar.add_production(
        STRING_SEQUENCE, [STRING_SEQUENCE, COMMA, TEXT], _reduce_appended_text
    )
    return grammar


_SYMBOL_TEXTS = frozenset({"[", "]", ";", ","})


def ast_engine(token: Token, endmarker: str) -> Any:
    """Build the leaf node for a token; raises ValueError for unknown tokens."""
    line, column, text = token.line, token.column, token.text
    if token.type is TokenType.VARIABLE:
        return VariableAST("variable", line, column, name=text)
    if token.type is TokenType.KEYWORD:
        if text == "token":
            return TokenDeclarationAST(text, line, column)
        raise ValueError("Unknown keyword: " + text)
    if token.type is TokenType.SYMBOL:
        if text in _SYMBOL_TEXTS:
            return AtomicAST(text, line, column, value=text)
        raise ValueError("Unknown symbol: " + text)
    if token.type is TokenType.OPERATOR:
        if text == "=":
            return AssignmentAST(text, line, column)
        raise ValueError("Unknown symbol " + text)
    if token.type is TokenType.LITERAL_STRING:
        return AtomicAST("Text", line, column, value=text)
    if token.type is TokenType.END:
        return AtomicAST(text, line, column, value=text)
    raise ValueError("Unknown token: " + text)


def build_parser() -> AttributedParserSLR:
    """A fresh SLR(1) parser for token declarations, ending at ``$``."""
    return AttributedParserSLR(token_grammar(), END_SYMBOL, ast_engine)