"""Grammar symbols of the token language and the grammars of its tokens."""

from __future__ import annotations

import string

from .grammar import Grammar, GrammarSymbol, SymbolType
from .grammar_ops import get_words_grammar


def _nt(name: str) -> GrammarSymbol:
    return GrammarSymbol(name, SymbolType.NON_TERMINAL)


def _t(name: str) -> GrammarSymbol:
    return GrammarSymbol(name, SymbolType.TERMINAL)


# Non terminals
TOKEN = _nt("TOKEN")
TOKEN_DECLARATION = _nt("TOKEN_DECLARATION")
STRING_SEQUENCE = _nt("STRING_SEQUENCE")
STRING_LIST = _nt("STRING_LIST")
RIGHT_REGULAR_GRAMMAR = _nt("RIGHT_REGULAR_GRAMMAR")
GRAMMAR_PRODUCTION = _nt("GRAMMAR_PRODUCTION")
RIGHT_REGULAR_GRAMMAR_PRODUCTION = _nt("RIGHT_REGULAR_GRAMMAR_PRODUCTION")
GRAMMAR_PRODUCTION_SEQUENCE = _nt("GRAMMAR_PRODUCTION_SEQUENCE")
RIGHT_REGULAR_GRAMMAR_PRODUCTION_SEQUENCE = _nt("RIGHT_REGULAR_GRAMMAR_PRODUCTION")

# Terminals
VARIABLE = _t("variable")
EQUAL = _t("=")
TOKEN_KEYWORD = _t("token")
TEXT = _t("Text")
COMMA = _t(",")
SEMICOLON = _t(";")
OPEN_BRACKET = _t("[")
CLOSED_BRACKET = _t("]")
END_SYMBOL = _t("$")
GRAMMAR_NON_TERMINAL = _t("NonTerminal")
GRAMMAR_TERMINAL = _t("Terminal")
GRAMMAR_PRODUCTION_ARROW = _t("--->")
GRAMMAR_PRODUCTION_CONCATENATION = _t("|")
LESS_THAN = _t("<")
GREATER_THAN = _t(">")

KEYWORDS = ("token",)
OPERATORS = ("=", "<", ">")
SYMBOLS = ("[", "]", ";", ",", "--->", "|")

_ALPHANUMERIC = string.ascii_uppercase + string.ascii_lowercase + string.digits


def keyword_token_grammar() -> Grammar:
    """Grammar recognising the keywords."""
    return get_words_grammar(KEYWORDS)


def operator_token_grammar() -> Grammar:
    """Grammar recognising the operators."""
    return get_words_grammar(OPERATORS)


def symbol_token_grammar() -> Grammar:
    """Grammar recognising the punctuation symbols."""
    return get_words_grammar(SYMBOLS)


def variable_token_grammar() -> Grammar:
    """Grammar recognising non-empty runs of letters and digits."""
    variable = _nt("Variable")
    text = _nt("Text")
    epsilon = GrammarSymbol("epsilon", SymbolType.TERMINAL, epsilon=True)
    grammar = Grammar(variable)
    for char in _ALPHANUMERIC:
        grammar.add_production(variable, [_t(char), text])
        grammar.add_production(text, [_t(char), text])
    grammar.add_production(text, [epsilon])
    return grammar


def literal_string_token_grammar() -> Grammar:
    """Grammar recognising double-quoted strings of letters, digits and spaces."""
    string_symbol = _nt("String")
    text = _nt("Text")
    quote = _t('"')
    grammar = Grammar(string_symbol)
    grammar.add_production(string_symbol, [quote, text])
    for char in _ALPHANUMERIC + " ":
        grammar.add_production(text, [_t(char), text])
    grammar.add_production(text, [quote])
    return grammar