"""Builders and operations that produce new grammars."""

from __future__ import annotations

from contextlib import suppress
from typing import Iterable, Sequence

from .grammar import (
    AttributedGrammar,
    Grammar,
    GrammarError,
    GrammarSymbol,
    SymbolType,
)


def add_word_to_grammar(grammar: Grammar, word: str) -> Grammar:
    """Add a chain of productions recognising ``word`` from the start symbol."""
    head = grammar.start_symbol
    for index, char in enumerate(word):
        tail = GrammarSymbol(f"{word}_next_{char}_{index}", SymbolType.NON_TERMINAL)
        terminal = GrammarSymbol(char, SymbolType.TERMINAL)
        body = [terminal, tail] if index < len(word) - 1 else [terminal]
        with suppress(GrammarError):
            grammar.add_production(head, body)
        head = tail
    return grammar


def get_words_grammar(words: Iterable[str]) -> Grammar:
    """A regular grammar that recognises exactly the given words."""
    grammar = Grammar(GrammarSymbol("start_symbol", SymbolType.NON_TERMINAL))
    for word in words:
        add_word_to_grammar(grammar, word)
    return grammar


def _copy_productions(source: Grammar, target: Grammar) -> None:
    for head in source.non_terminals:
        for production in source.get_productions(head):
            with suppress(GrammarError):
                target.add_production(head, production)


def _copy_attributed_productions(
    source: AttributedGrammar, target: AttributedGrammar
) -> None:
    for head in source.non_terminals:
        for production in source.get_productions(head):
            production_id = source.get_production_id(
                head.symbol, [s.symbol for s in production]
            )
            rule = source.rules.get(production_id)
            with suppress(GrammarError):
                target.add_production(head, production, rule)


def grammar_union(grammars: Sequence[Grammar], start_symbol_id: str) -> Grammar:
    """A grammar whose new start symbol derives each grammar's start symbol."""
    if len(grammars) < 2:
        raise ValueError("grammars must have at least two elements")
    start = GrammarSymbol(start_symbol_id, SymbolType.NON_TERMINAL)
    result = Grammar(start)
    for grammar in grammars:
        with suppress(GrammarError):
            result.add_production(start, [grammar.start_symbol])
        _copy_productions(grammar, result)
    return result


def attributed_grammar_union(
    grammars: Sequence[AttributedGrammar], start_symbol_id: str
) -> AttributedGrammar:
    """Merge the productions and rules of attributed grammars under a new start symbol."""
    if len(grammars) < 2:
        raise ValueError("grammars must have at least two elements")
    start = GrammarSymbol(start_symbol_id, SymbolType.NON_TERMINAL)
    result = AttributedGrammar(start)
    for grammar in grammars:
        _copy_attributed_productions(grammar, result)
    return result


def augment_grammar(grammar: Grammar) -> Grammar:
    """Return the grammar with a fresh start symbol deriving the old one."""
    old_start = grammar.start_symbol
    new_start = GrammarSymbol(old_start.symbol + "_new_start", SymbolType.NON_TERMINAL)
    result = Grammar(new_start)
    result.add_production(new_start, [old_start])
    _copy_productions(grammar, result)
    return result


def augment_attributed_grammar(grammar: AttributedGrammar) -> AttributedGrammar:
    """Augment an attributed grammar; the new start rule relabels its only child."""
    old_start = grammar.start_symbol
    new_start = GrammarSymbol(old_start.symbol + "_new_start", SymbolType.NON_TERMINAL)
    result = AttributedGrammar(new_start)

    def relabel(asts, new_symbol):
        asts[0].update_symbol(new_symbol)
        return asts[0]

    result.add_production(new_start, [old_start], relabel)
    _copy_attributed_productions(grammar, result)
    return result