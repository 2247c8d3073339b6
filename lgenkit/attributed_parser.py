"""SLR(1) parser whose reductions come from an attributed grammar."""

from __future__ import annotations

from typing import Sequence

from .grammar import AttributedGrammar, Grammar
from .grammar_ops import augment_attributed_grammar
from .parser import ParserSLR, Reductor


class AttributedParserSLR(ParserSLR):
    """An SLR(1) parser that uses the rules attached to each production.

    The reduction functions are those of the grammar; they cannot be
    replaced afterwards.
    """

    _quote = "'"

    def _augment(self, grammar: Grammar) -> Grammar:
        if not isinstance(grammar, AttributedGrammar):
            raise TypeError("an attributed grammar is required")
        return augment_attributed_grammar(grammar)

    def _initial_reductions(self, grammar: Grammar) -> dict[str, Reductor]:
        assert isinstance(grammar, AttributedGrammar)
        return dict(grammar.rules)

    def _reduction_id(self, new_symbol: str, symbols: Sequence[str]) -> str:
        assert isinstance(self._grammar, AttributedGrammar)
        return self._grammar.get_production_id(new_symbol, symbols)

    def parse(self, token, collector) -> None:
        """Feed one token, reducing with the grammar's production rules."""
        super().parse(token, collector)

    def set_reduction(self, reduction_id: str, reductor: Reductor) -> None:
        """Always raises: reductions are fixed by the attributed grammar."""
        raise TypeError(
            "reductions of an attributed parser come from its grammar"
        )