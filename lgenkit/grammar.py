"""Context-free grammars with FIRST and FOLLOW sets."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable, Sequence


class SymbolType(Enum):
    """Whether a grammar symbol is a terminal or a non terminal."""

    TERMINAL = 0
    NON_TERMINAL = 1


@dataclass(frozen=True)
class GrammarSymbol:
    """A grammar symbol; ``epsilon`` marks the empty-string terminal."""

    symbol: str
    type: SymbolType
    epsilon: bool = False


class GrammarError(Exception):
    """Raised when a grammar is used or built incorrectly."""


Production = tuple[GrammarSymbol, ...]
Rule = Callable[[list, str], Any]


def _contains(symbols: Iterable[GrammarSymbol], symbol: GrammarSymbol) -> bool:
    return any(s.symbol == symbol.symbol for s in symbols)


class Grammar:
    """A grammar whose first non terminal is its start symbol."""

    def __init__(self, start: GrammarSymbol) -> None:
        self._terminals: list[GrammarSymbol] = []
        self._non_terminals: list[GrammarSymbol] = [start]
        self._productions: dict[str, list[Production]] = {}
        self._firsts: dict[str, list[GrammarSymbol]] = {}
        self._follows: dict[str, list[GrammarSymbol]] = {}

    @property
    def terminals(self) -> list[GrammarSymbol]:
        return list(self._terminals)

    @property
    def non_terminals(self) -> list[GrammarSymbol]:
        return list(self._non_terminals)

    @property
    def start_symbol(self) -> GrammarSymbol:
        return self._non_terminals[0]

    def add_production(
        self, symbol: GrammarSymbol, production: Sequence[GrammarSymbol]
    ) -> None:
        """Add ``symbol -> production``; raises GrammarError on bad or repeated input."""
        if symbol.type is SymbolType.TERMINAL:
            raise GrammarError("the head of a production must be a non terminal")
        production = tuple(production)
        existing = self._productions.setdefault(symbol.symbol, [])
        if production in existing:
            raise GrammarError("the given production already exists")
        self._register(symbol, self._non_terminals)
        for item in production:
            if item.type is SymbolType.NON_TERMINAL:
                self._register(item, self._non_terminals)
            else:
                self._register(item, self._terminals)
        existing.append(production)

    def get_productions(self, symbol: GrammarSymbol) -> list[Production]:
        """Productions of ``symbol``; empty for terminals."""
        if symbol.type is not SymbolType.NON_TERMINAL:
            return []
        return list(self._productions.get(symbol.symbol, []))

    def make_firsts_and_follows(self, endmarker: GrammarSymbol) -> None:
        """Compute FIRST and FOLLOW sets, ``endmarker`` following the start symbol."""
        self._make_firsts()
        self._make_follows(endmarker)

    def first(self, symbols: Iterable[GrammarSymbol]) -> list[GrammarSymbol]:
        """FIRST set of a sequence of symbols; empty for an empty sequence."""
        symbols = list(symbols)
        result: list[GrammarSymbol] = []
        derives_epsilon = bool(symbols)
        for item in symbols:
            for candidate in self._firsts.get(item.symbol, []):
                if not candidate.epsilon and not _contains(result, candidate):
                    result.append(candidate)
            derives_epsilon = self._derives_epsilon(item)
            if not derives_epsilon:
                break
        if derives_epsilon:
            result.append(self._epsilon_terminal())
        return result

    def follow(self, symbol: GrammarSymbol) -> list[GrammarSymbol]:
        """FOLLOW set of a non terminal."""
        return list(self._follows.get(symbol.symbol, []))

    @staticmethod
    def _register(symbol: GrammarSymbol, target: list[GrammarSymbol]) -> None:
        if not _contains(target, symbol):
            target.append(symbol)

    def _derives_epsilon(self, symbol: GrammarSymbol) -> bool:
        return any(
            len(production) == 1 and production[0].epsilon
            for production in self.get_productions(symbol)
        )

    def _epsilon_terminal(self) -> GrammarSymbol:
        for terminal in self._terminals:
            if terminal.epsilon:
                return terminal
        raise GrammarError("the grammar has no epsilon terminal")

    def _make_firsts(self) -> None:
        self._firsts = {}
        for symbol in [*self._terminals, *self._non_terminals]:
            if symbol.type is SymbolType.TERMINAL:
                self._firsts[symbol.symbol] = [symbol]
            elif self._derives_epsilon(symbol):
                self._firsts[symbol.symbol] = [self._epsilon_terminal()]
            else:
                self._firsts[symbol.symbol] = []
        changed = True
        while changed:
            changed = False
            for head in self._non_terminals:
                for production in self._productions.get(head.symbol, []):
                    if self._extend_first(head, production):
                        changed = True
                if changed:
                    break

    def _extend_first(self, head: GrammarSymbol, production: Production) -> bool:
        target = self._firsts.setdefault(head.symbol, [])
        added = False
        all_epsilon = True
        for item in production:
            for candidate in self._firsts.get(item.symbol, []):
                if not candidate.epsilon and not _contains(target, candidate):
                    target.append(candidate)
                    added = True
            if not self._derives_epsilon(item):
                all_epsilon = False
                break
        if all_epsilon:
            epsilon = self._epsilon_terminal()
            if not _contains(target, epsilon):
                target.append(epsilon)
                added = True
        return added

    def _make_follows(self, endmarker: GrammarSymbol) -> None:
        self._follows = {nt.symbol: [] for nt in self._non_terminals}
        self._follows[self.start_symbol.symbol].append(endmarker)
        while any([self._make_follow_for(nt) for nt in self._non_terminals]):
            pass

    def _make_follow_for(self, symbol: GrammarSymbol) -> bool:
        target = self._follows.setdefault(symbol.symbol, [])
        changed = False
        for head in self._non_terminals:
            for production in self._productions.get(head.symbol, []):
                index = next(
                    (i for i, s in enumerate(production) if s.symbol == symbol.symbol),
                    None,
                )
                if index is None:
                    continue
                rest_first = self.first(production[index + 1:])
                candidates: list[GrammarSymbol] = []
                if index == len(production) - 1 or any(s.epsilon for s in rest_first):
                    candidates.extend(self._follows.get(head.symbol, []))
                candidates.extend(rest_first)
                for candidate in candidates:
                    if not candidate.epsilon and not _contains(target, candidate):
                        target.append(candidate)
                        changed = True
        return changed


class AttributedGrammar(Grammar):
    """A grammar whose productions carry reduction rules."""

    def __init__(self, start: GrammarSymbol) -> None:
        super().__init__(start)
        self._rules: dict[str, Rule] = {}

    @property
    def rules(self) -> dict[str, Rule]:
        return dict(self._rules)

    def get_production_id(self, head: str, production: Iterable[str]) -> str:
        """Identifier of a production: head, ``--->`` and the joined body."""
        return head + "--->" + "".join(production)

    def add_production(
        self, symbol: GrammarSymbol, production: Sequence[GrammarSymbol], rule: Rule
    ) -> None:
        """Add a production together with its reduction rule."""
        production = tuple(production)
        production_id = self.get_production_id(
            symbol.symbol, [s.symbol for s in production]
        )
        self._rules[production_id] = rule
        super().add_production(symbol, production)

    def get_production_rule(self, production_id: str) -> Rule:
        """The rule of a production; raises GrammarError when unknown."""
        try:
            return self._rules[production_id]
        except KeyError:
            raise GrammarError(f"no production found for {production_id!r}") from None