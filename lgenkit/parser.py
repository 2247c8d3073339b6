"""SLR(1) parser built from a grammar."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Sequence

from .grammar import Grammar, GrammarSymbol
from .grammar_ops import augment_grammar
from .items import ItemLR0Collection, canonical_lr0_collection, goto
from .lexical import CompileError, ErrorCollector, ErrorType
from .tokens import Token

AstEngine = Callable[[Token, str], Any]
Reductor = Callable[[list, str], Any]


class ParserAction(Enum):
    """What the parser does on a symbol."""

    SHIFT = 0
    REDUCE = 1
    ACCEPT = 2


@dataclass(frozen=True)
class Action:
    """An entry of the action table."""

    action: ParserAction
    next_state: str = ""


@dataclass(frozen=True)
class Reduction:
    """An entry of the reduce table: the head and the body to reduce."""

    new_symbol: str
    symbols: tuple[str, ...]


class ParserSLR:
    """An SLR(1) parser fed one token at a time.

    AST nodes produced by the engine and the reductors expose ``symbol``,
    ``line`` and ``column``.
    """

    _quote = ""

    def __init__(
        self, grammar: Grammar, endmarker: GrammarSymbol, ast_engine: AstEngine
    ) -> None:
        augmented = self._augment(grammar)
        augmented.make_firsts_and_follows(endmarker)
        self._grammar = augmented
        self._ast_engine = ast_engine
        self._endmarker = endmarker.symbol
        self._terminals = {t.symbol for t in augmented.terminals}

        collections = canonical_lr0_collection(augmented)
        state_ids = [f"I{i}" for i in range(len(collections))]
        index_of = {c.id: i for i, c in enumerate(collections)}
        start_index = next(
            (
                i
                for i, c in enumerate(collections)
                if all(not item.left for item in c)
            ),
            0,
        )

        self._action: dict[str, dict[str, Action]] = {}
        self._reduce: dict[str, dict[str, Reduction]] = {}
        self._transitions: dict[str, dict[str, str]] = {}

        def targets(collection, symbols):
            found = []
            for symbol in symbols:
                target = goto(collection, symbol, augmented)
                if target is not None:
                    found.append((symbol.symbol, state_ids[index_of[target.id]]))
            return found

        start_symbol = augmented.start_symbol.symbol
        for state_id, collection in zip(state_ids, collections):
            shifts = None
            for item in collection:
                if item.right:
                    if shifts is None:
                        shifts = targets(collection, augmented.terminals)
                    for symbol, target in shifts:
                        self._shift(state_id, symbol, target)
                elif item.head.symbol != start_symbol:
                    reduction = Reduction(
                        item.head.symbol, tuple(s.symbol for s in item.left)
                    )
                    for terminal in augmented.follow(item.head):
                        self._action.setdefault(state_id, {})[terminal.symbol] = Action(
                            ParserAction.REDUCE
                        )
                        self._reduce.setdefault(state_id, {})[terminal.symbol] = reduction
                else:
                    self._action.setdefault(state_id, {})[self._endmarker] = Action(
                        ParserAction.ACCEPT
                    )
        for state_id, collection in zip(state_ids, collections):
            for symbol, target in targets(collection, augmented.non_terminals):
                self._shift(state_id, symbol, target)

        self._start_state = state_ids[start_index]
        self._states_stack: list[str | None] = [self._start_state]
        self._stack: list[Any] = []
        self._reduction_functions: dict[str, Reductor] = self._initial_reductions(
            augmented
        )

    def _augment(self, grammar: Grammar) -> Grammar:
        return augment_grammar(grammar)

    def _initial_reductions(self, grammar: Grammar) -> dict[str, Reductor]:
        return {}

    def _reduction_id(self, new_symbol: str, symbols: Sequence[str]) -> str:
        return new_symbol + "->" + "".join(symbols)

    def _shift(self, state_id: str, symbol: str, target: str) -> None:
        self._transitions.setdefault(state_id, {})[symbol] = target
        self._action.setdefault(state_id, {})[symbol] = Action(
            ParserAction.SHIFT, target
        )

    @property
    def end_marker(self) -> str:
        return self._endmarker

    @property
    def start_state(self) -> str:
        return self._start_state

    @property
    def action_table(self) -> dict[str, dict[str, Action]]:
        return self._action

    @property
    def reduce_table(self) -> dict[str, dict[str, Reduction]]:
        return self._reduce

    @property
    def ast(self) -> Any:
        """The node at the bottom of the stack: the parse result."""
        if not self._stack:
            raise LookupError("nothing has been parsed")
        return self._stack[0]

    def set_reduction(self, reduction_id: str, reductor: Reductor) -> None:
        """Set the function that builds the node for a production."""
        self._reduction_functions[reduction_id] = reductor

    def parse(self, token: Token, collector: ErrorCollector) -> None:
        """Feed one token; unexpected symbols are reported to ``collector``."""
        node = self._ast_engine(token, self._endmarker)
        while True:
            top = self._states_stack[-1]
            row = self._action.get(top, {})
            action = row.get(node.symbol)
            if action is None:
                collector.add_error(self._unexpected(node, row))
                return
            if action.action is ParserAction.REDUCE:
                self._apply_reduction(top, node.symbol)
                continue
            self._states_stack.append(self._transitions.get(top, {}).get(node.symbol))
            self._stack.append(node)
            return

    def _apply_reduction(self, state: str, lookahead: str) -> None:
        reduction = self._reduce[state][lookahead]
        reduction_id = self._reduction_id(reduction.new_symbol, reduction.symbols)
        reductor = self._reduction_functions.get(reduction_id)
        if reductor is None:
            raise LookupError("There is not a reduction defined for " + reduction_id)
        count = len(reduction.symbols)
        cut = len(self._stack) - count
        children = self._stack[cut:]
        del self._stack[cut:]
        new_node = reductor(children, reduction.new_symbol)
        self._stack.append(new_node)
        del self._states_stack[len(self._states_stack) - count:]
        top = self._states_stack[-1]
        self._states_stack.append(self._transitions.get(top, {}).get(new_node.symbol))

    def _unexpected(self, node: Any, row: dict[str, Action]) -> CompileError:
        q = self._quote
        expected = "expected " + "".join(
            f"{q}{symbol}{q}," for symbol in row if symbol in self._terminals
        )
        if node.symbol == self._endmarker:
            message = "Unexpected EOF symbol ," + expected
        else:
            message = f"Unexpected symbol {q}{node.symbol}{q}," + expected
        return CompileError(message, node.line, node.column, ErrorType.GRAMMATICAL)


def _encode_action(action: Action) -> list[str]:
    if action.action is ParserAction.SHIFT:
        return ["SHIFT", action.next_state]
    return [action.action.name]


def dump_parser(parser: ParserSLR, path: str | Path = "") -> Path:
    """Write the parser tables as PARSER.json into directory ``path``.

    An empty path means the current directory. Returns the written file.
    """
    directory = Path(path) if path else Path.cwd()
    if not directory.exists():
        raise FileNotFoundError(f"the given path does not exist: {directory}")
    if not directory.is_dir():
        raise NotADirectoryError(f"the given path is not a directory: {directory}")
    document = {
        "START": parser.start_state,
        "ENDMARKER": parser.end_marker,
        "ACTION": {
            state: {symbol: _encode_action(act) for symbol, act in row.items()}
            for state, row in parser.action_table.items()
        },
        "REDUCE": {
            state: {
                symbol: {"head": red.new_symbol, "symbols": list(red.symbols)}
                for symbol, red in row.items()
            }
            for state, row in parser.reduce_table.items()
        },
    }
    target = directory / "PARSER.json"
    target.write_text(json.dumps(document), encoding="utf-8")
    return target