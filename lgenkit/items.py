"""LR(0) items, their collections and the canonical collection of a grammar."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Sequence

from .grammar import Grammar, GrammarError, GrammarSymbol
from .tools import compare_string, merge_sort


@dataclass(frozen=True)
class ItemLR0:
    """An item ``head ---> left . right``."""

    head: GrammarSymbol
    left: tuple[GrammarSymbol, ...] = ()
    right: tuple[GrammarSymbol, ...] = ()
    id: str = field(init=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "left", tuple(self.left))
        object.__setattr__(self, "right", tuple(self.right))
        parts = [
            self.head.symbol,
            "--->",
            *(s.symbol for s in self.left),
            ".",
            *(s.symbol for s in self.right),
        ]
        object.__setattr__(self, "id", " ".join(parts))


class ItemLR0Collection:
    """A non-empty set of items kept sorted by their identifiers."""

    def __init__(self, items: Iterable[ItemLR0]) -> None:
        ordered = merge_sort(list(items), lambda a, b: compare_string(a.id, b.id))
        if not ordered:
            raise ValueError("an item collection needs at least one item")
        self._items = tuple(ordered)
        self._id = ordered[0].id + "".join("-" + item.id for item in ordered)

    @property
    def id(self) -> str:
        return self._id

    @property
    def items(self) -> tuple[ItemLR0, ...]:
        return self._items

    def __iter__(self) -> Iterator[ItemLR0]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ItemLR0Collection):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"ItemLR0Collection({self._id!r})"


def lr0_collection(
    head: GrammarSymbol, production: Sequence[GrammarSymbol]
) -> ItemLR0Collection:
    """All items of one production, one for each position of the dot."""
    production = tuple(production)
    return ItemLR0Collection(
        ItemLR0(head, production[:i], production[i:])
        for i in range(len(production) + 1)
    )


def closure(items: Iterable[ItemLR0], grammar: Grammar) -> ItemLR0Collection:
    """The LR(0) closure of a set of items."""
    result = list(items)
    seen = {item.id for item in result}
    pending = list(result)
    while pending:
        item = pending.pop()
        if not item.right:
            continue
        following = item.right[0]
        for production in grammar.get_productions(following):
            new_item = ItemLR0(following, (), production)
            if new_item.id not in seen:
                seen.add(new_item.id)
                result.append(new_item)
                pending.append(new_item)
    return ItemLR0Collection(result)


def goto(
    items: Iterable[ItemLR0], symbol: GrammarSymbol, grammar: Grammar
) -> ItemLR0Collection | None:
    """Closure of the items with the dot moved over ``symbol``; None if none move."""
    moved = [
        ItemLR0(item.head, item.left + (item.right[0],), item.right[1:])
        for item in items
        if item.right and item.right[0].symbol == symbol.symbol
    ]
    if not moved:
        return None
    return closure(moved, grammar)


def canonical_lr0_collection(grammar: Grammar) -> list[ItemLR0Collection]:
    """The canonical LR(0) collection of an augmented grammar."""
    start = grammar.start_symbol
    productions = grammar.get_productions(start)
    if not productions or not productions[0]:
        raise GrammarError("the start symbol needs a non-empty production")
    start_item = ItemLR0(start, (), (productions[0][0],))
    sets = [closure([start_item], grammar)]
    known = {sets[0].id}
    symbols = [nt for nt in grammar.non_terminals if nt.symbol != start.symbol]
    symbols.extend(grammar.terminals)
    for collection in sets:
        for symbol in symbols:
            target = goto(collection, symbol, grammar)
            if target is not None and target.id not in known:
                known.add(target.id)
                sets.append(target)
    return sets


def format_collection(collection: ItemLR0Collection) -> str:
    """A readable listing of the items, one per line, followed by blank lines."""
    lines = []
    for item in collection:
        left = " ".join(s.symbol for s in item.left)
        right = " ".join(s.symbol for s in item.right)
        lines.append(f"{item.head.symbol} ----> [{left}] [{right}]\n")
    return "".join(lines) + "\n\n"