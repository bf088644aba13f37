from __future__ import annotations

import random
from typing import Iterable, Iterator, List, Optional, Tuple

from .card import Card, CardKind
from .errors import ConfigurationError
from .rules import (
    BOMB_SYMBOL,
    HIDDEN_SYMBOL,
    JOLLY_SYMBOL,
    PAIR_POINTS_MAX,
    PAIR_POINTS_MIN,
)

Coord = Tuple[int, int]  # 1-based (row, col)

# Printable Latin-1 characters usable as pair symbols.
SYMBOL_POOL: Tuple[str, ...] = tuple(
    ch for ch in map(chr, range(256))
    if ch.isprintable() and not ch.isspace() and ch not in (HIDDEN_SYMBOL, BOMB_SYMBOL, JOLLY_SYMBOL)
)


class Grid:
    """A fixed-size board of optional card slots.

    Cells are stored in a flat row-major list; the public API takes 1-based
    (row, col) coordinates and translates them to 0-based indices.
    """

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 1 or cols < 1:
            raise ConfigurationError(f"Grid dimensions must be positive, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self._cells: List[Optional[Card]] = [None] * (rows * cols)

    @property
    def size(self) -> int:
        return self.rows * self.cols

    def in_bounds(self, coord: Coord) -> bool:
        r, c = coord
        return 1 <= r <= self.rows and 1 <= c <= self.cols

    def index(self, coord: Coord) -> int:
        """Flat 0-based index of a 1-based coordinate; IndexError when out of bounds."""
        if not self.in_bounds(coord):
            raise IndexError(f"Coordinate {coord} outside {self.rows}x{self.cols} grid")
        r, c = coord
        return (r - 1) * self.cols + (c - 1)

    def coords(self) -> Iterable[Coord]:
        for r in range(1, self.rows + 1):
            for c in range(1, self.cols + 1):
                yield (r, c)

    def get_card(self, coord: Coord) -> Optional[Card]:
        return self._cells[self.index(coord)]

    def set_card(self, coord: Coord, card: Optional[Card]) -> None:
        self._cells[self.index(coord)] = card

    def cards(self) -> Iterator[Tuple[Coord, Card]]:
        """Occupied cells in row-major order."""
        for coord in self.coords():
            card = self._cells[self.index(coord)]
            if card is not None:
                yield coord, card

    def occupied_count(self) -> int:
        return sum(1 for card in self._cells if card is not None)

    def is_empty(self) -> bool:
        return all(card is None for card in self._cells)

    def find(self, card: Card) -> Optional[Coord]:
        for coord, resident in self.cards():
            if resident is card:
                return coord
        return None

    def pop_card(self, card: Card) -> List[Coord]:
        """Clears the cell holding `card` and every cell whose card matches it.

        For a NORMAL card this removes the whole pair; a BOMB or JOLLY only ever
        removes itself. Returns the cleared coordinates (empty if nothing left).
        """
        cleared: List[Coord] = []
        for coord, resident in list(self.cards()):
            if resident is card or resident.matches(card):
                self.set_card(coord, None)
                cleared.append(coord)
        return cleared

    def flip_all_cards(self) -> None:
        """Turns every remaining card face-down."""
        for _, card in self.cards():
            card.flip(False)

    def contains_symbol(self, symbol: str) -> bool:
        return any(card.symbol == symbol for _, card in self.cards())

    def push_in_random_free_cell(self, card: Card, rng: random.Random) -> Coord:
        """Places a card in a uniformly random empty cell (rejection sampling)."""
        if self.occupied_count() >= self.size:
            raise ValueError('No free cell left in the grid')
        while True:
            coord = (rng.randint(1, self.rows), rng.randint(1, self.cols))
            if self.get_card(coord) is None:
                self.set_card(coord, card)
                return coord

    def fill(self, rng: random.Random) -> None:
        """Populates an empty grid with (cells - 2) / 2 pairs, one jolly and one bomb."""
        if self.size % 2 != 0 or self.size < 2:
            raise ConfigurationError(f"Cannot fill a {self.rows}x{self.cols} grid: cell count must be even and >= 2")
        if not self.is_empty():
            raise ValueError('Grid is already filled')
        pairs = (self.size - 2) // 2
        if pairs > len(SYMBOL_POOL):
            raise ConfigurationError(f"Grid needs {pairs} symbols, only {len(SYMBOL_POOL)} available")
        for symbol in rng.sample(SYMBOL_POOL, pairs):
            points = rng.randint(PAIR_POINTS_MIN, PAIR_POINTS_MAX)
            self.push_in_random_free_cell(Card(symbol, points), rng)
            self.push_in_random_free_cell(Card(symbol, points), rng)
        self.push_in_random_free_cell(Card.jolly(), rng)
        self.push_in_random_free_cell(Card.bomb(), rng)

    def count_kind(self, kind: CardKind) -> int:
        return sum(1 for _, card in self.cards() if card.kind is kind)

    def pretty(self, reveal_all: bool = False) -> str:
        """Plain-text view: '!' for hidden cards, blank for empty cells."""
        lines: List[str] = []
        for r in range(1, self.rows + 1):
            row: List[str] = []
            for c in range(1, self.cols + 1):
                card = self.get_card((r, c))
                if card is None:
                    row.append(' ')
                elif reveal_all:
                    row.append(card.symbol)
                else:
                    row.append(card.label())
            lines.append(' '.join(row))
        return '\n'.join(lines)
