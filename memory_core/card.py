from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .rules import BOMB_POINTS, BOMB_SYMBOL, HIDDEN_SYMBOL, JOLLY_POINTS, JOLLY_SYMBOL


class CardKind(Enum):
    NORMAL = 'normal'
    BOMB = 'bomb'
    JOLLY = 'jolly'


@dataclass(eq=False)
class Card:
    """A single tile on the grid.

    Identity (symbol, points, kind) is fixed at creation; only the face-up flag
    changes during a match. Cards compare by identity, so two tiles of the same
    pair are still two different cards.
    """
    symbol: str
    points: int
    kind: CardKind = CardKind.NORMAL
    face_up: bool = False

    def __post_init__(self) -> None:
        if len(self.symbol) != 1 or not self.symbol.isprintable():
            raise ValueError(f"Card symbol must be a single printable character: {self.symbol!r}")
        if self.symbol == HIDDEN_SYMBOL:
            raise ValueError(f"{HIDDEN_SYMBOL!r} is reserved for hidden cards")
        if self.kind is CardKind.BOMB:
            if self.points < 0:
                raise ValueError('Bomb points must be >= 0')
        elif self.points < 1:
            raise ValueError(f"{self.kind.value} card points must be >= 1, got {self.points}")

    @classmethod
    def bomb(cls) -> 'Card':
        return cls(BOMB_SYMBOL, BOMB_POINTS, CardKind.BOMB)

    @classmethod
    def jolly(cls, points: int = JOLLY_POINTS) -> 'Card':
        return cls(JOLLY_SYMBOL, points, CardKind.JOLLY)

    @property
    def is_bomb(self) -> bool:
        return self.kind is CardKind.BOMB

    @property
    def is_jolly(self) -> bool:
        return self.kind is CardKind.JOLLY

    @property
    def is_special(self) -> bool:
        return self.kind is not CardKind.NORMAL

    def flip(self, state: Optional[bool] = None) -> None:
        """Toggles the card, or sets it face-up/face-down when state is given."""
        self.face_up = (not self.face_up) if state is None else bool(state)

    def matches(self, other: Optional['Card']) -> bool:
        """Pair equality: two distinct NORMAL cards with the same symbol.

        Special cards never match anything; they are resolved by kind.
        """
        if other is None or other is self:
            return False
        if self.kind is not CardKind.NORMAL or other.kind is not CardKind.NORMAL:
            return False
        return self.symbol == other.symbol

    def label(self) -> str:
        """What a player sees: the symbol when face-up, the hidden glyph otherwise."""
        return self.symbol if self.face_up else HIDDEN_SYMBOL

    def __str__(self) -> str:
        return self.symbol
