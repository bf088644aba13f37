from __future__ import annotations

from dataclasses import dataclass

from .rules import validate_player_name

DEFAULT_COLOR = 37  # ANSI white


@dataclass
class Player:
    """A participant: collects points and can be eliminated by a bomb."""
    name: str
    color: int = DEFAULT_COLOR
    score: int = 0
    alive: bool = True

    def __post_init__(self) -> None:
        self.name = validate_player_name(self.name)

    def add_score(self, amount: int) -> None:
        if amount < 0:
            raise ValueError('Score can only increase')
        self.score += amount

    def kill(self) -> None:
        self.alive = False
