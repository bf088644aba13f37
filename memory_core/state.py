from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .card import Card


class TurnPhase(Enum):
    AWAITING_FIRST_GUESS = 'awaiting_first_guess'
    AWAITING_SECOND_GUESS = 'awaiting_second_guess'
    TURN_RESOLUTION = 'turn_resolution'
    GAME_OVER = 'game_over'


class TurnOutcome(Enum):
    BOMB = 'bomb'
    JOLLY = 'jolly'
    MATCH = 'match'
    MISMATCH = 'mismatch'


@dataclass(frozen=True)
class TurnResult:
    """What happened when a turn was resolved."""
    player_index: int
    player_name: str
    outcome: TurnOutcome
    cards: Tuple[Card, ...]
    points: int
    keeps_turn: bool
    next_player: Optional[int]  # None once the match is over
    game_over: bool
