from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from .card import Card
from .errors import GameStateError, InvalidGuessError
from .grid import Coord, Grid
from .player import Player
from .rules import debug, validate_roster_size
from .state import TurnOutcome, TurnPhase, TurnResult

END_GRID_EMPTY = 'grid_empty'
END_ALL_ELIMINATED = 'all_eliminated'


class Game:
    """One Memory match: a fixed roster taking turns on a single grid.

    A turn is driven in two steps. `reveal` is called once or twice with
    coordinates of face-down cards; once the turn is decided the phase becomes
    TURN_RESOLUTION and `resolve` applies the outcome, turns the grid face-down
    again and picks who plays next. The match ends when the grid is empty, or
    earlier if every player has been eliminated.
    """

    def __init__(self, players: Sequence[Player], grid: Grid) -> None:
        validate_roster_size(len(players))
        self.players: List[Player] = list(players)
        self.grid = grid
        self.history: List[TurnResult] = []
        self.end_reason: Optional[str] = None
        self._guesses: List[Tuple[Coord, Card]] = []
        self.phase = TurnPhase.AWAITING_FIRST_GUESS
        self.current = 0
        if not self.players[0].alive:
            first = self._next_living(0)
            if first is None:
                self._finish(END_ALL_ELIMINATED)
            else:
                self.current = first
        if self.grid.is_empty():
            self._finish(END_GRID_EMPTY)

    @property
    def current_player(self) -> Player:
        return self.players[self.current]

    @property
    def is_over(self) -> bool:
        return self.phase is TurnPhase.GAME_OVER

    @property
    def revealed(self) -> List[Tuple[Coord, Card]]:
        """Cards flipped so far in the current turn."""
        return list(self._guesses)

    def living_players(self) -> List[Player]:
        return [p for p in self.players if p.alive]

    def _next_living(self, start: int) -> Optional[int]:
        # Round-robin after `start`; wraps back to `start` itself last.
        n = len(self.players)
        for step in range(1, n + 1):
            idx = (start + step) % n
            if self.players[idx].alive:
                return idx
        return None

    def _finish(self, reason: str) -> None:
        self.phase = TurnPhase.GAME_OVER
        self.end_reason = reason
        self._guesses.clear()
        debug('game', f"game over ({reason})")

    def is_selectable(self, coord: Coord) -> bool:
        if self.phase not in (TurnPhase.AWAITING_FIRST_GUESS, TurnPhase.AWAITING_SECOND_GUESS):
            return False
        if not self.grid.in_bounds(coord):
            return False
        card = self.grid.get_card(coord)
        return card is not None and not card.face_up

    def reveal(self, coord: Coord) -> Card:
        """Flips the card at `coord` face-up as the current player's next guess."""
        if self.phase is TurnPhase.GAME_OVER:
            raise GameStateError('The match is over')
        if self.phase is TurnPhase.TURN_RESOLUTION:
            raise GameStateError('Turn must be resolved before another guess')
        if not self.grid.in_bounds(coord):
            raise InvalidGuessError(f"Coordinate {coord} outside {self.grid.rows}x{self.grid.cols} grid")
        card = self.grid.get_card(coord)
        if card is None:
            raise InvalidGuessError(f"No card at {coord}")
        if card.face_up:
            raise InvalidGuessError(f"Card at {coord} is already face-up")

        card.flip(True)
        self._guesses.append((coord, card))
        debug('game', f"{self.current_player.name} reveals {card.symbol!r} ({card.kind.value}) at {coord}")
        if self.phase is TurnPhase.AWAITING_FIRST_GUESS and not card.is_special:
            self.phase = TurnPhase.AWAITING_SECOND_GUESS
        else:
            self.phase = TurnPhase.TURN_RESOLUTION
        return card

    def resolve(self) -> TurnResult:
        """Applies the outcome of the revealed cards and advances the match."""
        if self.phase is not TurnPhase.TURN_RESOLUTION:
            raise GameStateError(f"Nothing to resolve in phase {self.phase.value}")

        idx = self.current
        player = self.players[idx]
        cards = tuple(card for _, card in self._guesses)
        last = cards[-1]
        points = 0

        if last.is_bomb:
            outcome = TurnOutcome.BOMB
            player.kill()
            self.grid.pop_card(last)
            keeps_turn = False
            debug('game', f"{player.name} is eliminated")
        elif last.is_jolly:
            outcome = TurnOutcome.JOLLY
            points = last.points
            player.add_score(points)
            self.grid.pop_card(last)
            keeps_turn = True
        else:
            first, second = cards
            if first.matches(second):
                outcome = TurnOutcome.MATCH
                points = first.points
                player.add_score(points)
                self.grid.pop_card(first)
                keeps_turn = True
            else:
                outcome = TurnOutcome.MISMATCH
                keeps_turn = False

        self.grid.flip_all_cards()
        self._guesses.clear()
        self.phase = TurnPhase.AWAITING_FIRST_GUESS

        if self.grid.is_empty():
            self._finish(END_GRID_EMPTY)
        elif not keeps_turn:
            nxt = self._next_living(idx)
            if nxt is None:
                self._finish(END_ALL_ELIMINATED)
            else:
                self.current = nxt
                debug('game', f"turn passes to {self.players[nxt].name}")

        result = TurnResult(
            player_index=idx,
            player_name=player.name,
            outcome=outcome,
            cards=cards,
            points=points,
            keeps_turn=keeps_turn and not self.is_over,
            next_player=None if self.is_over else self.current,
            game_over=self.is_over,
        )
        self.history.append(result)
        debug('game', f"{player.name}: {outcome.value} +{points}")
        return result

    def play_turn(self, first: Coord, second: Optional[Coord] = None) -> TurnResult:
        """Reveal one or two cards and resolve. `second` is unused when the first card is special."""
        self.reveal(first)
        if self.phase is TurnPhase.AWAITING_SECOND_GUESS:
            if second is None:
                raise InvalidGuessError('A second guess is required')
            self.reveal(second)
        return self.resolve()

    def leaderboard(self) -> List[Player]:
        """Players by descending score; ties keep roster order."""
        return sorted(self.players, key=lambda p: -p.score)

    def winners(self) -> List[Player]:
        board = self.leaderboard()
        top = board[0].score
        return [p for p in board if p.score == top]
