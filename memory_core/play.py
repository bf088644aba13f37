from __future__ import annotations

import random
from typing import Optional, Protocol, Tuple

from .card import Card
from .deal import deal_game
from .game import Game
from .grid import Coord
from .rules import debug
from .state import TurnPhase, TurnResult


class InputProvider(Protocol):
    def read_roster_size(self) -> int: ...

    def read_player_name(self, index: int) -> Optional[str]: ...

    def read_grid_dimensions(self) -> Tuple[int, int]: ...

    def read_coordinate(self, row_bound: int, col_bound: int) -> Coord: ...


class PresentationSink(Protocol):
    def show_turn(self, game: Game) -> None: ...

    def show_reveal(self, game: Game, card: Card) -> None: ...

    def show_outcome(self, game: Game, result: TurnResult) -> None: ...

    def show_game_over(self, game: Game) -> None: ...


class NullView:
    """A sink that shows nothing."""

    def show_turn(self, game: Game) -> None:
        pass

    def show_reveal(self, game: Game, card: Card) -> None:
        pass

    def show_outcome(self, game: Game, result: TurnResult) -> None:
        pass

    def show_game_over(self, game: Game) -> None:
        pass


def setup_game(inputs: InputProvider, rng: Optional[random.Random] = None, seed: Optional[int] = None) -> Game:
    """Asks the input provider for roster and grid, then deals the match."""
    count = inputs.read_roster_size()
    names = [inputs.read_player_name(i) for i in range(count)]
    rows, cols = inputs.read_grid_dimensions()
    return deal_game(names, rows, cols, seed=seed, rng=rng)


def take_guess(game: Game, inputs: InputProvider) -> Coord:
    # Ask again until the coordinate names a face-down card.
    while True:
        coord = inputs.read_coordinate(game.grid.rows, game.grid.cols)
        if game.is_selectable(coord):
            return coord
        debug('play', f"rejected guess {coord}")


def run_match(game: Game, inputs: InputProvider, view: Optional[PresentationSink] = None) -> Game:
    """Runs the match to the end and returns it."""
    sink: PresentationSink = view if view is not None else NullView()
    while not game.is_over:
        sink.show_turn(game)
        while game.phase is not TurnPhase.TURN_RESOLUTION:
            card = game.reveal(take_guess(game, inputs))
            sink.show_reveal(game, card)
        result = game.resolve()
        sink.show_outcome(game, result)
    sink.show_game_over(game)
    return game
