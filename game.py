from __future__ import annotations

# Facade module that re-exports the Memory core.
# The Flask app and tests import from here; single-responsibility modules live under memory_core/*.

try:
    from .memory_core.card import Card, CardKind  # type: ignore
    from .memory_core.grid import Grid, Coord, SYMBOL_POOL  # type: ignore
    from .memory_core.player import Player  # type: ignore
    from .memory_core.state import TurnPhase, TurnOutcome, TurnResult  # type: ignore
    from .memory_core.game import Game, END_GRID_EMPTY, END_ALL_ELIMINATED  # type: ignore
    from .memory_core.deal import deal_grid, deal_game, make_roster, random_name, random_color  # type: ignore
    from .memory_core.play import NullView, setup_game, take_guess, run_match  # type: ignore
    from .memory_core.errors import (  # type: ignore
        GameError,
        ConfigurationError,
        InvalidGuessError,
        GameStateError,
    )
    from .memory_core import rules  # type: ignore
except ImportError:
    from memory_core.card import Card, CardKind  # type: ignore
    from memory_core.grid import Grid, Coord, SYMBOL_POOL  # type: ignore
    from memory_core.player import Player  # type: ignore
    from memory_core.state import TurnPhase, TurnOutcome, TurnResult  # type: ignore
    from memory_core.game import Game, END_GRID_EMPTY, END_ALL_ELIMINATED  # type: ignore
    from memory_core.deal import deal_grid, deal_game, make_roster, random_name, random_color  # type: ignore
    from memory_core.play import NullView, setup_game, take_guess, run_match  # type: ignore
    from memory_core.errors import (  # type: ignore
        GameError,
        ConfigurationError,
        InvalidGuessError,
        GameStateError,
    )
    from memory_core import rules  # type: ignore


def main() -> None:
    # CLI driver delegated to memory_core.cli
    from memory_core.cli import main as _main
    raise SystemExit(_main())


if __name__ == '__main__':
    main()
