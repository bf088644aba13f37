from __future__ import annotations

import argparse
import random
from typing import List, Optional, Sequence

from .console import ConsoleInput, ConsoleView
from .deal import deal_game
from .errors import ConfigurationError
from .play import run_match
from .rules import (
    MAX_PLAYERS,
    MIN_PLAYERS,
    color_disabled,
    debug,
    default_seed,
    is_valid_grid_size,
    is_valid_roster_size,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Memory: a terminal card-matching game with bombs and jollies')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for the deal (default: $MEMORY_SEED)')
    parser.add_argument('--rows', type=int, default=None, help='Grid height')
    parser.add_argument('--cols', type=int, default=None, help='Grid width')
    parser.add_argument('--player', action='append', default=None, metavar='NAME',
                        help=f"Player name, repeat {MIN_PLAYERS}-{MAX_PLAYERS} times")
    parser.add_argument('--no-color', action='store_true', help='Disable ANSI colors')
    parser.add_argument('--no-pause', action='store_true', help='Do not wait for enter after each turn')
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.player is not None and not is_valid_roster_size(len(args.player)):
        parser.error(f"--player must be given {MIN_PLAYERS}-{MAX_PLAYERS} times")
    if (args.rows is None) != (args.cols is None):
        parser.error('--rows and --cols must be given together')
    if args.rows is not None and not is_valid_grid_size(args.rows, args.cols):
        parser.error(f"invalid grid size {args.rows}x{args.cols}")

    seed = args.seed if args.seed is not None else default_seed()
    color = not (args.no_color or color_disabled())
    rng = random.Random(seed)
    debug('cli', f"seed={seed} color={color}")

    inputs = ConsoleInput(color=color)
    view = ConsoleView(color=color, pause=not args.no_pause)
    view.show_title()

    names: List[Optional[str]]
    if args.player is not None:
        names = list(args.player)
    else:
        count = inputs.read_roster_size()
        names = [inputs.read_player_name(i) for i in range(count)]
    if args.rows is not None:
        rows, cols = args.rows, args.cols
    else:
        rows, cols = inputs.read_grid_dimensions()

    try:
        game = deal_game(names, rows, cols, rng=rng)
    except ConfigurationError as e:
        parser.error(str(e))

    try:
        run_match(game, inputs, view)
    except (KeyboardInterrupt, EOFError):
        print('\nGame interrupted')
        return 130
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
