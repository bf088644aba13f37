from __future__ import annotations

import random
from typing import Iterable, List, Optional, Sequence

from .game import Game
from .grid import Grid
from .player import Player
from .rules import validate_grid_size, validate_player_name, validate_roster_size

NAME_POOL = (
    'Ada', 'Bruno', 'Carla', 'Dario', 'Elena', 'Fabio', 'Giulia', 'Ivo',
    'Lara', 'Marco', 'Nina', 'Oscar', 'Paola', 'Remo', 'Sara', 'Tito',
)


def make_rng(seed: Optional[int] = None, rng: Optional[random.Random] = None) -> random.Random:
    return rng if rng is not None else random.Random(seed)


def random_color(rng: random.Random) -> int:
    """ANSI foreground code 31..37."""
    return rng.randint(31, 37)


def random_name(rng: random.Random, taken: Iterable[str] = ()) -> str:
    used = {n.lower() for n in taken}
    free = [n for n in NAME_POOL if n.lower() not in used]
    if free:
        return rng.choice(free)
    # Pool exhausted: number the names instead.
    i = 1
    while f"Player{i}".lower() in used:
        i += 1
    return f"Player{i}"


def deal_grid(rows: int, cols: int, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> Grid:
    """Creates and fills a grid after checking its dimensions."""
    validate_grid_size(rows, cols)
    grid = Grid(rows, cols)
    grid.fill(make_rng(seed, rng))
    return grid


def make_roster(names: Sequence[Optional[str]], rng: random.Random) -> List[Player]:
    """Builds players; blank or missing names are replaced with random ones."""
    validate_roster_size(len(names))
    given = [n.strip() for n in names if n is not None and n.strip() != '']
    players: List[Player] = []
    for raw in names:
        if raw is None or raw.strip() == '':
            name = random_name(rng, given + [p.name for p in players])
        else:
            name = validate_player_name(raw)
        players.append(Player(name=name, color=random_color(rng)))
    return players


def deal_game(
    names: Sequence[Optional[str]],
    rows: int,
    cols: int,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Game:
    """Creates a ready-to-play match; all setup errors surface before the Game exists."""
    r = make_rng(seed, rng)
    validate_grid_size(rows, cols)
    players = make_roster(names, r)
    grid = deal_grid(rows, cols, rng=r)
    return Game(players, grid)
