from __future__ import annotations

import os
import sys
from typing import Optional

from .errors import ConfigurationError

MAX_CELLS = 186
MIN_PLAYERS = 2
MAX_PLAYERS = 6
MIN_PLAYER_NAME_LENGTH = 3
MAX_PLAYER_NAME_LENGTH = 15
MIN_GRID_SIDE = 2

JOLLY_POINTS = 20
BOMB_POINTS = 0
PAIR_POINTS_MIN = 1
PAIR_POINTS_MAX = 9

BOMB_SYMBOL = 'ﬁ'
JOLLY_SYMBOL = '§'
HIDDEN_SYMBOL = '!'

_TRUTHY = ('1', 'true', 'yes', 'on')


def _env_flag(name: str) -> bool:
    return os.getenv(name, '0').strip().lower() in _TRUTHY


def debug_enabled() -> bool:
    return _env_flag('MEMORY_DEBUG')


def color_disabled() -> bool:
    return _env_flag('MEMORY_NO_COLOR')


def default_seed() -> Optional[int]:
    """Seed from MEMORY_SEED, or None when unset or not an integer."""
    raw = os.getenv('MEMORY_SEED')
    if raw is None or raw.strip() == '':
        return None
    try:
        return int(raw)
    except ValueError:
        debug('config', f"ignoring non-integer MEMORY_SEED={raw!r}")
        return None


def debug(tag: str, message: str) -> None:
    if debug_enabled():
        print(f"[{tag}] {message}", file=sys.stderr)


def is_valid_grid_size(rows: int, cols: int) -> bool:
    """Both sides at least MIN_GRID_SIDE, an even cell count, at most MAX_CELLS cells."""
    if rows < MIN_GRID_SIDE or cols < MIN_GRID_SIDE:
        return False
    cells = rows * cols
    return cells <= MAX_CELLS and cells % 2 == 0


def validate_grid_size(rows: int, cols: int) -> None:
    if not is_valid_grid_size(rows, cols):
        raise ConfigurationError(
            f"Invalid grid {rows}x{cols}: each side must be >= {MIN_GRID_SIDE}, "
            f"rows*cols must be even and <= {MAX_CELLS}"
        )


def is_valid_roster_size(count: int) -> bool:
    return MIN_PLAYERS <= count <= MAX_PLAYERS


def validate_roster_size(count: int) -> None:
    if not is_valid_roster_size(count):
        raise ConfigurationError(f"Player count must be in [{MIN_PLAYERS}, {MAX_PLAYERS}], got {count}")


def is_valid_player_name(name: str) -> bool:
    return MIN_PLAYER_NAME_LENGTH <= len(name.strip()) <= MAX_PLAYER_NAME_LENGTH


def validate_player_name(name: str) -> str:
    """Returns the stripped name or raises ConfigurationError."""
    stripped = name.strip()
    if not is_valid_player_name(stripped):
        raise ConfigurationError(
            f"Player name must be {MIN_PLAYER_NAME_LENGTH}-{MAX_PLAYER_NAME_LENGTH} characters long: {name!r}"
        )
    return stripped
