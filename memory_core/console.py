from __future__ import annotations

from typing import Callable, List, Optional, Tuple

from .card import Card, CardKind
from .game import END_ALL_ELIMINATED, Game
from .grid import Coord, Grid
from .rules import (
    MAX_CELLS,
    MAX_PLAYERS,
    MAX_PLAYER_NAME_LENGTH,
    MIN_GRID_SIDE,
    MIN_PLAYERS,
    MIN_PLAYER_NAME_LENGTH,
    is_valid_grid_size,
    is_valid_player_name,
)
from .state import TurnOutcome, TurnResult

RESET = '\033[0m'
BOLD = '\033[1m'
CLEAR = '\033[2J\033[H'
RED = 31
GREEN = 32
YELLOW = 33
BLUE = 34
BRIGHT_YELLOW = 93

TITLE = r"""
 .--------.-----.--------.-----.----.--.--.
 |        |  -__|        |  _  |   _|  |  |
 |__|__|__|_____|__|__|__|_____|__| |___  |
                                    |_____|
"""

OUTCOME_TEXT = {
    TurnOutcome.BOMB: ('BOOM!', RED),
    TurnOutcome.JOLLY: ('JOLLY!', GREEN),
    TurnOutcome.MATCH: ('MATCH!', GREEN),
    TurnOutcome.MISMATCH: ('WRONG!', RED),
}

CARD_COLOR = {
    CardKind.BOMB: RED,
    CardKind.JOLLY: GREEN,
    CardKind.NORMAL: BRIGHT_YELLOW,
}


def colorize(text: str, fg: Optional[int] = None, bg: Optional[int] = None, bold: bool = False,
             enabled: bool = True) -> str:
    if not enabled:
        return text
    codes: List[str] = []
    if bold:
        codes.append(BOLD)
    if fg is not None:
        codes.append(f"\033[{fg}m")
    if bg is not None:
        codes.append(f"\033[{bg}m")
    if not codes:
        return text
    return ''.join(codes) + text + RESET


def _border(cols: int, left: str, mid: str, right: str) -> str:
    return '    ' + left + mid.join(['───'] * cols) + right


def render_grid(grid: Grid, color: bool = True) -> str:
    """Box-drawn grid with 1-based indices; hidden cards show as '!'."""
    lines: List[str] = ['    ' + ''.join(f" {c:2d} " for c in range(1, grid.cols + 1))]
    for r in range(1, grid.rows + 1):
        if r == 1:
            lines.append(_border(grid.cols, '┌', '┬', '┐'))
        else:
            lines.append(_border(grid.cols, '├', '┼', '┤'))
        cells: List[str] = []
        for c in range(1, grid.cols + 1):
            card = grid.get_card((r, c))
            if card is None:
                cells.append('   ')
            elif card.face_up:
                cells.append(' ' + colorize(card.symbol, fg=CARD_COLOR[card.kind], bold=True, enabled=color) + ' ')
            else:
                cells.append(' ' + card.label() + ' ')
        lines.append(f"  {r:2d}|" + '|'.join(cells) + '|')
    lines.append(_border(grid.cols, '└', '┴', '┘'))
    return '\n'.join(lines)


def render_leaderboard(game: Game, color: bool = True) -> str:
    lines: List[str] = [colorize('LEADERBOARD: ', fg=BLUE, bold=True, enabled=color)]
    for i, player in enumerate(game.leaderboard()):
        row = colorize(f"{player.name:<{MAX_PLAYER_NAME_LENGTH}} {player.score:2d}", bg=player.color + 10, enabled=color)
        if i == 0:
            row += colorize(' ♛', fg=YELLOW, enabled=color)
        if not player.alive:
            row += ' (eliminated)'
        lines.append(row)
    return '\n'.join(lines)


class ConsoleInput:
    """Reads setup values and guesses from a terminal, re-prompting until valid."""

    def __init__(self, read: Optional[Callable[[str], str]] = None,
                 write: Optional[Callable[[str], None]] = None, color: bool = True) -> None:
        self._read = read if read is not None else input
        self._write = write if write is not None else print
        self._color = color

    def _error(self, message: str) -> None:
        self._write(colorize(message, fg=RED, enabled=self._color))

    def read_int(self, msg: str) -> int:
        while True:
            text = self._read(f"{msg}: ").strip()
            try:
                return int(text)
            except ValueError:
                self._error('Error, must be an integer')

    def read_int_in_range(self, lo: int, hi: int, label: str = 'Insert a number') -> int:
        while True:
            value = self.read_int(f"{label} [{lo}-{hi}]")
            if lo <= value <= hi:
                return value
            self._error('Number out of range')

    def read_roster_size(self) -> int:
        return self.read_int_in_range(MIN_PLAYERS, MAX_PLAYERS, 'Number of players')

    def read_player_name(self, index: int) -> Optional[str]:
        """A valid name, or None when left blank (a random name is picked)."""
        while True:
            value = self._read(f"Insert player #{index + 1} name [↵ for random]: ").strip()
            if value == '':
                return None
            if is_valid_player_name(value):
                return value
            self._error(
                f"Error: name must be between {MIN_PLAYER_NAME_LENGTH} and {MAX_PLAYER_NAME_LENGTH} characters."
            )

    def read_grid_dimensions(self) -> Tuple[int, int]:
        self._write(
            'Insert height and width of the grid such that:\n'
            f"- height >= {MIN_GRID_SIDE},\n"
            f"- width >= {MIN_GRID_SIDE},\n"
            f"- height * width <= {MAX_CELLS},\n"
            '- height * width is even'
        )
        while True:
            rows = self.read_int_in_range(MIN_GRID_SIDE, MAX_CELLS // MIN_GRID_SIDE, 'Height')
            cols = self.read_int_in_range(MIN_GRID_SIDE, MAX_CELLS // rows, 'Width')
            if is_valid_grid_size(rows, cols):
                return rows, cols
            self._error('Error: height * width must be even')

    def read_coordinate(self, row_bound: int, col_bound: int) -> Coord:
        row = self.read_int_in_range(1, row_bound, 'Row')
        col = self.read_int_in_range(1, col_bound, 'Column')
        return (row, col)


class ConsoleView:
    """Prints the match to a terminal."""

    def __init__(self, write: Optional[Callable[[str], None]] = None,
                 read: Optional[Callable[[str], str]] = None, color: bool = True, pause: bool = True) -> None:
        self._write = write if write is not None else print
        self._read = read if read is not None else input
        self.color = color
        self.pause = pause

    def _clear(self) -> None:
        if self.color:
            self._write(CLEAR)

    def wait_for_continue(self) -> None:
        if self.pause:
            self._read('Press enter to continue...')

    def show_title(self) -> None:
        self._write(colorize(TITLE, fg=BLUE, enabled=self.color))
        self.wait_for_continue()

    def show_turn(self, game: Game) -> None:
        self._clear()
        player = game.current_player
        self._write(colorize(f"{player.name}'s turn ({player.score})", bg=player.color + 10, enabled=self.color))
        self._write(render_grid(game.grid, color=self.color))
        self._write(f"{player.name} guess: ")

    def show_reveal(self, game: Game, card: Card) -> None:
        self._clear()
        self._write(render_grid(game.grid, color=self.color))

    def show_outcome(self, game: Game, result: TurnResult) -> None:
        text, fg = OUTCOME_TEXT[result.outcome]
        if result.points:
            text += f" +{result.points}"
        self._write(colorize(text, fg=fg, bold=True, enabled=self.color))
        self.wait_for_continue()

    def show_game_over(self, game: Game) -> None:
        self._clear()
        self._write(colorize('GAME OVER', fg=BLUE, bold=True, enabled=self.color))
        if game.end_reason == END_ALL_ELIMINATED:
            self._write('Every player was eliminated.')
        self._write('')
        self._write(render_leaderboard(game, color=self.color))
        self.wait_for_continue()
