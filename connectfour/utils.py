"""
utils.py - Constants, enumerations and helpers for the Connect Four engine

Default board dimensions, the Player and GameStatus enumerations, the
direction table used by win detection and ASCII rendering live here so the
board, the engine and the interfaces share one definition.
"""

from enum import Enum, auto
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of pieces in a row to win

DEFAULT_COLORS = ("red", "yellow")

Coord = Tuple[int, int]  # (row, col)


class Player(Enum):
    """Cell occupancy and player identity."""
    EMPTY = 0
    ONE = 1    # Moves first
    TWO = 2

    def other(self) -> 'Player':
        """Get the opposing player."""
        if self == Player.ONE:
            return Player.TWO
        elif self == Player.TWO:
            return Player.ONE
        return Player.EMPTY

    @property
    def symbol(self) -> str:
        return PLAYER_SYMBOLS[self]

    def __str__(self):
        return self.symbol


PLAYER_SYMBOLS = {
    Player.EMPTY: ".",
    Player.ONE: "X",
    Player.TWO: "O",
}


class GameStatus(Enum):
    """Lifecycle of a single game."""
    IN_PROGRESS = auto()
    WON = auto()
    TIED = auto()

    def is_game_over(self) -> bool:
        return self != GameStatus.IN_PROGRESS


class Direction(Enum):
    """Line directions checked by win detection, in scan order."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN_RIGHT = auto()
    DIAGONAL_DOWN_LEFT = auto()


# (row, col) step for each direction. Row indices grow downward.
DIRECTION_VECTORS: Dict[Direction, Coord] = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN_RIGHT: (1, 1),
    Direction.DIAGONAL_DOWN_LEFT: (1, -1),
}


def line_cells(row: int, col: int, direction: Direction,
               length: int = CONNECT_N) -> List[Coord]:
    """
    Coordinates of a line of ``length`` cells starting at (row, col).

    Cells may fall outside the board; callers check bounds.
    """
    dr, dc = DIRECTION_VECTORS[direction]
    return [(row + i * dr, col + i * dc) for i in range(length)]


def is_valid_position(row: int, col: int, rows: int = ROWS, cols: int = COLS) -> bool:
    """Check if a position lies within a rows x cols board."""
    return 0 <= row < rows and 0 <= col < cols


def parse_position(position: str, rows: int = ROWS, cols: int = COLS) -> np.ndarray:
    """
    Parse a comma-separated list of cell values (0, 1 or 2), row by row
    from the top, into a grid.

    Raises:
        ValueError: if the string has the wrong length or bad values
    """
    try:
        values = [int(v) for v in position.split(',')]
    except ValueError:
        raise ValueError(f"Position must be comma-separated integers: {position!r}")

    if len(values) != rows * cols:
        raise ValueError(f"Position string must have {rows * cols} values, got {len(values)}")

    allowed = {p.value for p in Player}
    bad = sorted(set(values) - allowed)
    if bad:
        raise ValueError(f"Invalid cell values in position: {bad}")

    return np.array(values, dtype=np.int8).reshape(rows, cols)


def render_board_ascii(grid: np.ndarray,
                       highlight: Optional[Iterable[Coord]] = None,
                       symbols: Optional[Dict[Player, str]] = None) -> str:
    """
    Render a grid as ASCII art with column numbers underneath.

    Args:
        grid: Board grid of Player values
        highlight: Cells to draw in brackets, e.g. a winning line
        symbols: Override the symbol used for each player

    Returns:
        Multi-line string representation of the board
    """
    rows, cols = grid.shape
    marked = set(highlight or ())
    symbols = {**PLAYER_SYMBOLS, **(symbols or {})}

    border = "+" + "-" * (cols * 3) + "+"
    lines = [border]
    for row in range(rows):
        cells = []
        for col in range(cols):
            symbol = symbols[Player(int(grid[row, col]))]
            cells.append(f"[{symbol}]" if (row, col) in marked else f" {symbol} ")
        lines.append("|" + "".join(cells) + "|")
    lines.append(border)
    lines.append(" " + "".join(f"{col:^3}" for col in range(cols)) + " ")

    return "\n".join(lines)


def render_preview_row(column_count: int, player: Player,
                       column: Optional[int] = None) -> str:
    """
    Row shown above the board with the next player's piece.

    With ``column`` the piece hovers over that column, otherwise it is
    shown over every column.
    """
    cells: Sequence[str] = [
        f" {player.symbol} " if column is None or col == column else "   "
        for col in range(column_count)
    ]
    return " " + "".join(cells) + " "
