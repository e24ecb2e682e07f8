"""
board.py - Board representation for Connect Four

The Board only tracks occupancy: where a dropped piece would land, placing a
piece, and whole-board queries. Turn order and win detection belong to the
engine in connectfour.game.rules.
"""

import numpy as np
from typing import Iterable, List, Optional

from connectfour.debug import debug
from connectfour.utils import (ROWS, COLS, Coord, Player, is_valid_position,
                               render_board_ascii)


class Board:
    """
    A fixed-size Connect Four grid.

    Cells are indexed ``[row, col]`` with row 0 at the top; pieces fall to the
    highest empty row index in their column.
    """

    def __init__(self, height: int = ROWS, width: int = COLS):
        """
        Create an empty board.

        Args:
            height: Number of rows
            width: Number of columns
        """
        if height < 1 or width < 1:
            raise ValueError(f"Board dimensions must be positive, got {height}x{width}")

        debug.debug(f"Initializing new {height}x{width} Board", "board")
        self.height = height
        self.width = width
        self.grid = np.zeros((height, width), dtype=np.int8)

    def copy(self) -> 'Board':
        """
        Create an independent copy of the board.

        Returns:
            A new Board with the same dimensions and occupancy
        """
        debug.trace("Creating board copy", "board")
        new_board = Board(self.height, self.width)
        new_board.grid = self.grid.copy()
        return new_board

    def is_valid_column(self, column) -> bool:
        """Check that ``column`` is an integer index into this board."""
        if isinstance(column, bool) or not isinstance(column, (int, np.integer)):
            return False
        return 0 <= column < self.width

    def _require_column(self, column: int) -> None:
        if not self.is_valid_column(column):
            raise IndexError(f"Column {column!r} out of range 0..{self.width - 1}")

    def find_drop_row(self, column: int) -> Optional[int]:
        """
        Find the row a piece dropped into ``column`` would land on.

        Args:
            column: Column index, 0 <= column < width

        Returns:
            The lowest empty row in the column, or None if the column is full

        Raises:
            IndexError: if the column is out of range
        """
        self._require_column(column)

        for row in range(self.height - 1, -1, -1):
            if self.grid[row, column] == Player.EMPTY.value:
                return row
        return None

    def place(self, row: int, column: int, player: Player) -> None:
        """
        Give the cell at (row, column) to ``player``.

        Raises:
            IndexError: if the coordinates are off the board
            ValueError: if the cell is already taken or player is EMPTY
        """
        if not is_valid_position(row, column, self.height, self.width):
            raise IndexError(f"Position ({row}, {column}) is off the board")
        if player == Player.EMPTY:
            raise ValueError("Cannot place an EMPTY piece")
        if self.grid[row, column] != Player.EMPTY.value:
            raise ValueError(f"Cell ({row}, {column}) is already occupied")

        debug.trace(f"Placing {player.name} at ({row}, {column})", "board")
        self.grid[row, column] = player.value

    def get(self, row: int, column: int) -> Player:
        """Owner of a cell, Player.EMPTY if unoccupied."""
        return Player(int(self.grid[row, column]))

    def is_full(self) -> bool:
        """True when every cell is occupied."""
        return bool(np.all(self.grid != Player.EMPTY.value))

    def is_column_full(self, column: int) -> bool:
        self._require_column(column)
        return bool(self.grid[0, column] != Player.EMPTY.value)

    def get_valid_moves(self) -> List[int]:
        """
        Columns that can still take a piece.

        Returns:
            Column indices, left to right
        """
        return [col for col in range(self.width) if self.grid[0, col] == Player.EMPTY.value]

    def count(self, player: Player) -> int:
        return int(np.count_nonzero(self.grid == player.value))

    def get_state(self) -> np.ndarray:
        """
        Get a copy of the occupancy grid.

        Returns:
            2D numpy array of Player values
        """
        return self.grid.copy()

    @classmethod
    def from_grid(cls, grid) -> 'Board':
        """
        Build a board from an existing grid of Player values.

        No gravity check is made; positions loaded this way are only used
        for analysis.
        """
        array = np.asarray(grid, dtype=np.int8)
        if array.ndim != 2:
            raise ValueError(f"Grid must be two-dimensional, got shape {array.shape}")
        board = cls(*array.shape)
        board.grid = array.copy()
        return board

    def render(self, highlight: Optional[Iterable[Coord]] = None) -> str:
        """
        Render the board as a string.

        Args:
            highlight: Cells to mark, e.g. a winning line

        Returns:
            ASCII representation of the board
        """
        return render_board_ascii(self.grid, highlight)

    def __str__(self) -> str:
        return self.render()
