"""
rules.py - Turn order and terminal-state detection for Connect Four

GameEngine is the state machine for one game session. It validates a move,
drops the current player's piece on the Board, scans for four in a row, and
reports the outcome as a MoveResult. A finished engine refuses further moves;
starting over means calling new_game again.
"""

from typing import Dict, Hashable, List, Optional

from connectfour.debug import debug
from connectfour.game.board import Board
from connectfour.game.results import GameState, MoveResult, RejectReason
from connectfour.utils import (ROWS, COLS, CONNECT_N, Coord, Direction, Player,
                               is_valid_position, line_cells)


class GameEngine:
    """
    Rules engine for a single game of Connect Four.

    Player.ONE always moves first. The labels passed in (colour names,
    user names, ...) are only used for display and may be equal.
    """

    def __init__(self, player1: Hashable = Player.ONE, player2: Hashable = Player.TWO,
                 height: int = ROWS, width: int = COLS):
        """
        Start a new game on an empty board.

        Args:
            player1: Label of the first player
            player2: Label of the second player
            height: Number of board rows
            width: Number of board columns
        """
        debug.debug(f"Initializing GameEngine for {player1!r} vs {player2!r}", "game")
        self.board = Board(height, width)
        self.labels: Dict[Player, Hashable] = {Player.ONE: player1, Player.TWO: player2}
        self.moves: List[int] = []
        self.winning_line: List[Coord] = []
        self._current_player = Player.ONE
        self._state = GameState.in_progress()

    @property
    def current_player(self) -> Player:
        """Player whose turn it is, or who made the last move once the game is over."""
        return self._current_player

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def last_move(self) -> Optional[int]:
        return self.moves[-1] if self.moves else None

    def player_label(self, player: Optional[Player] = None) -> Hashable:
        """Label of ``player``, defaulting to the current player."""
        return self.labels[self._current_player if player is None else player]

    def is_game_over(self) -> bool:
        return self._state.is_game_over()

    def get_winner(self) -> Optional[Player]:
        return self._state.winner

    def get_valid_moves(self) -> List[int]:
        """
        Columns the current player may play.

        Returns:
            Column indices, empty once the game is over
        """
        if self.is_game_over():
            return []
        return self.board.get_valid_moves()

    def apply_move(self, column: int) -> MoveResult:
        """
        Drop the current player's piece into ``column``.

        The move is either applied completely or rejected without changing
        anything.

        Args:
            column: Column to play (0-indexed)

        Returns:
            PLACED, PLACED_AND_WON or PLACED_AND_TIED with the landing cell,
            or REJECTED with the reason
        """
        player = self._current_player
        debug.debug(f"Attempting move in column {column!r} for player {player.name}", "game")

        if self.is_game_over():
            return self._reject(RejectReason.GAME_ALREADY_OVER, column)

        if not self.board.is_valid_column(column):
            return self._reject(RejectReason.INVALID_COLUMN, column)

        column = int(column)
        row = self.board.find_drop_row(column)
        if row is None:
            return self._reject(RejectReason.COLUMN_FULL, column)

        self.board.place(row, column, player)
        self.moves.append(column)

        debug.start_timer("win_check")
        winning_line = self.find_winning_line(player)
        debug.end_timer("win_check", "game")

        if winning_line:
            self.winning_line = winning_line
            self._state = GameState.won(player)
            debug.info(f"Player {player.name} ({self.player_label(player)}) wins "
                       f"after move at ({row}, {column})", "game")
            return MoveResult.won(row, column, player)

        if self.board.is_full():
            self._state = GameState.tied()
            debug.info("Game ends in a tie", "game")
            return MoveResult.tied(row, column)

        self._current_player = player.other()
        debug.debug(f"Switching to player {self._current_player.name}", "game")
        return MoveResult.placed(row, column, player)

    def _reject(self, reason: RejectReason, column) -> MoveResult:
        debug.debug(f"Rejected move in column {column!r}: {reason.name}", "game")
        return MoveResult.rejected(reason)

    def check_win(self, player: Optional[Player] = None) -> bool:
        """Whether ``player`` (default: current player) has four in a row."""
        return bool(self.find_winning_line(self._current_player if player is None else player))

    def find_winning_line(self, player: Player) -> List[Coord]:
        return find_winning_line(self.board, player)

    def render(self) -> str:
        """Board as text, with the winning line marked once the game is won."""
        return self.board.render(self.winning_line)

    def __repr__(self) -> str:
        return (f"GameEngine({self.labels[Player.ONE]!r}, {self.labels[Player.TWO]!r}, "
                f"{self.board.height}x{self.board.width}, state={self._state}, "
                f"moves={len(self.moves)})")


def new_game(player1: Hashable = Player.ONE, player2: Hashable = Player.TWO,
             height: int = ROWS, width: int = COLS) -> GameEngine:
    """Start a fresh game session. Restarting a game means calling this again."""
    return GameEngine(player1, player2, height, width)


def find_winning_line(board: Board, player: Player) -> List[Coord]:
    """
    Scan the whole board for a line of CONNECT_N pieces owned by ``player``.

    Every cell is tried as the start of a line, rows top to bottom and
    columns left to right, with the directions in Direction order. The
    first complete line found is returned, so the reported line is
    deterministic when several exist.

    Returns:
        Coordinates of the line from its starting cell, or an empty list
    """
    grid = board.grid
    height, width = board.height, board.width

    for row in range(height):
        for col in range(width):
            if grid[row, col] != player.value:
                continue
            for direction in Direction:
                cells = line_cells(row, col, direction, CONNECT_N)
                if all(is_valid_position(r, c, height, width) and grid[r, c] == player.value
                       for r, c in cells):
                    debug.trace(f"{direction.name} line for {player.name} "
                                f"starting at ({row}, {col})", "game")
                    return cells
    return []


def analyze_grid(board: Board) -> Dict[Player, List[Coord]]:
    """
    Winning lines present on an arbitrary board, per player.

    Used by the command line's position test.
    """
    lines: Dict[Player, List[Coord]] = {}
    for player in (Player.ONE, Player.TWO):
        line = find_winning_line(board, player)
        if line:
            lines[player] = line
    return lines
