"""
results.py - Values returned by the game engine

Moves never raise during play; each call to GameEngine.apply_move answers with
a MoveResult, and GameEngine.state answers with a GameState. Presentation
layers only need these two types to follow a game.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from connectfour.utils import GameStatus, Player


class MoveOutcome(Enum):
    PLACED = auto()
    PLACED_AND_WON = auto()
    PLACED_AND_TIED = auto()
    REJECTED = auto()


class RejectReason(Enum):
    """Why a move was refused. All of these are recoverable by the caller."""
    INVALID_COLUMN = auto()
    COLUMN_FULL = auto()
    GAME_ALREADY_OVER = auto()


@dataclass(frozen=True)
class MoveResult:
    """
    Outcome of a single call to apply_move.

    ``row``, ``column`` and ``player`` are set whenever a piece was placed,
    except that a tying move carries no player. ``reason`` is only set for
    rejected moves.
    """
    outcome: MoveOutcome
    row: Optional[int] = None
    column: Optional[int] = None
    player: Optional[Player] = None
    reason: Optional[RejectReason] = None

    @classmethod
    def placed(cls, row: int, column: int, player: Player) -> 'MoveResult':
        return cls(MoveOutcome.PLACED, row, column, player)

    @classmethod
    def won(cls, row: int, column: int, player: Player) -> 'MoveResult':
        return cls(MoveOutcome.PLACED_AND_WON, row, column, player)

    @classmethod
    def tied(cls, row: int, column: int) -> 'MoveResult':
        return cls(MoveOutcome.PLACED_AND_TIED, row, column)

    @classmethod
    def rejected(cls, reason: RejectReason) -> 'MoveResult':
        return cls(MoveOutcome.REJECTED, reason=reason)

    @property
    def accepted(self) -> bool:
        return self.outcome != MoveOutcome.REJECTED

    @property
    def is_terminal(self) -> bool:
        """True if this move ended the game."""
        return self.outcome in (MoveOutcome.PLACED_AND_WON, MoveOutcome.PLACED_AND_TIED)


@dataclass(frozen=True)
class GameState:
    """Current state of a game: in progress, won by ``winner``, or tied."""
    status: GameStatus
    winner: Optional[Player] = None

    @classmethod
    def in_progress(cls) -> 'GameState':
        return cls(GameStatus.IN_PROGRESS)

    @classmethod
    def won(cls, player: Player) -> 'GameState':
        return cls(GameStatus.WON, player)

    @classmethod
    def tied(cls) -> 'GameState':
        return cls(GameStatus.TIED)

    def is_game_over(self) -> bool:
        return self.status.is_game_over()

    def __str__(self) -> str:
        if self.status == GameStatus.WON:
            return f"WON({self.winner.name})"
        return self.status.name
