"""
connectfour.game - Core game mechanics for Connect Four

This package contains the board representation, the rules engine that
drives a single game, and the result values it reports.
"""

from connectfour.game.board import Board
from connectfour.game.results import GameState, MoveOutcome, MoveResult, RejectReason
from connectfour.game.rules import GameEngine, find_winning_line, new_game

__all__ = ['Board', 'GameEngine', 'GameState', 'MoveOutcome', 'MoveResult',
           'RejectReason', 'find_winning_line', 'new_game']
