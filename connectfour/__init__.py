"""
connectfour - Connect Four rules engine

This package provides the board, the turn-based game engine with win and
tie detection, and presentation layers (a terminal interface and a
Gymnasium environment) built on the engine's move results.
"""

# Version number
__version__ = '0.1.0'
