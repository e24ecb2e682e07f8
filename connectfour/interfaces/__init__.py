"""
connectfour.interfaces - Presentation layers for Connect Four

The terminal interface (cli) and the Gymnasium environment (env) both sit
on top of the game engine and only react to the results it reports.
"""

# Don't import anything here; env pulls in gymnasium
__all__ = []
