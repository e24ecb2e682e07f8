"""
env.py - Gymnasium environment for Connect Four

Wraps one GameEngine session behind the Gymnasium interface so external
agents and tools can drive games. Each reset starts a brand new engine; the
move results reported by the engine are translated into rewards.
"""

import numpy as np
import gymnasium as gym
from gymnasium import spaces
from typing import Dict, Optional, Tuple, Union

from connectfour.debug import debug
from connectfour.game.results import MoveOutcome, MoveResult
from connectfour.game.rules import GameEngine, new_game
from connectfour.utils import ROWS, COLS, Player

CELL_PIXELS = 50
PIECE_RADIUS = 20

BACKGROUND_RGB = (0, 0, 128)
PIECE_RGB = {
    Player.EMPTY: (0, 0, 0),
    Player.ONE: (255, 0, 0),
    Player.TWO: (255, 255, 0),
}


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.

    Both players act through the same environment; rewards are given from
    Player.ONE's point of view.
    """

    metadata = {'render_modes': ['ascii', 'human', 'rgb_array'], 'render_fps': 4}

    def __init__(self, render_mode: Optional[str] = None,
                 height: int = ROWS, width: int = COLS):
        """
        Args:
            render_mode: One of metadata['render_modes'], or None
            height: Board rows
            width: Board columns
        """
        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")

        debug.debug("Initializing ConnectFourEnv", "env")
        self.height = height
        self.width = width
        self.render_mode = render_mode

        self.action_space = spaces.Discrete(width)
        self.observation_space = spaces.Box(
            low=0, high=2, shape=(height, width), dtype=np.int8
        )

        self.engine: GameEngine = new_game(Player.ONE, Player.TWO, height, width)
        self.last_result: Optional[MoveResult] = None

        self.reward_win = 1.0
        self.reward_lose = -1.0
        self.reward_draw = 0.1
        self.reward_invalid_move = -0.5
        self.reward_step = -0.01

    def reset(self, seed: Optional[int] = None,
              options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        """
        Start a new game.

        Returns:
            Initial observation and info dictionary
        """
        debug.debug("Resetting environment", "env")
        super().reset(seed=seed)

        self.engine = new_game(Player.ONE, Player.TWO, self.height, self.width)
        self.last_result = None

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Play ``action`` for the player to move.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        if isinstance(action, np.integer):
            action = int(action)
        result = self.engine.apply_move(action)
        self.last_result = result

        if not result.accepted:
            debug.warning(f"Invalid action {action}: {result.reason.name}", "env")
            info = self._get_info()
            info['rejected'] = result.reason.name
            return self._get_observation(), self.reward_invalid_move, False, True, info

        reward = self.reward_step
        terminated = False
        if result.outcome == MoveOutcome.PLACED_AND_WON:
            reward = self.reward_win if result.player == Player.ONE else self.reward_lose
            terminated = True
            debug.info(f"Game over: Player {result.player.name} wins", "env")
        elif result.outcome == MoveOutcome.PLACED_AND_TIED:
            reward = self.reward_draw
            terminated = True
            debug.info("Game over: Tie", "env")

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[Union[str, np.ndarray]]:
        """
        Render the current game according to render_mode.

        Returns:
            A string for "ascii", an RGB array for "rgb_array", otherwise None
        """
        if self.render_mode is None:
            return None

        if self.render_mode == "ascii":
            return self.engine.render()

        if self.render_mode == "human":
            print(self.engine.render())
            return None

        return self._render_rgb()

    def _render_rgb(self) -> np.ndarray:
        frame = np.zeros((self.height * CELL_PIXELS, self.width * CELL_PIXELS, 3), dtype=np.uint8)
        frame[:, :] = BACKGROUND_RGB

        # Disc mask for a single cell, reused for every piece
        offsets = np.arange(CELL_PIXELS) - CELL_PIXELS // 2
        yy, xx = np.meshgrid(offsets, offsets, indexing='ij')
        disc = yy ** 2 + xx ** 2 <= PIECE_RADIUS ** 2

        for row in range(self.height):
            for col in range(self.width):
                cell = frame[row * CELL_PIXELS:(row + 1) * CELL_PIXELS,
                             col * CELL_PIXELS:(col + 1) * CELL_PIXELS]
                cell[disc] = PIECE_RGB[self.engine.board.get(row, col)]

        return frame

    def _get_observation(self) -> np.ndarray:
        return self.engine.board.get_state()

    def _get_info(self) -> Dict:
        valid_moves = self.engine.get_valid_moves()
        state = self.engine.state
        return {
            'valid_moves': valid_moves,
            'num_valid_moves': len(valid_moves),
            'current_player': self.engine.current_player.value,
            'game_status': state.status.name,
            'winner': state.winner.value if state.winner else None,
            'moves_made': len(self.engine.moves),
            'winning_line': list(self.engine.winning_line),
            'last_move': self.engine.last_move,
        }

    def close(self):
        pass
