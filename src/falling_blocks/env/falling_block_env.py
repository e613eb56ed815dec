from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from falling_blocks.game import COLS, ROWS, Action, FallingBlockGame, GameConfig, PieceKind
from falling_blocks.visualization.renderer import color_for_value


class FallingBlockEnv(gym.Env):
    """One engine action per step; reward is the number of rows cleared."""

    metadata = {"render_modes": ["rgb_array"], "render_fps": 30}

    def __init__(self, render_mode: Optional[str] = None, max_episode_steps: int = 10000) -> None:
        super().__init__()
        self.render_mode = render_mode
        self.max_episode_steps = int(max_episode_steps)
        self.observation_space = spaces.Box(
            low=0, high=int(max(PieceKind)), shape=(ROWS, COLS), dtype=np.int8
        )
        self.action_space = spaces.Discrete(len(Action))
        self.game = FallingBlockGame()
        self._steps = 0

    def _get_info(self) -> Dict[str, Any]:
        return {
            "lines_cleared_total": self.game.lines_cleared_total,
            "pieces_locked": self.game.pieces_locked,
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        game_seed = int(self.np_random.integers(0, 2**31 - 1))
        self.game = FallingBlockGame(GameConfig(random_seed=game_seed))
        self._steps = 0
        return self.game.current_composite_board(), self._get_info()

    def step(self, action: int):
        lines = self.game.apply_action_if_legal(Action(int(action)))
        self._steps += 1
        terminated = not self.game.is_active()
        truncated = self._steps >= self.max_episode_steps
        obs = self.game.current_composite_board()
        return obs, float(lines), terminated, truncated, self._get_info()

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode != "rgb_array":
            return None
        board = self.game.current_composite_board()
        cell = 12
        img = np.zeros((ROWS * cell, COLS * cell, 3), dtype=np.uint8)
        for y in range(ROWS):
            for x in range(COLS):
                img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color_for_value(int(board[y, x]))
        return img
