from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import pygame

from falling_blocks.game import Action, FallingBlockGame, GameConfig


logger = logging.getLogger(__name__)


KEY_TO_ACTION: Dict[int, Action] = {
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_LEFT: Action.LEFT,
    pygame.K_UP: Action.ROTATE_CCW,
}

# Keys whose KEYDOWN only counts once until released.
HELD_KEYS = (pygame.K_UP, pygame.K_DOWN, pygame.K_SPACE)
SOFT_DROP_KEYS = (pygame.K_DOWN, pygame.K_SPACE)


@dataclass
class SessionConfig:
    frame_duration: float = 1.0 / 60.0
    standard_turn_duration: float = 0.6
    quick_turn_duration: float = 0.1
    window_size: Tuple[int, int] = (800, 600)
    music_dir: Optional[str] = None
    random_seed: Optional[int] = None


class Session:
    """Turns key events and elapsed time into engine actions.

    The session owns the over -> active transition: a finished engine is
    replaced by a new one at the end of the update that observed it.
    """

    def __init__(self, config: Optional[SessionConfig] = None) -> None:
        self.config = config or SessionConfig()
        self.seeds = random.Random(self.config.random_seed)
        self.pressed: Dict[int, bool] = {key: False for key in HELD_KEYS}
        self.frame_actions: List[Action] = []
        self.turn_elapsed = 0.0
        self.games_played = 0
        self.game = self._new_game()

    def _new_game(self) -> FallingBlockGame:
        self.games_played += 1
        return FallingBlockGame(GameConfig(random_seed=self.seeds.getrandbits(32)))

    @property
    def turn_duration(self) -> float:
        if any(self.pressed[key] for key in SOFT_DROP_KEYS):
            return self.config.quick_turn_duration
        return self.config.standard_turn_duration

    def key_down(self, key: int) -> bool:
        """Record a key press; return False when the loop should stop."""
        if key == pygame.K_ESCAPE:
            return False
        if self.pressed.get(key, False):
            return True
        action = KEY_TO_ACTION.get(key)
        if action is not None:
            self.frame_actions.append(action)
        if key in HELD_KEYS:
            self.pressed[key] = True
        return True

    def key_up(self, key: int) -> None:
        self.pressed[key] = False

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            return self.key_down(event.key)
        if event.type == pygame.KEYUP:
            self.key_up(event.key)
        return True

    def update(self, dt: float) -> None:
        self.turn_elapsed += dt
        if self.turn_elapsed > self.turn_duration:
            self.turn_elapsed = 0.0
            self.frame_actions.append(Action.DESCEND)

        for action in self.frame_actions:
            self.game.apply_action_if_legal(action)
        self.frame_actions.clear()

        if not self.game.is_active():
            logger.info(
                "Game %d over: %d pieces, %d lines; starting a new one",
                self.games_played,
                self.game.pieces_locked,
                self.game.lines_cleared_total,
            )
            self.game = self._new_game()
