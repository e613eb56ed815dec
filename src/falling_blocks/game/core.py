from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .grid import Grid
from .pieces import Action, Piece, PieceKind


logger = logging.getLogger(__name__)


@dataclass
class GameConfig:
    random_seed: Optional[int] = None


class FallingBlockGame:
    """Locked grid plus one falling piece.

    Once `game_over` is set the instance ignores every action; whoever owns it
    decides when to build a fresh one.
    """

    def __init__(self, config: Optional[GameConfig] = None, grid: Optional[Grid] = None) -> None:
        self.config = config or GameConfig()
        self.rng = random.Random(self.config.random_seed)
        self.grid = grid.copy() if grid is not None else Grid()
        self.game_over = False
        self.lines_cleared_total = 0
        self.pieces_locked = 0
        self.piece = self._spawn_piece()

    def _random_kind(self) -> PieceKind:
        return self.rng.choice(list(PieceKind))

    def _spawn_piece(self) -> Piece:
        piece = Piece.spawn(self._random_kind())
        if not self.grid.can_place(piece.occupied_cells()):
            logger.info("Spawn of %s blocked, game over after %d pieces", piece.kind.name, self.pieces_locked)
            self.game_over = True
        return piece

    def is_active(self) -> bool:
        return not self.game_over

    def legal(self, piece: Piece) -> bool:
        return self.grid.can_place(piece.occupied_cells())

    def apply_action_if_legal(self, action: Action) -> int:
        """Apply `action` if the result is legal; return rows cleared by it."""
        if self.game_over:
            return 0
        candidate = self.piece.apply(action)
        if self.legal(candidate):
            self.piece = candidate
            return 0
        if action == Action.DESCEND:
            return self._lock_and_advance()
        return 0

    def _lock_and_advance(self) -> int:
        self.grid.paint(self.piece.occupied_cells(), self.piece.color)
        self.pieces_locked += 1
        lines = self._remove_full_rows()
        self.lines_cleared_total += lines
        logger.debug("Locked %s at (%d, %d), cleared %d rows", self.piece.kind.name, self.piece.x, self.piece.y, lines)
        self.piece = self._spawn_piece()
        return lines

    def _remove_full_rows(self) -> int:
        # Top-down: removing row y only shifts rows above y, all already checked
        lines = 0
        for y in range(self.grid.height):
            if self.grid.row_full(y):
                self.grid.remove_row(y)
                lines += 1
        return lines

    def current_composite_board(self) -> np.ndarray:
        board = self.grid.render_snapshot()
        for x, y in self.piece.occupied_cells():
            if self.grid.is_inside(x, y):
                board[y, x] = self.piece.color
        return board
