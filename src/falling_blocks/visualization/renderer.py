from __future__ import annotations

from typing import Tuple

import numpy as np
import pygame

from falling_blocks.game import EMPTY, EMPTY_COLOR, KIND_COLORS, PieceKind


OUTLINE_COLOR = (0, 0, 0)


def color_for_value(v: int) -> Tuple[int, int, int]:
    if v == EMPTY:
        return EMPTY_COLOR
    return KIND_COLORS[PieceKind(v)]


class Renderer:
    """Draws a composite board centered horizontally in the window."""

    def __init__(self, window_size: Tuple[int, int], rows: int) -> None:
        width, height = window_size
        self.cell_size = height // rows
        self.origin = (int((width - 0.5 * height) / 2), 0)

    def cell_rect(self, x: int, y: int) -> pygame.Rect:
        ox, oy = self.origin
        return pygame.Rect(ox + x * self.cell_size, oy + y * self.cell_size, self.cell_size, self.cell_size)

    def draw_board(self, screen: pygame.Surface, board: np.ndarray) -> None:
        h, w = board.shape
        for y in range(h):
            for x in range(w):
                rect = self.cell_rect(x, y)
                pygame.draw.rect(screen, color_for_value(int(board[y, x])), rect)
                pygame.draw.rect(screen, OUTLINE_COLOR, rect, 1)

    def draw(self, screen: pygame.Surface, board: np.ndarray) -> None:
        screen.fill((0, 0, 0))
        self.draw_board(screen, board)
        pygame.display.flip()
