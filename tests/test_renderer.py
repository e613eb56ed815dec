import numpy as np
import pygame

from falling_blocks.game import COLS, EMPTY_COLOR, KIND_COLORS, ROWS, PieceKind
from falling_blocks.visualization.renderer import Renderer, color_for_value


def test_color_for_value():
    assert color_for_value(0) == EMPTY_COLOR
    for kind in PieceKind:
        assert color_for_value(int(kind)) == KIND_COLORS[kind]


def test_layout_follows_window_height():
    renderer = Renderer((800, 600), ROWS)
    assert renderer.cell_size == 30
    assert renderer.origin == (250, 0)
    assert renderer.cell_rect(1, 2) == pygame.Rect(280, 60, 30, 30)


def test_draw_board_fills_cells():
    renderer = Renderer((800, 600), ROWS)
    screen = pygame.Surface((800, 600))
    board = np.zeros((ROWS, COLS), dtype=np.int8)
    board[0, 1] = PieceKind.J

    renderer.draw_board(screen, board)

    assert tuple(screen.get_at((250 + 15, 15)))[:3] == EMPTY_COLOR
    assert tuple(screen.get_at((280 + 15, 15)))[:3] == KIND_COLORS[PieceKind.J]
    assert tuple(screen.get_at((250, 0)))[:3] == (0, 0, 0)
