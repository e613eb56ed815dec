"""Game module for Falling Blocks.

Exports the core game engine and supporting classes:
- Grid: Locked-cell matrix, collision predicate and row removal
- Piece: Active piece with its static rotation tables
- PieceKind: Enum of the seven piece kinds
- Action: The five discrete moves offered to the engine
- FallingBlockGame: Engine state machine (active play -> game over)
"""

from .grid import Grid, ROWS, COLS, EMPTY
from .pieces import Action, Piece, PieceKind, KIND_COLORS, EMPTY_COLOR, ROTATION_STATES
from .core import FallingBlockGame, GameConfig

__all__ = [
    "Grid",
    "ROWS",
    "COLS",
    "EMPTY",
    "Action",
    "Piece",
    "PieceKind",
    "KIND_COLORS",
    "EMPTY_COLOR",
    "ROTATION_STATES",
    "FallingBlockGame",
    "GameConfig",
]
