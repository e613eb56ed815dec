from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntEnum
from types import MappingProxyType
from typing import List, Mapping, Tuple

from .grid import COLS, Coordinate


class PieceKind(IntEnum):
    O = 1
    I = 2
    T = 3
    J = 4
    L = 5
    S = 6
    Z = 7


class Action(IntEnum):
    DESCEND = 0
    RIGHT = 1
    LEFT = 2
    ROTATE_CW = 3
    ROTATE_CCW = 4


Color = Tuple[int, int, int]
RotationState = Tuple[Coordinate, Coordinate, Coordinate, Coordinate]

EMPTY_COLOR: Color = (255, 255, 255)

KIND_COLORS: Mapping[PieceKind, Color] = MappingProxyType({
    PieceKind.O: (255, 255, 0),
    PieceKind.I: (0, 255, 255),
    PieceKind.T: (127, 2, 122),
    PieceKind.J: (0, 0, 255),
    PieceKind.L: (253, 128, 44),
    PieceKind.S: (0, 255, 0),
    PieceKind.Z: (255, 0, 0),
})

# (dx, dy) offsets from the pivot, y grows downwards.
ROTATION_STATES: Mapping[PieceKind, Tuple[RotationState, ...]] = MappingProxyType({
    PieceKind.O: (
        ((0, 0), (0, 1), (1, 0), (1, 1)),
    ),
    PieceKind.I: (
        ((-1, 0), (0, 0), (1, 0), (2, 0)),
        ((0, -1), (0, 0), (0, 1), (0, 2)),
    ),
    PieceKind.T: (
        ((-1, 0), (0, 0), (1, 0), (0, 1)),
        ((-1, 0), (0, 0), (0, -1), (0, 1)),
        ((-1, 0), (0, 0), (1, 0), (0, -1)),
        ((1, 0), (0, 0), (0, -1), (0, 1)),
    ),
    PieceKind.J: (
        ((-1, 0), (0, 0), (1, 0), (1, 1)),
        ((0, -1), (0, 0), (0, 1), (-1, 1)),
        ((-1, 0), (0, 0), (1, 0), (-1, -1)),
        ((0, -1), (0, 0), (0, 1), (1, -1)),
    ),
    PieceKind.L: (
        ((-1, 0), (0, 0), (1, 0), (-1, 1)),
        ((0, -1), (0, 0), (0, 1), (-1, -1)),
        ((-1, 0), (0, 0), (1, 0), (1, -1)),
        ((0, -1), (0, 0), (0, 1), (1, 1)),
    ),
    PieceKind.S: (
        ((-1, 1), (0, 1), (0, 0), (1, 0)),
        ((-1, -1), (-1, 0), (0, 0), (0, 1)),
    ),
    PieceKind.Z: (
        ((-1, 0), (0, 0), (0, 1), (1, 1)),
        ((-1, 1), (-1, 0), (0, 0), (0, -1)),
    ),
})

SPAWN_X = COLS // 2
SPAWN_Y = 0


@dataclass(frozen=True)
class Piece:
    kind: PieceKind
    rotation: int = 0
    x: int = SPAWN_X
    y: int = SPAWN_Y

    @classmethod
    def spawn(cls, kind: PieceKind) -> "Piece":
        return cls(kind=kind, rotation=0, x=SPAWN_X, y=SPAWN_Y)

    @property
    def color(self) -> int:
        return int(self.kind)

    @property
    def rotation_count(self) -> int:
        return len(ROTATION_STATES[self.kind])

    def rotated(self, delta: int) -> "Piece":
        # Python's % already maps negatives into [0, count)
        return replace(self, rotation=(self.rotation + delta) % self.rotation_count)

    def moved(self, dx: int, dy: int) -> "Piece":
        return replace(self, x=self.x + dx, y=self.y + dy)

    def apply(self, action: Action) -> "Piece":
        """Return the piece as it would be after `action`; self is unchanged."""
        if action == Action.DESCEND:
            return self.moved(0, 1)
        if action == Action.RIGHT:
            return self.moved(1, 0)
        if action == Action.LEFT:
            return self.moved(-1, 0)
        if action == Action.ROTATE_CW:
            return self.rotated(1)
        if action == Action.ROTATE_CCW:
            return self.rotated(-1)
        raise ValueError(f"unknown action: {action!r}")

    def occupied_cells(self) -> List[Coordinate]:
        state = ROTATION_STATES[self.kind][self.rotation]
        return [(self.x + dx, self.y + dy) for dx, dy in state]
