"""
Centralized constants and types for the cube chess engine.
Single source of truth for enums, dtypes and default weights.
"""

import numpy as np
from enum import IntEnum


class Team(IntEnum):
    """Team enum for units."""
    WHITE = 1
    BLACK = 2

    def opposite(self) -> 'Team':
        """Return the opposing team."""
        if self == Team.WHITE:
            return Team.BLACK
        return Team.WHITE

    def sign(self) -> int:
        """+1 for white, -1 for black. Evaluations are white-positive."""
        return 1 if self == Team.WHITE else -1

    def is_white(self) -> bool:
        return self == Team.WHITE

    def is_black(self) -> bool:
        return self == Team.BLACK


class UnitKind(IntEnum):
    """Unit kind tag (0 is kept free as an EMPTY placeholder in arrays)."""
    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @classmethod
    def get_all_kinds(cls) -> list['UnitKind']:
        return [kind for kind in cls]

    def can_capture_over_edge(self) -> bool:
        """Knights leap cleanly across cube edges; nothing else captures there."""
        return self == UnitKind.KNIGHT


class CellColor(IntEnum):
    """Palette slot of a cell."""
    BRIGHT = 0
    MID = 1
    DARK = 2


# Core data types
COORD_DTYPE = np.int16
KIND_DTYPE = np.int8
TEAM_DTYPE = np.int8
FLOAT_DTYPE = np.float64

N_UNIT_KINDS = 6
EMPTY = 0

# Default material weights. The king is weighted so heavily that shallow search
# never trades it, since checkmate is not detected.
DEFAULT_MATERIAL_VALUES = {
    UnitKind.PAWN: 1.0,
    UnitKind.KNIGHT: 3.0,
    UnitKind.BISHOP: 3.0,
    UnitKind.ROOK: 5.0,
    UnitKind.QUEEN: 9.0,
    UnitKind.KING: 1000.0,
}


def material_table(values: dict) -> np.ndarray:
    """Dense weight array indexed by UnitKind value (slot 0 unused)."""
    table = np.zeros(N_UNIT_KINDS + 1, dtype=FLOAT_DTYPE)
    for kind, value in values.items():
        table[int(kind)] = float(value)
    return table


__all__ = [
    'Team', 'UnitKind', 'CellColor',
    'COORD_DTYPE', 'KIND_DTYPE', 'TEAM_DTYPE', 'FLOAT_DTYPE',
    'N_UNIT_KINDS', 'EMPTY', 'DEFAULT_MATERIAL_VALUES', 'material_table',
]
